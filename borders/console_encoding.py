# borders/console_encoding.py
"""Console encoding setup so box-drawing glyphs can be printed.

Windows consoles (cmd, PowerShell) and some pipes default to code pages
such as cp1252 that cannot encode ``┌`` or ``═``. Printing a table there
raises UnicodeEncodeError unless the stream is switched to UTF-8.
"""

import codecs
import logging
import os
import sys
from typing import TextIO

logger = logging.getLogger(__name__)

# One glyph from each built-in Unicode style
_PROBE = "┼╬"


def can_encode(stream: TextIO, text: str = _PROBE) -> bool:
    """Return True if stream's encoding can represent text."""
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        codecs.encode(text, encoding)
    except (UnicodeEncodeError, LookupError):
        return False
    return True


def configure_utf8_output() -> None:
    """Switch stdout and stderr to UTF-8 when they cannot encode box glyphs.

    Uses 'replace' error handling so unencodable characters become '?'
    instead of raising. Also sets PYTHONIOENCODING/PYTHONUTF8 on Windows
    so child processes inherit UTF-8 output.

    Streams without reconfigure() (for example captured test output) are
    left alone.
    """
    if sys.platform == "win32":
        os.environ.setdefault("PYTHONUTF8", "1")
        os.environ.setdefault("PYTHONIOENCODING", "utf-8:replace")

    for name in ("stdout", "stderr"):
        stream = getattr(sys, name)
        if can_encode(stream):
            continue
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is None:
            logger.debug("sys.%s cannot be reconfigured, leaving encoding as-is", name)
            continue
        try:
            reconfigure(encoding="utf-8", errors="replace")
        except (OSError, ValueError) as exc:
            logger.debug("Could not switch sys.%s to UTF-8: %s", name, exc)
