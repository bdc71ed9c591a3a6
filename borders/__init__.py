"""Format sequences, mappings and single values as box-drawn text tables.

Supported inputs:
- sequences with format_slice
- iterables with format_iter
- mappings with format_hash_map / format_hash_map_headers
- any value's str() with format_display
- any value's debug text with format_debug

Example:
    from borders import THIN, BorderFormatter

    formatter = BorderFormatter(THIN)
    print(formatter.format_slice([0, 1, 2, 3, 4]))
    print(formatter.format_hash_map({"Jon": 38, "Jake": 25, "Josh": 17}))
    print(formatter.format_debug("hello"))
"""

from .config import FormatterConfig, load_config, load_env_file
from .debug import debug_text
from .errors import BordersError, ConfigError, InvalidGlyphsError, UnknownStyleError
from .formatter import (
    BorderFormatter,
    create_formatter,
    format_debug,
    format_display,
    format_hash_map,
    format_hash_map_headers,
    format_iter,
    format_slice,
)
from .styles import ASCII, DOUBLE, STYLES, THIN, BorderStyle, get_style, resolve_style

__all__ = [
    # Styles
    "BorderStyle",
    "THIN",
    "DOUBLE",
    "ASCII",
    "STYLES",
    "get_style",
    "resolve_style",
    # Formatting
    "BorderFormatter",
    "create_formatter",
    "format_slice",
    "format_iter",
    "format_hash_map",
    "format_hash_map_headers",
    "format_display",
    "format_debug",
    "debug_text",
    # Configuration
    "FormatterConfig",
    "load_config",
    "load_env_file",
    # Errors
    "BordersError",
    "ConfigError",
    "InvalidGlyphsError",
    "UnknownStyleError",
]
