# borders/config.py
"""Environment-driven defaults for formatters.

Settings come from the process environment, optionally seeded from a
``.env`` file:

    BORDERS_STYLE         style name (thin, double, ascii) or 11 glyphs
    BORDERS_KEY_HEADER    default key header for mappings (default: Key)
    BORDERS_VALUE_HEADER  default value header for mappings (default: Value)

An empty header variable is honoured, so setting both to empty turns the
header row off.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Union

from dotenv import load_dotenv

from .errors import ConfigError, InvalidGlyphsError, UnknownStyleError
from .styles import DEFAULT_STYLE_NAME, THIN, BorderStyle, resolve_style

logger = logging.getLogger(__name__)

ENV_STYLE = "BORDERS_STYLE"
ENV_KEY_HEADER = "BORDERS_KEY_HEADER"
ENV_VALUE_HEADER = "BORDERS_VALUE_HEADER"


@dataclass(frozen=True)
class FormatterConfig:
    """Resolved formatter settings.

    Attributes:
        style: Glyphs used for drawing.
        key_header: Header above the key column of mapping tables.
        value_header: Header above the value column of mapping tables.
    """
    style: BorderStyle = THIN
    key_header: str = "Key"
    value_header: str = "Value"


def load_env_file(path: Union[str, Path] = ".env") -> bool:
    """Load a .env file into the process environment if it exists.

    Variables already set in the environment are not overridden.

    Returns:
        True if the file was found and loaded.
    """
    env_path = Path(path)
    if not env_path.is_file():
        logger.debug(".env file not found at %s, using environment as-is", env_path.resolve())
        return False
    load_dotenv(env_path)
    logger.debug("Loaded %s", env_path.resolve())
    return True


def load_config(env: Optional[Mapping[str, str]] = None) -> FormatterConfig:
    """Build a FormatterConfig from environment variables.

    Args:
        env: Mapping to read from (default: os.environ).

    Returns:
        The resolved configuration; unset variables keep their defaults.

    Raises:
        ConfigError: If BORDERS_STYLE is neither a registered name nor an
            11-glyph string.
    """
    env = os.environ if env is None else env
    defaults = FormatterConfig()

    raw_style = env.get(ENV_STYLE)
    if raw_style is None or not raw_style.strip():
        style = defaults.style
        logger.debug("%s not set, using %r style", ENV_STYLE, DEFAULT_STYLE_NAME)
    else:
        try:
            style = resolve_style(raw_style)
        except (UnknownStyleError, InvalidGlyphsError) as exc:
            raise ConfigError(ENV_STYLE, raw_style, str(exc)) from exc
        logger.debug("%s=%r resolved to glyphs %r", ENV_STYLE, raw_style, style.glyphs())

    key_header = env.get(ENV_KEY_HEADER, defaults.key_header)
    value_header = env.get(ENV_VALUE_HEADER, defaults.value_header)
    return FormatterConfig(style=style, key_header=key_header, value_header=value_header)
