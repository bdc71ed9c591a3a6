# borders/styles.py
"""Border styles: the glyph sets that decide how a table is drawn.

A style is plain data. Layout never depends on which style is used, so
rendering the same input with two styles yields the same shape with
different characters.

Usage:
    from borders.styles import THIN, get_style

    style = get_style("double")
    custom = BorderStyle.from_glyphs("|-+++++++++")
"""

import logging
from dataclasses import astuple, dataclass, fields
from typing import Dict, Union

from .errors import InvalidGlyphsError, UnknownStyleError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BorderStyle:
    """Eleven glyphs used to draw every line, corner and junction of a table.

    No validation is done on construction; degenerate styles (for example
    all blanks) are rendered mechanically.

    Attributes:
        vertical: Vertical separator between and around cells.
        horizontal: Horizontal separator used in every border line.
        horizontal_up: Joins up, left and right (bottom border junction).
        horizontal_down: Joins down, left and right (top border junction).
        vertical_right: Joins up, down and right (divider left edge).
        vertical_left: Joins up, down and left (divider right edge).
        top_left: Top-left corner.
        top_right: Top-right corner.
        bottom_left: Bottom-left corner.
        bottom_right: Bottom-right corner.
        cross: Joins in every direction (divider junction).
    """
    vertical: str
    horizontal: str
    horizontal_up: str
    horizontal_down: str
    vertical_right: str
    vertical_left: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    cross: str

    @classmethod
    def from_glyphs(cls, glyphs: str) -> "BorderStyle":
        """Build a style from an 11-character string in field order.

        Args:
            glyphs: Characters for vertical, horizontal, horizontal_up,
                horizontal_down, vertical_right, vertical_left, top_left,
                top_right, bottom_left, bottom_right and cross.

        Returns:
            The parsed BorderStyle.

        Raises:
            InvalidGlyphsError: If the string is not exactly 11 characters.
        """
        if len(glyphs) != len(fields(cls)):
            raise InvalidGlyphsError(glyphs)
        return cls(*glyphs)

    def glyphs(self) -> str:
        """Return the glyphs in field order (inverse of from_glyphs)."""
        return "".join(astuple(self))


# Format with a single thin line
#
# ┌───┬───┐
# │   │   │
# ├───┼───┤
# │   │   │
# └───┴───┘
THIN = BorderStyle(
    vertical="│",
    horizontal="─",
    horizontal_up="┴",
    horizontal_down="┬",
    vertical_right="├",
    vertical_left="┤",
    top_left="┌",
    top_right="┐",
    bottom_left="└",
    bottom_right="┘",
    cross="┼",
)

# Format with a double line
#
# ╔═══╦═══╗
# ║   ║   ║
# ╠═══╬═══╣
# ║   ║   ║
# ╚═══╩═══╝
DOUBLE = BorderStyle(
    vertical="║",
    horizontal="═",
    horizontal_up="╩",
    horizontal_down="╦",
    vertical_right="╠",
    vertical_left="╣",
    top_left="╔",
    top_right="╗",
    bottom_left="╚",
    bottom_right="╝",
    cross="╬",
)

# ASCII only (`+`, `-`, `|`)
#
# +---+---+
# |   |   |
# +---+---+
# |   |   |
# +---+---+
ASCII = BorderStyle(
    vertical="|",
    horizontal="-",
    horizontal_up="+",
    horizontal_down="+",
    vertical_right="+",
    vertical_left="+",
    top_left="+",
    top_right="+",
    bottom_left="+",
    bottom_right="+",
    cross="+",
)

DEFAULT_STYLE_NAME = "thin"

STYLES: Dict[str, BorderStyle] = {
    "thin": THIN,
    "double": DOUBLE,
    "ascii": ASCII,
}


def get_style(name: str) -> BorderStyle:
    """Look up a registered style by name (case-insensitive).

    Raises:
        UnknownStyleError: If no style is registered under that name.
    """
    key = name.strip().lower()
    try:
        return STYLES[key]
    except KeyError:
        raise UnknownStyleError(name, STYLES) from None


def resolve_style(spec: Union[BorderStyle, str, None]) -> BorderStyle:
    """Turn a style, a registered name, or an 11-glyph string into a style.

    None selects the default (thin) style.

    Registered names win over glyph strings, so an 11-letter name would
    still be looked up by name.

    Raises:
        UnknownStyleError: If spec is a string that is neither a registered
            name nor exactly 11 characters long, or is not a string at all.
    """
    if isinstance(spec, BorderStyle):
        return spec
    if spec is None:
        return get_style(DEFAULT_STYLE_NAME)
    if not isinstance(spec, str):
        raise UnknownStyleError(repr(spec), STYLES)
    if spec.strip().lower() in STYLES:
        return get_style(spec)
    if len(spec) == len(fields(BorderStyle)):
        logger.debug("Using custom glyph string %r as border style", spec)
        return BorderStyle.from_glyphs(spec)
    return get_style(spec)
