# borders/formatter.py
"""Box-drawn table rendering for sequences, mappings and single values.

Two primitive renderers do all the work:

- the row table: one row, one column per element, every column sharing
  the width of the widest physical line;
- the key/value table: two independently sized columns, an optional
  header row, and a divider between every pair of entries.

Every other operation funnels into one of them. All operations are pure
and return a single string whose last line is the bottom border, with no
trailing newline.

Usage:
    from borders import THIN, BorderFormatter

    print(BorderFormatter(THIN).format_slice(["hello", "world"]))
    # ┌─────┬─────┐
    # │hello│world│
    # └─────┴─────┘
"""

import logging
from typing import (
    Any,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from .config import FormatterConfig, load_config
from .debug import debug_text
from .layout import CellMetrics, content_line, horizontal_rule, line_at, measure
from .styles import THIN, BorderStyle, resolve_style

logger = logging.getLogger(__name__)

DEFAULT_KEY_HEADER = "Key"
DEFAULT_VALUE_HEADER = "Value"

Pairs = Union[Mapping[Any, Any], Iterable[Tuple[Any, Any]]]


# ==================== Row table ====================

def format_slice(style: BorderStyle, values: Sequence[Any]) -> str:
    """Format a sequence into a single-row horizontal table.

    Each element is converted with ``str()``. Multi-line elements make the
    row taller; lines are right-aligned and shorter cells are blank-padded.

    Args:
        style: Glyphs to draw with.
        values: Elements to place one per column, in order.

    Returns:
        The rendered table, for example::

            ┌─────┬─────┐
            │hello│world│
            └─────┴─────┘
    """
    cells = [measure(str(value)) for value in values]
    height = max((cell.height for cell in cells), default=1) or 1
    width = max((cell.width for cell in cells), default=1) or 1
    widths = [width] * len(cells)
    logger.debug(
        "Row table: %d column(s), width %d, height %d", len(cells), width, height
    )

    lines = [
        horizontal_rule(
            style.top_left, style.horizontal_down, style.top_right, style.horizontal, widths
        )
    ]
    for index in range(height):
        lines.append(
            content_line(style.vertical, [line_at(cell.lines, index) for cell in cells], widths)
        )
    lines.append(
        horizontal_rule(
            style.bottom_left, style.horizontal_up, style.bottom_right, style.horizontal, widths
        )
    )
    return "\n".join(lines)


def format_iter(style: BorderStyle, values: Iterable[Any]) -> str:
    """Format a finite iterable as a row table, preserving iteration order."""
    return format_slice(style, list(values))


def format_display(style: BorderStyle, value: Any) -> str:
    """Draw a border around the display text (``str()``) of value."""
    return format_slice(style, [str(value)])


def format_debug(style: BorderStyle, value: Any) -> str:
    """Draw a border around the debug text of value (strings are quoted)."""
    return format_slice(style, [debug_text(value)])


# ==================== Key/value table ====================

def _entries(mapping: Pairs) -> List[Tuple[Any, Any]]:
    items = getattr(mapping, "items", None)
    if callable(items):
        return list(items())
    return list(mapping)


def _column_width(header: str, cells: List[CellMetrics]) -> int:
    return max([measure(header).width, 1] + [cell.width for cell in cells])


def format_hash_map_headers(
    style: BorderStyle,
    mapping: Pairs,
    key_header: str,
    value_header: str,
) -> str:
    """Format a mapping as a two-column table with the given headers.

    When both headers are empty no header row is drawn. Otherwise the
    headers form the first entry and are rendered exactly like data.
    Entries keep the mapping's own iteration order.

    Args:
        style: Glyphs to draw with.
        mapping: A mapping, or an iterable of (key, value) pairs.
        key_header: Text above the key (left) column.
        value_header: Text above the value (right) column.

    Returns:
        The rendered table, for example::

            ┌─────┬─────┐
            │ Name│Score│
            ├─────┼─────┤
            │  Jon│   38│
            └─────┴─────┘
    """
    entries = [
        (measure(str(key)), measure(str(value))) for key, value in _entries(mapping)
    ]
    key_width = _column_width(key_header, [key for key, _ in entries])
    value_width = _column_width(value_header, [value for _, value in entries])
    widths = [key_width, value_width]

    if key_header or value_header:
        entries.insert(0, (measure(key_header), measure(value_header)))
    logger.debug(
        "Key/value table: %d entr%s, key width %d, value width %d",
        len(entries),
        "y" if len(entries) == 1 else "ies",
        key_width,
        value_width,
    )

    divider = horizontal_rule(
        style.vertical_right, style.cross, style.vertical_left, style.horizontal, widths
    )
    lines = [
        horizontal_rule(
            style.top_left, style.horizontal_down, style.top_right, style.horizontal, widths
        )
    ]
    for position, (key, value) in enumerate(entries):
        if position:
            lines.append(divider)
        height = max(key.height, value.height)
        for index in range(height):
            lines.append(
                content_line(
                    style.vertical,
                    [line_at(key.lines, index), line_at(value.lines, index)],
                    widths,
                )
            )
    lines.append(
        horizontal_rule(
            style.bottom_left, style.horizontal_up, style.bottom_right, style.horizontal, widths
        )
    )
    return "\n".join(lines)


def format_hash_map(style: BorderStyle, mapping: Pairs) -> str:
    """Format a mapping using ``Key`` and ``Value`` as headers."""
    return format_hash_map_headers(style, mapping, DEFAULT_KEY_HEADER, DEFAULT_VALUE_HEADER)


# ==================== Bound formatter ====================

class BorderFormatter:
    """A border style bound as the receiver of every formatting operation.

    Features:
    - Same operations as the module functions, without passing the style
    - Configurable default headers for format_hash_map
    - initialize() accepts the same keys as the environment configuration
    """

    def __init__(
        self,
        style: Union[BorderStyle, str, None] = THIN,
        key_header: str = DEFAULT_KEY_HEADER,
        value_header: str = DEFAULT_VALUE_HEADER,
    ):
        self._style = resolve_style(style)
        self.default_key_header = key_header
        self.default_value_header = value_header

    @property
    def style(self) -> BorderStyle:
        """The glyphs this formatter draws with."""
        return self._style

    def initialize(self, config: Optional[Dict[str, Any]] = None) -> None:
        """Initialize the formatter with configuration.

        Args:
            config: Dict with optional settings:
                - style: BorderStyle, registered name or 11-glyph string
                - key_header: Default key header (default: "Key")
                - value_header: Default value header (default: "Value")
        """
        config = config or {}
        if "style" in config:
            self._style = resolve_style(config["style"])
        self.default_key_header = config.get("key_header", self.default_key_header)
        self.default_value_header = config.get("value_header", self.default_value_header)

    def format_slice(self, values: Sequence[Any]) -> str:
        return format_slice(self._style, values)

    def format_iter(self, values: Iterable[Any]) -> str:
        return format_iter(self._style, values)

    def format_hash_map(self, mapping: Pairs) -> str:
        return format_hash_map_headers(
            self._style, mapping, self.default_key_header, self.default_value_header
        )

    def format_hash_map_headers(self, mapping: Pairs, key_header: str, value_header: str) -> str:
        return format_hash_map_headers(self._style, mapping, key_header, value_header)

    def format_display(self, value: Any) -> str:
        return format_display(self._style, value)

    def format_debug(self, value: Any) -> str:
        return format_debug(self._style, value)

    def __repr__(self) -> str:
        return f"BorderFormatter(style={self._style.glyphs()!r})"


def create_formatter(
    style: Union[BorderStyle, str, None] = None,
    config: Optional[FormatterConfig] = None,
) -> BorderFormatter:
    """Factory function to create a BorderFormatter.

    Args:
        style: Overrides the configured style when given.
        config: Settings to use; read from the environment when omitted.

    Raises:
        ConfigError: If the environment holds an invalid style.
    """
    config = config or load_config()
    return BorderFormatter(
        style if style is not None else config.style,
        key_header=config.key_header,
        value_header=config.value_header,
    )
