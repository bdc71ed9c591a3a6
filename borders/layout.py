# borders/layout.py
"""Measurement and line-building helpers shared by both table renderers.

Widths are counted in Unicode scalar values (``len(str)``), not terminal
display columns, so wide CJK characters count as one.
"""

from typing import List, NamedTuple, Sequence


class CellMetrics(NamedTuple):
    """Physical lines of one cell plus their measured extent."""
    lines: List[str]
    height: int
    width: int


def split_lines(text: str) -> List[str]:
    """Split text into physical lines on line feeds.

    A trailing carriage return on each line is dropped, and a final line
    feed does not start an extra empty line. Empty text has no lines.

    Args:
        text: Cell text to split.

    Returns:
        The physical lines, in order.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def text_width(line: str) -> int:
    """Width of a single physical line in Unicode scalar values."""
    return len(line)


def measure(text: str) -> CellMetrics:
    """Split text and measure its height and widest line."""
    lines = split_lines(text)
    width = max((text_width(line) for line in lines), default=0)
    return CellMetrics(lines, len(lines), width)


def line_at(lines: Sequence[str], index: int) -> str:
    """Return the physical line at index, or blank past the end."""
    return lines[index] if index < len(lines) else ""


def align_right(text: str, width: int) -> str:
    """Right-align text within width by left-padding with spaces.

    Text wider than width is returned unchanged; it is never truncated.
    """
    assert width >= 0, f"negative column width {width}"
    return " " * max(0, width - text_width(text)) + text


def horizontal_rule(
    left: str,
    junction: str,
    right: str,
    fill: str,
    widths: Sequence[int],
) -> str:
    """Create a border or divider line.

    Args:
        left: Glyph opening the line.
        junction: Glyph placed between columns.
        right: Glyph closing the line.
        fill: Glyph repeated across each column.
        widths: Column widths (not including separators).

    Returns:
        Border string like "┌─────┬─────┐"
    """
    return left + junction.join(fill * width for width in widths) + right


def content_line(vertical: str, cells: Sequence[str], widths: Sequence[int]) -> str:
    """Create one physical content line with right-aligned cells.

    Args:
        vertical: Separator placed around and between cells.
        cells: The text of each cell for this physical line.
        widths: Column widths, one per cell.

    Returns:
        Row string like "│  hello│goodbye│"
    """
    padded = [align_right(cell, width) for cell, width in zip(cells, widths)]
    return vertical + vertical.join(padded) + vertical
