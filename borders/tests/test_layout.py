"""Tests for line splitting, measuring and line builders."""

import pytest

from borders.layout import (
    CellMetrics,
    align_right,
    content_line,
    horizontal_rule,
    line_at,
    measure,
    split_lines,
)


class TestSplitLines:
    """Tests for physical line splitting."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("", []),
            ("a", ["a"]),
            ("a\nb", ["a", "b"]),
            ("a\n", ["a"]),
            ("a\n\n", ["a", ""]),
            ("\n", [""]),
            ("a\r\nb\r\n", ["a", "b"]),
            ("a\rb", ["a\rb"]),
        ],
    )
    def test_split(self, text, expected):
        """Should split on line feeds only."""
        assert split_lines(text) == expected

    def test_other_separators_are_not_line_breaks(self):
        """Unicode line separators should stay inside the line."""
        assert split_lines("a\u2028b\x0cc") == ["a\u2028b\x0cc"]


class TestMeasure:
    """Tests for cell measurement."""

    def test_multi_line(self):
        """Should report line count and widest line."""
        assert measure("ab\ncde\nf") == CellMetrics(["ab", "cde", "f"], 3, 3)

    def test_empty(self):
        """Empty text has no lines and no width."""
        assert measure("") == CellMetrics([], 0, 0)

    def test_scalar_width(self):
        """Width counts code points, not bytes or terminal columns."""
        assert measure("日本語").width == 3
        assert measure("naïve").width == 5


class TestLineBuilders:
    """Tests for padding and border construction."""

    def test_align_right(self):
        """Should left-pad to width without truncating."""
        assert align_right("ab", 4) == "  ab"
        assert align_right("abcdef", 4) == "abcdef"

    def test_line_at(self):
        """Should return blanks past the last line."""
        assert line_at(["a"], 0) == "a"
        assert line_at(["a"], 3) == ""

    def test_horizontal_rule(self):
        """Should join column fills with the junction glyph."""
        assert horizontal_rule("├", "┼", "┤", "─", [2, 3]) == "├──┼───┤"
        assert horizontal_rule("┌", "┬", "┐", "─", []) == "┌┐"

    def test_content_line(self):
        """Should right-align each cell and bound it with verticals."""
        assert content_line("│", ["a", "bc"], [3, 3]) == "│  a│ bc│"
        assert content_line("│", [], []) == "││"
