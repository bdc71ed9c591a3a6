"""Tests for console encoding setup."""

import io
import sys

from borders.console_encoding import can_encode, configure_utf8_output


def _stream(encoding):
    return io.TextIOWrapper(io.BytesIO(), encoding=encoding)


class TestConsoleEncoding:
    """Tests for UTF-8 reconfiguration."""

    def test_can_encode(self):
        """Should detect whether box glyphs fit the stream encoding."""
        assert can_encode(_stream("utf-8")) is True
        assert can_encode(_stream("cp1252")) is False

    def test_reconfigures_narrow_stream(self, monkeypatch):
        """A stream that cannot encode glyphs should switch to UTF-8."""
        narrow = _stream("ascii")
        monkeypatch.setattr(sys, "stdout", narrow)
        configure_utf8_output()
        assert narrow.encoding == "utf-8"

    def test_leaves_streams_without_reconfigure(self, monkeypatch):
        """Streams lacking reconfigure() should be left as they are."""

        class Plain:
            encoding = "ascii"

        plain = Plain()
        monkeypatch.setattr(sys, "stdout", plain)
        configure_utf8_output()
        assert plain.encoding == "ascii"
