"""Tests for environment-driven configuration."""

import os

import pytest

from borders.config import FormatterConfig, load_config, load_env_file
from borders.errors import ConfigError, UnknownStyleError
from borders.styles import ASCII, DOUBLE, THIN, BorderStyle


class TestLoadConfig:
    """Tests for reading settings from an environment mapping."""

    def test_defaults(self):
        """Unset variables should keep the defaults."""
        assert load_config({}) == FormatterConfig(THIN, "Key", "Value")

    def test_reads_os_environ(self, monkeypatch):
        """Should read os.environ when no mapping is given."""
        monkeypatch.setenv("BORDERS_STYLE", "ascii")
        assert load_config().style is ASCII

    def test_style_name(self):
        """Style names should resolve through the registry."""
        assert load_config({"BORDERS_STYLE": "DOUBLE"}).style is DOUBLE

    def test_style_glyphs(self):
        """An 11-glyph string should become a custom style."""
        config = load_config({"BORDERS_STYLE": "|=+++++++++"})
        assert config.style == BorderStyle.from_glyphs("|=+++++++++")

    def test_blank_style_uses_default(self):
        """A blank variable should behave as unset."""
        assert load_config({"BORDERS_STYLE": "  "}).style is THIN

    def test_invalid_style(self):
        """Unknown styles should raise ConfigError chained to the lookup error."""
        with pytest.raises(ConfigError) as exc_info:
            load_config({"BORDERS_STYLE": "rounded"})
        assert exc_info.value.variable == "BORDERS_STYLE"
        assert exc_info.value.value == "rounded"
        assert isinstance(exc_info.value.__cause__, UnknownStyleError)

    def test_headers(self):
        """Header variables should override the defaults, even when empty."""
        config = load_config({"BORDERS_KEY_HEADER": "", "BORDERS_VALUE_HEADER": "Count"})
        assert config.key_header == ""
        assert config.value_header == "Count"


class TestLoadEnvFile:
    """Tests for .env loading."""

    def test_missing_file(self, tmp_path):
        """A missing file should be skipped."""
        assert load_env_file(tmp_path / ".env") is False

    def test_loads_file(self, tmp_path):
        """Variables from the file should reach load_config."""
        env_file = tmp_path / ".env"
        env_file.write_text("BORDERS_STYLE=double\nBORDERS_KEY_HEADER=Name\n", encoding="utf-8")

        assert load_env_file(env_file) is True
        assert os.environ["BORDERS_STYLE"] == "double"
        config = load_config()
        assert config.style is DOUBLE
        assert config.key_header == "Name"

    def test_existing_environment_wins(self, tmp_path, monkeypatch):
        """Variables already set should not be overridden."""
        monkeypatch.setenv("BORDERS_STYLE", "ascii")
        env_file = tmp_path / ".env"
        env_file.write_text("BORDERS_STYLE=double\n", encoding="utf-8")

        load_env_file(str(env_file))
        assert load_config().style is ASCII
