# borders/errors.py
"""Exceptions raised at the configuration boundary.

Formatting itself never fails; these only surface when a style is looked
up by name, parsed from a glyph string, or read from the environment.
"""

from typing import Iterable, Optional


class BordersError(Exception):
    """Base class for all borders errors."""


class UnknownStyleError(BordersError, LookupError):
    """Raised when a style name is not registered."""

    def __init__(self, name: str, available: Iterable[str]):
        self.name = name
        self.available = sorted(available)
        super().__init__(
            f"Unknown border style {name!r} (available: {', '.join(self.available)})"
        )


class InvalidGlyphsError(BordersError, ValueError):
    """Raised when a glyph string does not hold exactly eleven characters."""

    def __init__(self, glyphs: str):
        self.glyphs = glyphs
        super().__init__(
            f"Border style needs exactly 11 glyphs, got {len(glyphs)}: {glyphs!r}"
        )


class ConfigError(BordersError):
    """Raised when an environment setting cannot be turned into configuration."""

    def __init__(self, variable: str, value: Optional[str], reason: str):
        self.variable = variable
        self.value = value
        super().__init__(f"Invalid {variable}={value!r}: {reason}")
