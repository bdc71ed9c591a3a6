"""Pytest fixtures for borders tests."""

import pytest

from borders.config import ENV_KEY_HEADER, ENV_STYLE, ENV_VALUE_HEADER


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove BORDERS_* variables so the developer's shell cannot leak in.

    Each variable is set before being deleted so monkeypatch also removes
    anything a test loads from a .env file.
    """
    for name in (ENV_STYLE, ENV_KEY_HEADER, ENV_VALUE_HEADER):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
