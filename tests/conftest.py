"""Shared pytest fixtures for theme tests."""

import pytest

from componentlib.models.theme import ThemeConfig
from componentlib.themes import create_theme


@pytest.fixture
def default_theme() -> ThemeConfig:
    """Return the library default theme."""
    return create_theme()


@pytest.fixture
def dark_theme() -> ThemeConfig:
    """Return a dark-mode theme."""
    return create_theme({"palette": {"mode": "dark"}})


@pytest.fixture
def custom_property_theme() -> ThemeConfig:
    """Return the default theme in custom property output mode."""
    return create_theme({"useCustomProperties": True})
