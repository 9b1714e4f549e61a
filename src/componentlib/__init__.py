"""
componentlib - theme engine for the component library.

This package provides:
- Models: theme configuration models (palette, typography, breakpoints, ...)
- Themes: token modules, theme factory, output modes, and context provider
- Core: color math and error types
"""

__version__ = "0.1.0"

from componentlib.core.errors import (
    InvalidColorFormat,
    InvalidThemeShape,
    ThemeError,
    ThemeLoadError,
)
from componentlib.models.theme import ThemeConfig
from componentlib.themes import ThemeProvider, create_theme, use_theme

__all__ = [
    "InvalidColorFormat",
    "InvalidThemeShape",
    "ThemeConfig",
    "ThemeError",
    "ThemeLoadError",
    "ThemeProvider",
    "create_theme",
    "use_theme",
]
