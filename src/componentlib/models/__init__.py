"""
Theme configuration models.

This module exports the theme configuration models.
"""

from componentlib.models.theme import (
    BREAKPOINT_KEYS,
    COLOR_CATEGORIES,
    SHADOW_COUNT,
    TYPOGRAPHY_VARIANTS,
    BackgroundColors,
    BreakpointConfig,
    ColorCategory,
    CSSVar,
    PaletteConfig,
    ShapeConfig,
    TextColors,
    ThemeConfig,
    TypographyConfig,
    TypographyVariant,
)

__all__ = [
    # Constants
    "BREAKPOINT_KEYS",
    "COLOR_CATEGORIES",
    "SHADOW_COUNT",
    "TYPOGRAPHY_VARIANTS",
    # Models
    "BackgroundColors",
    "BreakpointConfig",
    "ColorCategory",
    "CSSVar",
    "PaletteConfig",
    "ShapeConfig",
    "TextColors",
    "ThemeConfig",
    "TypographyConfig",
    "TypographyVariant",
]
