"""
Color tokens.

Only ``main`` is declared for the semantic categories; ``light``, ``dark``
and ``contrastText`` are derived when the theme is assembled.
"""

from __future__ import annotations

from componentlib.models.theme import BackgroundColors, ColorCategory, PaletteConfig, TextColors

COLOR_TOKENS = PaletteConfig(
    primary=ColorCategory(main="#1976d2"),
    secondary=ColorCategory(main="#9c27b0"),
    error=ColorCategory(main="#d32f2f"),
    warning=ColorCategory(main="#ed6c02"),
    info=ColorCategory(main="#0288d1"),
    success=ColorCategory(main="#2e7d32"),
    background=BackgroundColors(default="#fff", paper="#fff"),
    text=TextColors(
        primary="rgba(0, 0, 0, 0.87)",
        secondary="rgba(0, 0, 0, 0.6)",
        disabled="rgba(0, 0, 0, 0.38)",
    ),
)

# Surfaces used when an override selects the dark color scheme
DARK_BACKGROUND_TOKENS = BackgroundColors(default="#121212", paper="#121212")
DARK_TEXT_TOKENS = TextColors(
    primary="#fff",
    secondary="rgba(255, 255, 255, 0.7)",
    disabled="rgba(255, 255, 255, 0.5)",
)
