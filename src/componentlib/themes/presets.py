"""
Default theme assembly.

Combines the six token modules into one theme configuration and derives the
palette shades. The assembled default is computed once and memoised.
"""

from __future__ import annotations

import logging
from typing import Any

from componentlib.models.theme import ThemeConfig

from .palette import derive_palette
from .tokens import (
    BREAKPOINT_TOKENS,
    COLOR_TOKENS,
    SHADOW_TOKENS,
    SHAPE_TOKENS,
    SPACING_TOKENS,
    TYPOGRAPHY_TOKENS,
)

logger = logging.getLogger(__name__)

# Write-once memo; concurrent first calls build equal themes, last write wins.
_DEFAULT_THEME: ThemeConfig | None = None


def _build_default_theme() -> ThemeConfig:
    theme = ThemeConfig(
        palette=COLOR_TOKENS,
        typography=TYPOGRAPHY_TOKENS,
        spacing=SPACING_TOKENS,
        breakpoints=BREAKPOINT_TOKENS,
        shadows=SHADOW_TOKENS,
        shape=SHAPE_TOKENS,
        use_custom_properties=False,
    )
    return theme.model_copy(update={"palette": derive_palette(theme.palette)})


def assemble_defaults() -> ThemeConfig:
    """
    Get the library's default theme.

    Returns the same object on every call once it has been built.

    Returns:
        Default ThemeConfig with all palette shades derived
    """
    global _DEFAULT_THEME
    theme = _DEFAULT_THEME
    if theme is None:
        theme = _build_default_theme()
        _DEFAULT_THEME = theme
        logger.debug("Assembled default theme")
    return theme


def default_theme_options() -> dict[str, Any]:
    """
    Get the raw token data as an override-shaped dict.

    Unlike ``assemble_defaults()`` the palette shades are not derived.
    Keys use the camelCase override spelling.
    """
    return {
        "palette": COLOR_TOKENS.model_dump(by_alias=True),
        "typography": TYPOGRAPHY_TOKENS.model_dump(by_alias=True),
        "spacing": SPACING_TOKENS,
        "breakpoints": BREAKPOINT_TOKENS.model_dump(by_alias=True),
        "shadows": list(SHADOW_TOKENS),
        "shape": SHAPE_TOKENS.model_dump(by_alias=True),
        "useCustomProperties": False,
    }
