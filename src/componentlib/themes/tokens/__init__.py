"""
Design token modules.

Each module exposes one immutable default with no dependency on the others:
colors, typography, spacing, breakpoints, shadows, and shape.
"""

from .breakpoints import BREAKPOINT_TOKENS
from .colors import COLOR_TOKENS, DARK_BACKGROUND_TOKENS, DARK_TEXT_TOKENS
from .shadows import SHADOW_TOKENS, pad_shadows
from .shape import SHAPE_TOKENS
from .spacing import SPACING_TOKENS
from .typography import DEFAULT_FONT_FAMILY, TYPOGRAPHY_TOKENS

__all__ = [
    "BREAKPOINT_TOKENS",
    "COLOR_TOKENS",
    "DARK_BACKGROUND_TOKENS",
    "DARK_TEXT_TOKENS",
    "DEFAULT_FONT_FAMILY",
    "SHADOW_TOKENS",
    "SHAPE_TOKENS",
    "SPACING_TOKENS",
    "TYPOGRAPHY_TOKENS",
    "pad_shadows",
]
