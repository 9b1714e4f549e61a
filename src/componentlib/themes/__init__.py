"""
Theme System.

Assembles the design token modules into one theme configuration, merges
caller overrides onto the defaults, derives palette shades, and optionally
emits CSS custom property references.

Usage:
    from componentlib.themes import (
        ThemeProvider,
        create_theme,
        generate_theme_css,
        use_theme,
    )

    # Default theme
    theme = create_theme()

    # Customized theme
    theme = create_theme({
        "palette": {"primary": {"main": "#ff5722"}},
        "typography": {"fontFamily": '"Inter", sans-serif'},
    })

    # Provide it to everything inside the block
    with ThemeProvider(theme):
        use_theme().palette.primary.dark
"""

from .css_generator import generate_theme_css
from .loader import create_theme_from_file, load_theme_overrides
from .merge import deep_merge
from .output_mode import apply_output_mode, custom_property_name, iter_token_leaves
from .palette import derive_color_category, derive_palette
from .presets import assemble_defaults, default_theme_options
from .provider import ThemeProvider, use_theme
from .resolver import create_theme

__all__ = [
    # Factory
    "create_theme",
    "create_theme_from_file",
    "load_theme_overrides",
    # Defaults
    "assemble_defaults",
    "default_theme_options",
    # Building blocks
    "deep_merge",
    "derive_color_category",
    "derive_palette",
    # Output
    "apply_output_mode",
    "custom_property_name",
    "generate_theme_css",
    "iter_token_leaves",
    # Context
    "ThemeProvider",
    "use_theme",
]
