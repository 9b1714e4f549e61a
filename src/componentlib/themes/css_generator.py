"""
CSS generator for themes.

Generates the CSS custom property declarations that a custom-property theme
references, including variant blocks selected via [data-theme="..."].
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from componentlib.models.theme import CSSVar, ThemeConfig

from .output_mode import custom_property_name, iter_token_leaves


def generate_theme_css(
    theme: ThemeConfig,
    selector: str = ":root",
    variants: Mapping[str, ThemeConfig] | None = None,
) -> str:
    """
    Generate CSS from a theme.

    Produces a custom property for every token leaf of the theme, followed by
    one block per variant so that switching ``data-theme`` swaps the values
    behind the references without recomputing the theme.

    Args:
        theme: Base theme
        selector: Selector for the base block
        variants: Variant themes keyed by name (e.g. {"dark": dark_theme})

    Returns:
        CSS string with the base block and variant blocks
    """
    lines: list[str] = []

    lines.append("/* Theme custom properties */")
    lines.append("/* Auto-generated - do not edit */")
    lines.append("")

    lines.append(f"{selector} {{")
    lines.extend(_generate_token_lines(theme, indent=2))
    lines.append("}")
    lines.append("")

    for name, variant in (variants or {}).items():
        lines.append(f"{_variant_selector(name)} {{")
        lines.extend(_generate_token_lines(variant, indent=2))
        lines.append("}")
        lines.append("")

    return "\n".join(lines)


def _generate_token_lines(theme: ThemeConfig, indent: int = 0) -> list[str]:
    """
    Generate CSS custom property lines for a theme's token leaves.

    Args:
        theme: Theme to render
        indent: Number of spaces for indentation

    Returns:
        List of CSS property lines
    """
    lines: list[str] = []
    prefix = " " * indent

    for path, value in iter_token_leaves(theme):
        name = custom_property_name(path, theme.css_var_prefix)
        lines.append(f"{prefix}--{name}: {_format_value(path[0], value)};")

    return lines


def _format_value(section: str, value: Any) -> str:
    """Render a token value; numeric shape tokens are pixel lengths."""
    if isinstance(value, CSSVar):
        value = value.fallback
    if isinstance(value, int | float):
        if section == "shape":
            return f"{value:g}px"
        return f"{value:g}"
    return str(value)


def _variant_selector(variant_name: str) -> str:
    """
    Get CSS selector for a variant.

    Args:
        variant_name: Variant name (e.g., "dark")

    Returns:
        CSS selector string
    """
    return f'[data-theme="{variant_name}"]'
