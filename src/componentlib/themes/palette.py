"""
Palette shade derivation.

Fills in ``light``, ``dark`` and ``contrastText`` for a color category that
only declares ``main``:

- light: HSL lightness moved toward white by the tonal offset
- dark: HSL lightness moved toward black by the tonal offset
- contrastText: white when main's contrast ratio against white exceeds the
  contrast threshold, otherwise near-black
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from pydantic import ValidationError

from componentlib.core.color import contrast_ratio, darken, lighten, parse_color
from componentlib.core.errors import InvalidColorFormat, InvalidThemeShape
from componentlib.models.theme import CSSVar, ColorCategory, PaletteConfig

DEFAULT_TONAL_OFFSET = 0.2
DEFAULT_CONTRAST_THRESHOLD = 3.0

CONTRAST_TEXT_LIGHT = "#fff"
CONTRAST_TEXT_DARK = "rgba(0, 0, 0, 0.87)"


@lru_cache(maxsize=256)
def _derive_shades(
    main: str, tonal_offset: float, contrast_threshold: float
) -> tuple[str, str, str]:
    light = lighten(main, tonal_offset)
    dark = darken(main, tonal_offset)
    if contrast_ratio(main, CONTRAST_TEXT_LIGHT) > contrast_threshold:
        contrast_text = CONTRAST_TEXT_LIGHT
    else:
        contrast_text = CONTRAST_TEXT_DARK
    return light, dark, contrast_text


def derive_color_category(
    category: ColorCategory | Mapping[str, Any],
    tonal_offset: float = DEFAULT_TONAL_OFFSET,
    contrast_threshold: float = DEFAULT_CONTRAST_THRESHOLD,
) -> ColorCategory:
    """
    Populate the missing shades of a color category.

    Shades that are already set are kept as-is.

    Args:
        category: Category with at least ``main``
        tonal_offset: Fraction (0-1) by which light/dark move away from main
        contrast_threshold: Contrast ratio against white required for white text

    Returns:
        Fully populated ColorCategory

    Raises:
        InvalidColorFormat: If ``main`` is not a parseable color string
    """
    if not isinstance(category, ColorCategory):
        try:
            category = ColorCategory.model_validate(category)
        except ValidationError as exc:
            raise InvalidThemeShape(str(exc)) from exc

    main = category.main.fallback if isinstance(category.main, CSSVar) else category.main
    parse_color(main)

    if category.is_resolved:
        return category

    light, dark, contrast_text = _derive_shades(main, tonal_offset, contrast_threshold)

    return category.model_copy(
        update={
            "light": category.light if category.light is not None else light,
            "dark": category.dark if category.dark is not None else dark,
            "contrast_text": (
                category.contrast_text if category.contrast_text is not None else contrast_text
            ),
        }
    )


def derive_palette(palette: PaletteConfig) -> PaletteConfig:
    """Derive shades for every semantic category of a palette.

    Uses the palette's own tonal offset and contrast threshold. Background
    and text surfaces are left untouched.
    """
    derived: dict[str, ColorCategory] = {}
    for name, category in palette.categories().items():
        try:
            derived[name] = derive_color_category(
                category, palette.tonal_offset, palette.contrast_threshold
            )
        except InvalidColorFormat as exc:
            raise InvalidColorFormat(exc.value, path=f"palette.{name}.main") from exc
    return palette.model_copy(update=derived)
