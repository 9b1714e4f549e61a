"""
Theme factory.

Resolves the final theme by merging:
1. Assembled defaults (token modules with derived palette shades)
2. Caller overrides (highest precedence)

then re-deriving palette shades and applying the output mode.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache
from types import UnionType
from typing import Any, Union, get_args, get_origin

from pydantic import BaseModel, ValidationError

from componentlib.core.errors import InvalidThemeShape
from componentlib.models.theme import (
    COLOR_CATEGORIES,
    TYPOGRAPHY_VARIANTS,
    CSSVar,
    ThemeConfig,
)

from .merge import deep_merge
from .output_mode import apply_output_mode
from .palette import derive_palette
from .presets import assemble_defaults
from .tokens import DARK_BACKGROUND_TOKENS, DARK_TEXT_TOKENS

logger = logging.getLogger(__name__)

_SHADE_KEYS = frozenset({"light", "dark", "contrastText"})
_DERIVATION_KEYS = ("tonalOffset", "contrastThreshold")


def create_theme(override: Mapping[str, Any] | None = None) -> ThemeConfig:
    """
    Create a theme from the library defaults and optional overrides.

    Overrides may be nested to any depth and only replace the leaves they
    name. Keys may be given in camelCase (``contrastText``) or snake_case
    (``contrast_text``).

    Color categories whose ``main`` is overridden get ``light``, ``dark`` and
    ``contrastText`` recomputed from the new main, except for shades supplied
    in the same override. A root ``typography.fontFamily`` override applies to
    every variant that does not set its own ``fontFamily`` in the override.

    Args:
        override: Partial theme configuration

    Returns:
        Resolved ThemeConfig. Without overrides this is the shared default.

    Raises:
        InvalidThemeShape: If the override has unknown keys or invalid values
        InvalidColorFormat: If a color category's ``main`` cannot be parsed
    """
    if not override:
        return assemble_defaults()

    normalized = _normalize_override(ThemeConfig, override, "")
    base = assemble_defaults().model_dump(by_alias=True)

    palette_override = normalized.get("palette")
    if isinstance(palette_override, Mapping) and palette_override.get("mode") == "dark":
        base["palette"] = {
            **base["palette"],
            "background": DARK_BACKGROUND_TOKENS.model_dump(by_alias=True),
            "text": DARK_TEXT_TOKENS.model_dump(by_alias=True),
        }

    merged = deep_merge(base, normalized)

    if isinstance(palette_override, Mapping) and isinstance(merged.get("palette"), Mapping):
        merged["palette"] = _drop_stale_shades(merged["palette"], palette_override)

    typography_override = normalized.get("typography")
    if (
        isinstance(typography_override, Mapping)
        and "fontFamily" in typography_override
        and isinstance(merged.get("typography"), Mapping)
    ):
        merged["typography"] = _cascade_font_family(merged["typography"], typography_override)

    try:
        theme = ThemeConfig.model_validate(merged)
    except ValidationError as exc:
        error = exc.errors()[0]
        path = ".".join(str(part) for part in error["loc"])
        raise InvalidThemeShape(error["msg"], path=path or None) from exc

    theme = theme.model_copy(update={"palette": derive_palette(theme.palette)})
    logger.debug("Resolved theme with overrides for %s", sorted(normalized))
    return apply_output_mode(theme)


def _model_type(annotation: Any) -> type[BaseModel] | None:
    """Get the nested config model behind a field annotation, if any."""
    if get_origin(annotation) in (Union, UnionType):
        candidates = get_args(annotation)
    else:
        candidates = (annotation,)
    for candidate in candidates:
        if (
            isinstance(candidate, type)
            and issubclass(candidate, BaseModel)
            and candidate is not CSSVar
        ):
            return candidate
    return None


@lru_cache(maxsize=None)
def _field_lookup(model: type[BaseModel]) -> dict[str, tuple[str, type[BaseModel] | None]]:
    """Map each accepted key (alias and field name) to its alias and nested model."""
    lookup: dict[str, tuple[str, type[BaseModel] | None]] = {}
    for name, field in model.model_fields.items():
        alias = field.alias or name
        entry = (alias, _model_type(field.annotation))
        lookup[alias] = entry
        lookup[name] = entry
    return lookup


def _normalize_override(
    model: type[BaseModel], override: Mapping[str, Any], path: str
) -> dict[str, Any]:
    """
    Check override keys against the config schema and normalise them to aliases.

    Raises:
        InvalidThemeShape: On the first key the schema does not define, or a
            key given in both camelCase and snake_case
    """
    if not isinstance(override, Mapping):
        raise InvalidThemeShape(
            f"expected a mapping, got {type(override).__name__}", path=path or None
        )

    lookup = _field_lookup(model)
    normalized: dict[str, Any] = {}
    for key, value in override.items():
        key_path = f"{path}.{key}" if path else str(key)
        if key not in lookup:
            raise InvalidThemeShape(f"unknown theme key {key!r}", path=key_path)
        alias, nested = lookup[key]
        if alias in normalized:
            raise InvalidThemeShape(
                f"theme key {alias!r} given under more than one spelling",
                path=key_path,
            )
        if nested is not None and isinstance(value, Mapping):
            value = _normalize_override(nested, value, key_path)
        normalized[alias] = value
    return normalized


def _drop_stale_shades(palette: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """
    Remove derived shades that no longer match the merged palette.

    A category whose ``main`` was overridden loses the shades the override did
    not supply. Changing the tonal offset or contrast threshold clears the
    non-explicit shades of every category.
    """
    rederive_all = any(key in override for key in _DERIVATION_KEYS)
    result = dict(palette)
    for name in COLOR_CATEGORIES:
        category = result.get(name)
        category_override = override.get(name)
        explicit = category_override if isinstance(category_override, Mapping) else {}
        if not isinstance(category, Mapping):
            continue
        if not (rederive_all or "main" in explicit):
            continue
        result[name] = {
            key: value
            for key, value in category.items()
            if key not in _SHADE_KEYS or key in explicit
        }
    return result


def _cascade_font_family(
    typography: Mapping[str, Any], override: Mapping[str, Any]
) -> dict[str, Any]:
    """Apply an overridden root font family to variants not overriding their own."""
    family = override["fontFamily"]
    result = dict(typography)
    for name in TYPOGRAPHY_VARIANTS:
        variant = result.get(name)
        variant_override = override.get(name)
        if isinstance(variant_override, Mapping) and "fontFamily" in variant_override:
            continue
        if not isinstance(variant, Mapping):
            continue
        result[name] = {**variant, "fontFamily": family}
    return result
