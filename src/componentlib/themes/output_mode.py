"""
Output mode selection.

With ``useCustomProperties`` enabled every token leaf under palette,
typography, shadows, and shape is replaced by a CSSVar reference whose
fallback is the computed value. Spacing and breakpoints stay numeric so
layout arithmetic keeps working.

Custom property names come from the leaf's path, kebab-cased and
hyphen-joined:

    palette.primary.contrastText  ->  palette-primary-contrast-text
    typography.h1.fontSize        ->  typography-h1-font-size
    shadows[3]                    ->  shadows-3
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from typing import Any

from pydantic import BaseModel

from componentlib.models.theme import CSSVar, ThemeConfig

TOKEN_SECTIONS: tuple[str, ...] = ("palette", "typography", "shadows", "shape")

_CAMEL_BOUNDARY_RE = re.compile(r"(?<!^)(?=[A-Z])")


def custom_property_name(path: Sequence[str], prefix: str = "") -> str:
    """Build a custom property name (without leading dashes) for a token path."""
    segments = [_CAMEL_BOUNDARY_RE.sub("-", segment).lower() for segment in path]
    if prefix:
        segments.insert(0, prefix)
    return "-".join(segments)


def _children(value: BaseModel) -> Iterator[tuple[str, str, Any]]:
    """Yield (field name, path segment, value) for a model's token fields."""
    skipped = getattr(value, "NON_TOKEN_FIELDS", frozenset())
    for name, field in type(value).model_fields.items():
        if name in skipped:
            continue
        yield name, field.alias or name, getattr(value, name)


def _wrap(value: Any, path: list[str], prefix: str) -> Any:
    if value is None or isinstance(value, CSSVar):
        return value
    if isinstance(value, BaseModel):
        update = {
            name: _wrap(child, [*path, segment], prefix)
            for name, segment, child in _children(value)
        }
        return value.model_copy(update=update)
    if isinstance(value, tuple):
        return tuple(_wrap(item, [*path, str(index)], prefix) for index, item in enumerate(value))
    return CSSVar(name=custom_property_name(path, prefix), fallback=value)


def apply_output_mode(config: ThemeConfig) -> ThemeConfig:
    """
    Apply the configured output mode to a theme.

    Args:
        config: Resolved theme

    Returns:
        ``config`` itself when custom properties are disabled, otherwise a new
        theme whose token leaves are CSSVar references. Leaves that already
        are references are kept as-is.
    """
    if not config.use_custom_properties:
        return config

    update = {
        section: _wrap(getattr(config, section), [section], config.css_var_prefix)
        for section in TOKEN_SECTIONS
    }
    return config.model_copy(update=update)


def _leaves(value: Any, path: list[str]) -> Iterator[tuple[list[str], Any]]:
    if value is None:
        return
    if isinstance(value, BaseModel) and not isinstance(value, CSSVar):
        for _, segment, child in _children(value):
            yield from _leaves(child, [*path, segment])
    elif isinstance(value, tuple):
        for index, item in enumerate(value):
            yield from _leaves(item, [*path, str(index)])
    else:
        yield path, value


def iter_token_leaves(config: ThemeConfig) -> Iterator[tuple[list[str], Any]]:
    """
    Iterate over the token leaves of a theme.

    Yields:
        (path, value) pairs, e.g. (["palette", "primary", "main"], "#1976d2").
        Values are literals or CSSVar references.
    """
    for section in TOKEN_SECTIONS:
        yield from _leaves(getattr(config, section), [section])
