"""
Typography tokens.

Every variant pins the default font family explicitly so that headings and
body text can be changed independently.
"""

from __future__ import annotations

from componentlib.models.theme import TypographyConfig, TypographyVariant

DEFAULT_FONT_FAMILY = '"Roboto", "Helvetica", "Arial", sans-serif'


def _variant(
    font_size: str,
    font_weight: int,
    line_height: float,
    text_transform: str | None = None,
) -> TypographyVariant:
    return TypographyVariant(
        font_family=DEFAULT_FONT_FAMILY,
        font_size=font_size,
        font_weight=font_weight,
        line_height=line_height,
        text_transform=text_transform,
    )


TYPOGRAPHY_TOKENS = TypographyConfig(
    font_family=DEFAULT_FONT_FAMILY,
    h1=_variant("6rem", 300, 1.167),
    h2=_variant("3.75rem", 300, 1.2),
    h3=_variant("3rem", 400, 1.167),
    h4=_variant("2.125rem", 400, 1.235),
    h5=_variant("1.5rem", 400, 1.334),
    h6=_variant("1.25rem", 500, 1.6),
    body1=_variant("1rem", 400, 1.5),
    body2=_variant("0.875rem", 400, 1.43),
    caption=_variant("0.75rem", 400, 1.66),
    button=_variant("0.875rem", 500, 1.75, text_transform="uppercase"),
)
