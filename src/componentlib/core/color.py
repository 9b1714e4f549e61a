"""
Pure-Python color parsing and color math.

Parses CSS hex, rgb(), rgba(), hsl() and hsla() strings and provides the
HSL lightness interpolation and WCAG contrast helpers used to derive
palette shades. No external color libraries required.
"""

from __future__ import annotations

import colorsys
import re
from collections.abc import Callable
from typing import NamedTuple

from .errors import InvalidColorFormat

_HEX_RE = re.compile(r"^#(?P<digits>[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_NUMBER = r"[+-]?(?:\d+\.?\d*|\.\d+)"
_RGB_RE = re.compile(
    rf"^rgba?\(\s*(?P<r>{_NUMBER})\s*,\s*(?P<g>{_NUMBER})\s*,\s*(?P<b>{_NUMBER})"
    rf"\s*(?:,\s*(?P<a>{_NUMBER})(?P<a_pct>%)?\s*)?\)$",
    re.IGNORECASE,
)
_HSL_RE = re.compile(
    rf"^hsla?\(\s*(?P<h>{_NUMBER})(?:deg)?\s*,\s*(?P<s>{_NUMBER})%\s*,\s*(?P<l>{_NUMBER})%"
    rf"\s*(?:,\s*(?P<a>{_NUMBER})(?P<a_pct>%)?\s*)?\)$",
    re.IGNORECASE,
)


class RGBA(NamedTuple):
    """An sRGB color with 0-255 channels and 0-1 alpha."""

    r: float
    g: float
    b: float
    alpha: float = 1.0


def _parse_alpha(raw: str | None, percent: str | None, value: str) -> float:
    if raw is None:
        return 1.0
    alpha = float(raw) / 100 if percent else float(raw)
    if not 0.0 <= alpha <= 1.0:
        raise InvalidColorFormat(value)
    return alpha


def parse_color(value: str) -> RGBA:
    """Parse a CSS color string.

    Args:
        value: Hex (#rgb, #rgba, #rrggbb, #rrggbbaa), rgb(), rgba(), hsl() or hsla().

    Returns:
        Parsed RGBA color.

    Raises:
        InvalidColorFormat: If the value is not a supported color string.
    """
    if not isinstance(value, str):
        raise InvalidColorFormat(value)
    text = value.strip()

    match = _HEX_RE.match(text)
    if match:
        digits = match.group("digits")
        if len(digits) in (3, 4):
            digits = "".join(ch * 2 for ch in digits)
        channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        alpha = channels[3] / 255 if len(channels) == 4 else 1.0
        return RGBA(channels[0], channels[1], channels[2], alpha)

    match = _RGB_RE.match(text)
    if match:
        channels = [float(match.group(name)) for name in ("r", "g", "b")]
        if any(not 0.0 <= channel <= 255.0 for channel in channels):
            raise InvalidColorFormat(value)
        alpha = _parse_alpha(match.group("a"), match.group("a_pct"), value)
        return RGBA(channels[0], channels[1], channels[2], alpha)

    match = _HSL_RE.match(text)
    if match:
        hue = float(match.group("h")) % 360
        saturation = float(match.group("s"))
        lightness = float(match.group("l"))
        if not (0.0 <= saturation <= 100.0 and 0.0 <= lightness <= 100.0):
            raise InvalidColorFormat(value)
        alpha = _parse_alpha(match.group("a"), match.group("a_pct"), value)
        r, g, b = colorsys.hls_to_rgb(hue / 360, lightness / 100, saturation / 100)
        return RGBA(r * 255, g * 255, b * 255, alpha)

    raise InvalidColorFormat(value)


def format_color(color: RGBA) -> str:
    """Format a color as #rrggbb, or rgba() when it is translucent."""
    r, g, b = (round(channel) for channel in color[:3])
    if color.alpha >= 1.0:
        return f"#{r:02x}{g:02x}{b:02x}"
    return f"rgba({r}, {g}, {b}, {round(color.alpha, 3):g})"


def _with_lightness(color: RGBA, transform: Callable[[float], float]) -> RGBA:
    hue, lightness, saturation = colorsys.rgb_to_hls(color.r / 255, color.g / 255, color.b / 255)
    lightness = min(1.0, max(0.0, transform(lightness)))
    r, g, b = colorsys.hls_to_rgb(hue, lightness, saturation)
    return RGBA(r * 255, g * 255, b * 255, color.alpha)


def lighten(value: str, amount: float) -> str:
    """Move a color's HSL lightness toward white by ``amount`` (0-1)."""
    color = parse_color(value)
    return format_color(_with_lightness(color, lambda lum: lum + (1.0 - lum) * amount))


def darken(value: str, amount: float) -> str:
    """Move a color's HSL lightness toward black by ``amount`` (0-1)."""
    color = parse_color(value)
    return format_color(_with_lightness(color, lambda lum: lum * (1.0 - amount)))


def _linearize(channel: float) -> float:
    c = channel / 255
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(value: str) -> float:
    """WCAG relative luminance (0 for black, 1 for white). Alpha is ignored."""
    color = parse_color(value)
    return (
        0.2126 * _linearize(color.r) + 0.7152 * _linearize(color.g) + 0.0722 * _linearize(color.b)
    )


def contrast_ratio(foreground: str, background: str) -> float:
    """WCAG contrast ratio between two colors, from 1 to 21."""
    lum_a = relative_luminance(foreground)
    lum_b = relative_luminance(background)
    lighter, darker = max(lum_a, lum_b), min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)
