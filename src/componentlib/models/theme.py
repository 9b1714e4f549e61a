"""
Theme configuration models.

Defines the theme configuration produced by the theme factory: palette,
typography, spacing, breakpoints, shadows, and shape, plus the output mode
flag. All models are frozen; every override produces a new configuration.
"""

from __future__ import annotations

from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

SHADOW_COUNT = 25
COLOR_CATEGORIES: tuple[str, ...] = ("primary", "secondary", "error", "warning", "info", "success")
TYPOGRAPHY_VARIANTS: tuple[str, ...] = (
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "body1",
    "body2",
    "caption",
    "button",
)
BREAKPOINT_KEYS: tuple[str, ...] = ("xs", "sm", "md", "lg", "xl")

_MODEL_CONFIG = ConfigDict(
    frozen=True,
    extra="forbid",
    populate_by_name=True,
    alias_generator=to_camel,
)


# =============================================================================
# Custom property references
# =============================================================================


class CSSVar(BaseModel):
    """
    Reference to a CSS custom property with the computed value as fallback.

    Example:
        CSSVar(name="palette-primary-main", fallback="#1976d2").reference
        # -> "var(--palette-primary-main, #1976d2)"
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(description="Custom property name without the leading dashes")
    fallback: str | int | float = Field(description="Computed value used when unset")

    @property
    def property_name(self) -> str:
        return f"--{self.name}"

    @property
    def reference(self) -> str:
        return f"var({self.property_name}, {self.fallback})"

    def __str__(self) -> str:
        return self.reference


TokenValue = str | CSSVar
NumberValue = int | float | CSSVar


# =============================================================================
# Palette
# =============================================================================


class ColorCategory(BaseModel):
    """
    A semantic color with its derived shades.

    Example:
        ColorCategory(main="#1976d2")
    """

    model_config = _MODEL_CONFIG

    main: TokenValue = Field(description="Base color")
    light: TokenValue | None = Field(default=None, description="Lighter shade")
    dark: TokenValue | None = Field(default=None, description="Darker shade")
    contrast_text: TokenValue | None = Field(
        default=None, description="Readable text color on top of main"
    )

    @property
    def is_resolved(self) -> bool:
        """True when every shade has been populated."""
        return None not in (self.light, self.dark, self.contrast_text)


class BackgroundColors(BaseModel):
    """Surface background colors."""

    model_config = _MODEL_CONFIG

    default: TokenValue
    paper: TokenValue


class TextColors(BaseModel):
    """Text colors for body copy on the default background."""

    model_config = _MODEL_CONFIG

    primary: TokenValue
    secondary: TokenValue
    disabled: TokenValue | None = None


class PaletteConfig(BaseModel):
    """Color module: six semantic categories plus surface colors."""

    model_config = _MODEL_CONFIG

    # Settings that steer derivation rather than being design tokens themselves
    NON_TOKEN_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {"mode", "tonal_offset", "contrast_threshold"}
    )

    mode: Literal["light", "dark"] = Field(default="light", description="Color scheme")
    tonal_offset: float = Field(
        default=0.2, ge=0.0, le=1.0, description="Lightness shift for light/dark shades"
    )
    contrast_threshold: float = Field(
        default=3.0, ge=1.0, le=21.0, description="Contrast ratio needed for white text"
    )
    primary: ColorCategory
    secondary: ColorCategory
    error: ColorCategory
    warning: ColorCategory
    info: ColorCategory
    success: ColorCategory
    background: BackgroundColors | None = None
    text: TextColors | None = None

    def categories(self) -> dict[str, ColorCategory]:
        """Semantic color categories keyed by name."""
        return {name: getattr(self, name) for name in COLOR_CATEGORIES}


# =============================================================================
# Typography
# =============================================================================


class TypographyVariant(BaseModel):
    """
    Text style for one typography variant.

    Example:
        TypographyVariant(
            font_family='"Roboto", sans-serif',
            font_size="1rem",
            font_weight=400,
            line_height=1.5,
        )
    """

    model_config = _MODEL_CONFIG

    font_family: TokenValue = Field(description="Font family stack")
    font_size: TokenValue = Field(description="Font size (rem, px)")
    font_weight: NumberValue = Field(description="Numeric font weight")
    line_height: NumberValue = Field(description="Unitless line height")
    text_transform: TokenValue | None = Field(
        default=None, description="Text transform (uppercase, lowercase, etc.)"
    )


class TypographyConfig(BaseModel):
    """Typography module: a root font family plus named variants."""

    model_config = _MODEL_CONFIG

    font_family: TokenValue
    h1: TypographyVariant
    h2: TypographyVariant
    h3: TypographyVariant
    h4: TypographyVariant
    h5: TypographyVariant
    h6: TypographyVariant
    body1: TypographyVariant
    body2: TypographyVariant
    caption: TypographyVariant
    button: TypographyVariant

    def variants(self) -> dict[str, TypographyVariant]:
        """Typography variants keyed by name."""
        return {name: getattr(self, name) for name in TYPOGRAPHY_VARIANTS}


# =============================================================================
# Breakpoints and shape
# =============================================================================


class BreakpointConfig(BaseModel):
    """Breakpoint module: minimum viewport width per tier, in pixels."""

    model_config = _MODEL_CONFIG

    xs: int = Field(ge=0)
    sm: int = Field(ge=0)
    md: int = Field(ge=0)
    lg: int = Field(ge=0)
    xl: int = Field(ge=0)

    @model_validator(mode="after")
    def validate_increasing(self) -> BreakpointConfig:
        values = [getattr(self, key) for key in BREAKPOINT_KEYS]
        if any(lower >= upper for lower, upper in zip(values, values[1:])):
            raise ValueError(f"breakpoints must be strictly increasing, got {values}")
        return self

    def _width(self, key: str) -> int:
        if key not in BREAKPOINT_KEYS:
            raise KeyError(f"Unknown breakpoint {key!r}")
        return getattr(self, key)

    def up(self, key: str) -> str:
        """Media query matching viewports at or above ``key``."""
        return f"@media (min-width:{self._width(key)}px)"

    def down(self, key: str) -> str:
        """Media query matching viewports strictly below ``key``."""
        return f"@media (max-width:{self._width(key) - 0.05:g}px)"

    def between(self, start: str, end: str) -> str:
        """Media query matching viewports from ``start`` up to, not including, ``end``."""
        return (
            f"@media (min-width:{self._width(start)}px) and "
            f"(max-width:{self._width(end) - 0.05:g}px)"
        )


class ShapeConfig(BaseModel):
    """Shape module: base border radius in pixels."""

    model_config = _MODEL_CONFIG

    border_radius: NumberValue


# =============================================================================
# Theme configuration
# =============================================================================


class ThemeConfig(BaseModel):
    """
    Fully assembled theme configuration.

    Example:
        theme = create_theme({"palette": {"primary": {"main": "#ff5722"}}})
        theme.palette.primary.dark
        theme.space(2)  # "16px"
    """

    model_config = _MODEL_CONFIG

    palette: PaletteConfig
    typography: TypographyConfig
    spacing: int | float = Field(description="Pixels per spacing factor")
    breakpoints: BreakpointConfig
    shadows: tuple[TokenValue, ...] = Field(description="Elevation shadows 0-24")
    shape: ShapeConfig
    use_custom_properties: bool = Field(
        default=False, description="Emit CSS custom property references instead of literals"
    )
    css_var_prefix: str = Field(
        default="", pattern=r"^[a-z0-9-]*$", description="Prefix for custom property names"
    )

    @field_validator("spacing")
    @classmethod
    def validate_spacing(cls, value: int | float) -> int | float:
        if value <= 0:
            raise ValueError(f"spacing must be positive, got {value}")
        return value

    @field_validator("shadows")
    @classmethod
    def validate_shadows(cls, value: tuple[Any, ...]) -> tuple[Any, ...]:
        if len(value) != SHADOW_COUNT:
            raise ValueError(f"expected {SHADOW_COUNT} shadows, got {len(value)}")
        first = value[0].fallback if isinstance(value[0], CSSVar) else value[0]
        if first != "none":
            raise ValueError(f"shadows[0] must be 'none', got {first!r}")
        return value

    def space(self, *factors: float) -> str:
        """Spacing for one or more factors, e.g. ``space(1, 2)`` -> ``"8px 16px"``."""
        if not factors:
            factors = (1,)
        return " ".join(f"{self.spacing * factor:g}px" for factor in factors)

    def shadow(self, elevation: int) -> TokenValue:
        """Shadow for an elevation level between 0 and 24."""
        if not 0 <= elevation < SHADOW_COUNT:
            raise IndexError(f"elevation must be between 0 and {SHADOW_COUNT - 1}")
        return self.shadows[elevation]
