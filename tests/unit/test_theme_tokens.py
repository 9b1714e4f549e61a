"""
Unit tests for theme token modules and theme model helpers.
"""

import pytest
from pydantic import ValidationError

from componentlib.models.theme import (
    BREAKPOINT_KEYS,
    COLOR_CATEGORIES,
    SHADOW_COUNT,
    TYPOGRAPHY_VARIANTS,
    BreakpointConfig,
    CSSVar,
    ThemeConfig,
)
from componentlib.themes import assemble_defaults, default_theme_options
from componentlib.themes.tokens import (
    BREAKPOINT_TOKENS,
    COLOR_TOKENS,
    DEFAULT_FONT_FAMILY,
    SHADOW_TOKENS,
    SHAPE_TOKENS,
    SPACING_TOKENS,
    TYPOGRAPHY_TOKENS,
    pad_shadows,
)


class TestTokenModules:
    """Tests for the default token values."""

    def test_color_tokens_declare_main_only(self):
        for name, category in COLOR_TOKENS.categories().items():
            assert category.main, name
            assert category.light is None
            assert category.dark is None
            assert category.contrast_text is None

    @pytest.mark.parametrize(
        "name,main",
        [
            ("primary", "#1976d2"),
            ("secondary", "#9c27b0"),
            ("error", "#d32f2f"),
            ("warning", "#ed6c02"),
            ("info", "#0288d1"),
            ("success", "#2e7d32"),
        ],
    )
    def test_color_token_mains(self, name, main):
        assert getattr(COLOR_TOKENS, name).main == main

    def test_surface_tokens(self):
        assert COLOR_TOKENS.background.default == "#fff"
        assert COLOR_TOKENS.background.paper == "#fff"
        assert COLOR_TOKENS.text.primary == "rgba(0, 0, 0, 0.87)"

    def test_every_variant_pins_font_family(self):
        assert TYPOGRAPHY_TOKENS.font_family == DEFAULT_FONT_FAMILY
        for name, variant in TYPOGRAPHY_TOKENS.variants().items():
            assert variant.font_family == DEFAULT_FONT_FAMILY, name

    def test_typography_variants(self):
        assert tuple(TYPOGRAPHY_TOKENS.variants()) == TYPOGRAPHY_VARIANTS
        assert TYPOGRAPHY_TOKENS.h1.font_size == "6rem"
        assert TYPOGRAPHY_TOKENS.button.text_transform == "uppercase"
        assert TYPOGRAPHY_TOKENS.body1.text_transform is None

    def test_scalar_tokens(self):
        assert SPACING_TOKENS == 8
        assert SHAPE_TOKENS.border_radius == 4

    def test_breakpoint_tokens(self):
        assert [getattr(BREAKPOINT_TOKENS, key) for key in BREAKPOINT_KEYS] == [
            0,
            600,
            900,
            1200,
            1536,
        ]

    def test_shadow_tokens(self):
        assert len(SHADOW_TOKENS) == SHADOW_COUNT
        assert SHADOW_TOKENS[0] == "none"
        assert all(shadow != "none" for shadow in SHADOW_TOKENS[1:])


class TestPadShadows:
    """Tests for completing partial shadow scales."""

    def test_pads_from_defaults(self):
        padded = pad_shadows(["none", "0 0 1px red"])
        assert len(padded) == SHADOW_COUNT
        assert padded[1] == "0 0 1px red"
        assert padded[2:] == SHADOW_TOKENS[2:]

    def test_full_scale_unchanged(self):
        assert pad_shadows(SHADOW_TOKENS) == SHADOW_TOKENS

    def test_too_many_raises(self):
        with pytest.raises(ValueError):
            pad_shadows(["none"] * (SHADOW_COUNT + 1))


class TestBreakpointQueries:
    """Tests for breakpoint media query helpers."""

    def test_up(self):
        assert BREAKPOINT_TOKENS.up("md") == "@media (min-width:900px)"

    def test_down(self):
        assert BREAKPOINT_TOKENS.down("md") == "@media (max-width:899.95px)"

    def test_between(self):
        assert BREAKPOINT_TOKENS.between("sm", "lg") == (
            "@media (min-width:600px) and (max-width:1199.95px)"
        )

    def test_unknown_key(self):
        with pytest.raises(KeyError):
            BREAKPOINT_TOKENS.up("xxl")

    def test_must_increase(self):
        with pytest.raises(ValidationError):
            BreakpointConfig(xs=0, sm=900, md=600, lg=1200, xl=1536)


class TestThemeConfigHelpers:
    """Tests for ThemeConfig helpers and immutability."""

    def test_space(self):
        theme = assemble_defaults()
        assert theme.space() == "8px"
        assert theme.space(2) == "16px"
        assert theme.space(1, 0.5) == "8px 4px"

    def test_shadow(self):
        theme = assemble_defaults()
        assert theme.shadow(0) == "none"
        assert theme.shadow(24) == SHADOW_TOKENS[24]

    @pytest.mark.parametrize("elevation", [-1, SHADOW_COUNT])
    def test_shadow_out_of_range(self, elevation):
        with pytest.raises(IndexError):
            assemble_defaults().shadow(elevation)

    def test_frozen(self):
        theme = assemble_defaults()
        with pytest.raises(ValidationError):
            theme.spacing = 4

    def test_unknown_field_rejected(self):
        data = default_theme_options()
        data["zIndex"] = {"appBar": 1100}
        with pytest.raises(ValidationError):
            ThemeConfig.model_validate(data)

    def test_css_var_reference(self):
        ref = CSSVar(name="palette-primary-main", fallback="#1976d2")
        assert ref.property_name == "--palette-primary-main"
        assert ref.reference == "var(--palette-primary-main, #1976d2)"
        assert str(ref) == ref.reference


class TestAssembleDefaults:
    """Tests for the assembled default theme."""

    def test_memoised(self):
        assert assemble_defaults() is assemble_defaults()

    def test_literal_output_mode(self):
        theme = assemble_defaults()
        assert theme.use_custom_properties is False
        assert theme.palette.primary.main == "#1976d2"

    def test_shades_derived(self):
        theme = assemble_defaults()
        for name in COLOR_CATEGORIES:
            assert getattr(theme.palette, name).is_resolved

    def test_default_theme_options_are_raw_tokens(self):
        options = default_theme_options()
        assert options["palette"]["primary"] == {
            "main": "#1976d2",
            "light": None,
            "dark": None,
            "contrastText": None,
        }
        assert options["typography"]["h1"]["fontSize"] == "6rem"
        assert options["shape"] == {"borderRadius": 4}
        assert len(options["shadows"]) == SHADOW_COUNT

    def test_default_theme_options_validate(self):
        theme = ThemeConfig.model_validate(default_theme_options())
        assert theme.spacing == assemble_defaults().spacing
