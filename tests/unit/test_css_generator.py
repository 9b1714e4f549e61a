"""
Unit tests for theme CSS generation.
"""

from componentlib.themes import create_theme, generate_theme_css


class TestGenerateThemeCSS:
    """Tests for custom property stylesheet output."""

    def test_header_and_root_block(self, default_theme):
        css = generate_theme_css(default_theme)
        assert css.startswith("/* Theme custom properties */")
        assert ":root {" in css

    def test_palette_declarations(self, default_theme):
        css = generate_theme_css(default_theme)
        assert "  --palette-primary-main: #1976d2;" in css
        assert "  --palette-background-default: #fff;" in css

    def test_typography_declarations(self, default_theme):
        css = generate_theme_css(default_theme)
        assert "  --typography-h1-font-size: 6rem;" in css
        assert "  --typography-h1-font-weight: 300;" in css
        assert "  --typography-h1-line-height: 1.167;" in css
        assert "  --typography-button-text-transform: uppercase;" in css

    def test_shape_in_pixels(self, default_theme):
        css = generate_theme_css(default_theme)
        assert "  --shape-border-radius: 4px;" in css

    def test_shadow_declarations(self, default_theme):
        css = generate_theme_css(default_theme)
        assert "  --shadows-0: none;" in css
        assert "--shadows-24:" in css

    def test_layout_tokens_not_emitted(self, default_theme):
        css = generate_theme_css(default_theme)
        assert "--spacing" not in css
        assert "--breakpoints" not in css
        assert "--palette-mode" not in css

    def test_reference_theme_renders_fallbacks(self, default_theme, custom_property_theme):
        assert generate_theme_css(custom_property_theme) == generate_theme_css(default_theme)

    def test_custom_selector(self, default_theme):
        css = generate_theme_css(default_theme, selector=".app")
        assert ".app {" in css
        assert ":root {" not in css

    def test_variant_blocks(self, default_theme, dark_theme):
        css = generate_theme_css(default_theme, variants={"dark": dark_theme})
        assert '[data-theme="dark"] {' in css
        root_block, dark_block = css.split('[data-theme="dark"]')
        assert "--palette-background-default: #fff;" in root_block
        assert "--palette-background-default: #121212;" in dark_block

    def test_prefix(self):
        theme = create_theme({"cssVarPrefix": "app"})
        css = generate_theme_css(theme)
        assert "  --app-palette-primary-main: #1976d2;" in css
