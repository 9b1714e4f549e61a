"""
Theme context provider.

Publishes a resolved theme to everything running inside the provider without
threading it through each call. Consumers read it with ``use_theme()``.

Usage:
    with ThemeProvider(create_theme({"palette": {"mode": "dark"}})):
        render_page()  # use_theme() returns the dark theme here
"""

from __future__ import annotations

import contextvars
from types import TracebackType

from componentlib.models.theme import ThemeConfig

from .css_generator import generate_theme_css
from .resolver import create_theme

# Context variable for the innermost provided theme
_current_theme: contextvars.ContextVar[ThemeConfig | None] = contextvars.ContextVar(
    "current_theme", default=None
)


class ThemeProvider:
    """
    Context manager that supplies a theme to its block.

    When no theme is given the library default from ``create_theme()`` is
    used. Providers nest; leaving one restores the outer theme.
    """

    def __init__(self, theme: ThemeConfig | None = None):
        """
        Initialize the provider.

        Args:
            theme: Pre-built theme, or None for the default theme
        """
        self.theme = theme if theme is not None else create_theme()
        self._tokens: list[contextvars.Token[ThemeConfig | None]] = []

    def __enter__(self) -> ThemeConfig:
        self._tokens.append(_current_theme.set(self.theme))
        return self.theme

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        _current_theme.reset(self._tokens.pop())

    @property
    def stylesheet(self) -> str:
        """Custom property declarations for the provided theme."""
        return generate_theme_css(self.theme)


def use_theme() -> ThemeConfig:
    """Get the theme of the innermost active provider, or the default theme."""
    theme = _current_theme.get()
    if theme is None:
        return create_theme()
    return theme
