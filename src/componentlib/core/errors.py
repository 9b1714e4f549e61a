"""
Error types for theme assembly, overrides, and override files.
"""

from __future__ import annotations


class ThemeError(Exception):
    """Base exception for all theme engine errors."""

    def __init__(self, message: str, path: str | None = None):
        self.message = message
        self.path = path
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the offending key path if available."""
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class InvalidColorFormat(ThemeError, ValueError):
    """
    Raised when a color string cannot be parsed.

    Examples:
    - "blue" (named colors are not supported)
    - "#12345" (wrong hex length)
    - "rgb(1, 2)" (missing channel)
    """

    def __init__(self, value: object, path: str | None = None):
        self.value = value
        super().__init__(
            f"Invalid color {value!r}; expected hex, rgb(), rgba(), hsl() or hsla()",
            path=path,
        )


class InvalidThemeShape(ThemeError):
    """
    Raised when an override does not fit the theme configuration shape.

    Examples:
    - Unknown key ("palette.bogus")
    - Shadow sequence that is not 25 entries long
    - Breakpoints that are not strictly increasing
    """

    pass


class ThemeLoadError(ThemeError):
    """Raised when an override file cannot be read or parsed."""

    pass
