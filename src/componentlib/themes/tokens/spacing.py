"""Spacing tokens: pixels per spacing factor."""

SPACING_TOKENS: int = 8
