"""Shape tokens."""

from componentlib.models.theme import ShapeConfig

SHAPE_TOKENS = ShapeConfig(border_radius=4)
