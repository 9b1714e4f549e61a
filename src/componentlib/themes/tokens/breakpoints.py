"""
Breakpoint tokens.

Minimum viewport width in pixels for each tier, strictly increasing.
"""

from componentlib.models.theme import BreakpointConfig

BREAKPOINT_TOKENS = BreakpointConfig(
    xs=0,  # phones
    sm=600,  # tablets
    md=900,  # small laptops
    lg=1200,  # desktops
    xl=1536,  # large screens
)
