"""Geometry value types."""

from plotgeom.geometry.edges import RectEdge
from plotgeom.geometry.primitives import Point, Size
from plotgeom.geometry.ranges import FloatRange, next_up, round_down, round_up
from plotgeom.geometry.rect import TRACE_LOGGER_NAME, Rect

__all__ = [
    "FloatRange",
    "Point",
    "Rect",
    "RectEdge",
    "Size",
    "TRACE_LOGGER_NAME",
    "next_up",
    "round_down",
    "round_up",
]
