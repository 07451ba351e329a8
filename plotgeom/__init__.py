"""2-D rectangle geometry primitives."""

from plotgeom.geometry import FloatRange, Point, Rect, RectEdge, Size

__all__ = ["FloatRange", "Point", "Rect", "RectEdge", "Size"]
