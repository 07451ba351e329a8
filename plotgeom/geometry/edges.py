"""Rectangle edge enumeration."""

from __future__ import annotations

from enum import StrEnum


class RectEdge(StrEnum):
    """An edge of a ``Rect``."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"

    @classmethod
    def all_cases(cls) -> tuple[RectEdge, ...]:
        return tuple(cls)

    @property
    def is_horizontal(self) -> bool:
        """Whether this is the top or bottom edge."""
        return self in (RectEdge.TOP, RectEdge.BOTTOM)

    @property
    def is_vertical(self) -> bool:
        """Whether this is the left or right edge."""
        return self in (RectEdge.LEFT, RectEdge.RIGHT)
