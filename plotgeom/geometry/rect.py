"""Axis-aligned rectangle in a bottom-left-origin coordinate space."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from plotgeom.geometry.primitives import Point, Size
from plotgeom.geometry.ranges import FloatRange, next_up, round_down, round_up

TRACE_LOGGER_NAME = "plotgeom.geometry.trace"
_TRACE_LOG = logging.getLogger(TRACE_LOGGER_NAME)


@dataclass(slots=True, unsafe_hash=True)
class Rect:
    """Rectangle defined by an origin corner and a possibly negative size.

    The origin is only the minimum corner when both size components are
    non-negative. Use ``normalized`` to get the equivalent rectangle with a
    non-negative size.
    """

    origin: Point
    size: Size

    @classmethod
    def empty(cls) -> Rect:
        """Return a new zero rectangle at the origin."""
        return cls(Point.zero, Size.zero)

    @classmethod
    def centered_on(cls, size: Size, center: Point) -> Rect:
        """Return a rectangle of ``size`` whose center is ``center``."""
        return cls(
            Point(center.x - (size.width / 2), center.y - (size.height / 2)),
            size,
        )

    def copy(self) -> Rect:
        return type(self)(self.origin, self.size)

    @property
    def normalized(self) -> Rect:
        """Equivalent rectangle with non-negative size covering the same region."""
        origin = Point(
            self.origin.x + (self.size.width if self.size.width < 0 else 0.0),
            self.origin.y + (self.size.height if self.size.height < 0 else 0.0),
        )
        return Rect(origin, Size(abs(self.size.width), abs(self.size.height)))

    @property
    def min_x(self) -> float:
        return self.normalized.origin.x

    @property
    def min_y(self) -> float:
        return self.normalized.origin.y

    @property
    def mid_x(self) -> float:
        # Raw origin and size, not the normalized form.
        return self.origin.x + (self.size.width / 2)

    @property
    def mid_y(self) -> float:
        return self.origin.y + (self.size.height / 2)

    @property
    def max_x(self) -> float:
        norm = self.normalized
        return norm.origin.x + norm.size.width

    @property
    def max_y(self) -> float:
        norm = self.normalized
        return norm.origin.y + norm.size.height

    @property
    def center(self) -> Point:
        return Point(self.mid_x, self.mid_y)

    @property
    def width(self) -> float:
        return self.size.width

    @width.setter
    def width(self, value: float) -> None:
        self.size = Size(value, self.size.height)

    @property
    def height(self) -> float:
        return self.size.height

    @height.setter
    def height(self, value: float) -> None:
        self.size = Size(self.size.width, value)

    @property
    def rounded_outwards(self) -> Rect:
        """Return a copy rounded by ``round_outwards``."""
        rect = self.copy()
        rect.round_outwards()
        return rect

    def round_outwards(self) -> None:
        """Round to integer coordinates: origin down, size up."""
        before = self._trace_snapshot()
        self.origin = Point(round_down(self.origin.x), round_down(self.origin.y))
        self.size = Size(round_up(self.size.width), round_up(self.size.height))
        self._trace("round_outwards", before)

    @property
    def rounded_inwards(self) -> Rect:
        """Return a copy rounded by ``round_inwards``."""
        rect = self.copy()
        rect.round_inwards()
        return rect

    def round_inwards(self) -> None:
        """Round to integer coordinates: origin up, size down."""
        before = self._trace_snapshot()
        self.origin = Point(round_up(self.origin.x), round_up(self.origin.y))
        self.size = Size(round_down(self.size.width), round_down(self.size.height))
        self._trace("round_inwards", before)

    def contract(self, distance: float) -> None:
        """Move every edge inwards by ``distance``; negative values expand."""
        before = self._trace_snapshot()
        self.origin = Point(self.origin.x + distance, self.origin.y + distance)
        self.size = Size(self.size.width - 2 * distance, self.size.height - 2 * distance)
        self._trace("contract", before)

    def clamping_shift(self, dx: float = 0.0, dy: float = 0.0) -> None:
        """Shift the origin by ``(dx, dy)`` while keeping the far edges fixed.

        No minimum size is enforced; the size may become negative.
        """
        before = self._trace_snapshot()
        self.origin = Point(self.origin.x + dx, self.origin.y + dy)
        self.size = Size(self.size.width - dx, self.size.height - dy)
        self._trace("clamping_shift", before)

    @property
    def internal_x_coordinates(self) -> FloatRange:
        """X values strictly inside the rectangle, excluding both edges."""
        norm = self.normalized
        lower = next_up(norm.origin.x)
        return FloatRange(lower, lower + norm.size.width)

    @property
    def internal_y_coordinates(self) -> FloatRange:
        """Y values strictly inside the rectangle, excluding both edges."""
        norm = self.normalized
        lower = next_up(norm.origin.y)
        return FloatRange(lower, lower + norm.size.height)

    def _trace_snapshot(self) -> Rect | None:
        if not _TRACE_LOG.isEnabledFor(logging.DEBUG):
            return None
        return self.copy()

    def _trace(self, op: str, before: Rect | None) -> None:
        if before is None:
            return
        _TRACE_LOG.debug(
            "rect.%s",
            op,
            extra={"op": op, "before": repr(before), "after": repr(self)},
        )
