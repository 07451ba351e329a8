"""Point and size value types composed by rectangles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class Point:
    """2-D coordinate in a bottom-left-origin space."""

    x: float
    y: float

    zero: ClassVar[Point]


@dataclass(frozen=True, slots=True)
class Size:
    """2-D extent. Negative components describe a reversed extent."""

    width: float
    height: float

    zero: ClassVar[Size]


Point.zero = Point(0.0, 0.0)
Size.zero = Size(0.0, 0.0)
