"""Float helpers and the half-open coordinate range type."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


def next_up(value: float) -> float:
    """Return the next representable float above ``value``."""
    return float(np.nextafter(value, np.inf))


def round_down(value: float) -> float:
    """Round toward negative infinity, passing NaN and infinities through."""
    return float(np.floor(value))


def round_up(value: float) -> float:
    """Round toward positive infinity, passing NaN and infinities through."""
    return float(np.ceil(value))


@dataclass(frozen=True, slots=True)
class FloatRange:
    """Half-open interval ``lower <= value < upper``."""

    lower: float
    upper: float

    @property
    def is_empty(self) -> bool:
        # NaN bounds compare false, so such a range is empty too.
        return not self.lower < self.upper

    def __contains__(self, value: float) -> bool:
        return self.lower <= value < self.upper
