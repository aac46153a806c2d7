"""An integer range with a small built-in pseudo-random generator."""

from __future__ import annotations

import time
from typing import Optional

_MASK = 0x7FFFFFFF


class Range:
    """A closed integer interval from ``minimum`` to ``maximum``."""

    def __init__(self, minimum: int = 0, maximum: Optional[int] = None) -> None:
        self.minimum = minimum
        self.maximum = minimum if maximum is None else maximum
        self._state = int(time.time()) & _MASK

    def __repr__(self) -> str:
        return f"Range({self.minimum}, {self.maximum})"

    def span(self) -> int:
        """Return the distance between maximum and minimum."""
        return self.maximum - self.minimum

    def set_range(self, minimum: int, maximum: Optional[int] = None) -> None:
        """Set both bounds; a single value sets both to it."""
        self.minimum = minimum
        self.maximum = minimum if maximum is None else maximum

    def random(self) -> int:
        """Return a value in ``[minimum, maximum)``, or minimum if the range is empty."""
        if self.minimum >= self.maximum:
            return self.minimum
        self._state = (self._state * 1103515245 + 12345) & _MASK
        return self._state % (self.maximum - self.minimum) + self.minimum

    def contains(self, value: int, inclusive: bool = True) -> bool:
        """Return whether ``value`` lies within the range."""
        if inclusive:
            return self.minimum <= value <= self.maximum
        return self.minimum < value < self.maximum

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Range):
            return NotImplemented
        return self.minimum == other.minimum and self.maximum == other.maximum

    __hash__ = None  # type: ignore[assignment]