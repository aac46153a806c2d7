"""Integer points and sizes used for screen coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


def _coerce_pair(value: Union["Point", "Size", int], kind: type) -> tuple[int, int]:
    if isinstance(value, int) and not isinstance(value, bool):
        return value, value
    if isinstance(value, kind):
        return tuple(value)  # type: ignore[return-value]
    raise TypeError(f"expected {kind.__name__} or int, got {type(value).__name__}")


@dataclass
class Point:
    """A position given by integer X and Y coordinates."""

    x: int = 0
    y: int = 0

    def __iter__(self):
        yield self.x
        yield self.y

    def is_zero(self) -> bool:
        """Return True when both coordinates are zero."""
        return self.x == 0 and self.y == 0

    def to_size(self) -> "Size":
        """Return a size whose width and height are these coordinates."""
        return Size(self.x, self.y)

    def __add__(self, other: Union["Point", int]) -> "Point":
        try:
            ox, oy = _coerce_pair(other, Point)
        except TypeError:
            return NotImplemented
        return Point(self.x + ox, self.y + oy)

    def __sub__(self, other: Union["Point", int]) -> "Point":
        try:
            ox, oy = _coerce_pair(other, Point)
        except TypeError:
            return NotImplemented
        return Point(self.x - ox, self.y - oy)

    def __iadd__(self, other: Union["Point", int]) -> "Point":
        ox, oy = _coerce_pair(other, Point)
        self.x += ox
        self.y += oy
        return self

    def __isub__(self, other: Union["Point", int]) -> "Point":
        ox, oy = _coerce_pair(other, Point)
        self.x -= ox
        self.y -= oy
        return self

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)


@dataclass
class Size:
    """An extent given by integer width and height."""

    w: int = 0
    h: int = 0

    def __iter__(self):
        yield self.w
        yield self.h

    def is_zero(self) -> bool:
        """Return True when both width and height are zero."""
        return self.w == 0 and self.h == 0

    def is_empty(self) -> bool:
        """Return True when either width or height is zero."""
        return self.w == 0 or self.h == 0

    def to_point(self) -> Point:
        """Return a point whose coordinates are this width and height."""
        return Point(self.w, self.h)

    def __add__(self, other: Union["Size", int]) -> "Size":
        try:
            ow, oh = _coerce_pair(other, Size)
        except TypeError:
            return NotImplemented
        return Size(self.w + ow, self.h + oh)

    def __sub__(self, other: Union["Size", int]) -> "Size":
        try:
            ow, oh = _coerce_pair(other, Size)
        except TypeError:
            return NotImplemented
        return Size(self.w - ow, self.h - oh)

    def __iadd__(self, other: Union["Size", int]) -> "Size":
        ow, oh = _coerce_pair(other, Size)
        self.w += ow
        self.h += oh
        return self

    def __isub__(self, other: Union["Size", int]) -> "Size":
        ow, oh = _coerce_pair(other, Size)
        self.w -= ow
        self.h -= oh
        return self