"""Axis-aligned bounding boxes in the plane."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from kiammath.vect2 import Number, Point2, Vect2, center as _center


@dataclass
class BBox2:
    """An axis-aligned box given by its lower and upper corners."""

    vmin: Point2 = field(default_factory=Point2)
    vmax: Point2 = field(default_factory=Point2)

    def __post_init__(self) -> None:
        # Corners are held by value, so later changes to the box never
        # leak into the points it was built from.
        self.vmin = self.vmin.copy()
        self.vmax = self.vmax.copy()

    @classmethod
    def from_point(cls, point: Point2) -> "BBox2":
        """A degenerate box holding a single point."""
        return cls(point, point)

    def not_empty(self) -> bool:
        return self.vmin.x <= self.vmax.x and self.vmin.y <= self.vmax.y

    def is_empty(self) -> bool:
        return self.vmin.x > self.vmax.x or self.vmin.y > self.vmax.y

    def is_dot(self) -> bool:
        """True if the box has shrunk to a single point."""
        return self.vmin == self.vmax

    def includes(self, other: Union[Point2, "BBox2"]) -> bool:
        """True if a point or a whole box lies inside this box."""
        if isinstance(other, BBox2):
            return self.vmin.less_or_equal(other.vmin) and other.vmax.less_or_equal(self.vmax)
        if isinstance(other, Point2):
            return self.vmin.less_or_equal(other) and other.less_or_equal(self.vmax)
        raise TypeError(f"cannot test inclusion of {type(other).__name__}")

    def intersects(self, box: "BBox2") -> bool:
        return self.vmin.less_or_equal(box.vmax) and box.vmin.less_or_equal(self.vmax)

    def include(self, other: Union[Point2, "BBox2"]) -> None:
        """Grow the box in place to cover a point or another box."""
        if isinstance(other, BBox2):
            lo, hi = other.vmin, other.vmax
        elif isinstance(other, Point2):
            lo = hi = other
        else:
            raise TypeError(f"cannot include {type(other).__name__}")
        if lo.x < self.vmin.x:
            self.vmin.x = lo.x
        if self.vmax.x < hi.x:
            self.vmax.x = hi.x
        if lo.y < self.vmin.y:
            self.vmin.y = lo.y
        if self.vmax.y < hi.y:
            self.vmax.y = hi.y

    def intersect(self, box: "BBox2") -> None:
        """Shrink the box in place to its overlap with ``box``."""
        if self.vmin.x < box.vmin.x:
            self.vmin.x = box.vmin.x
        if self.vmax.x > box.vmax.x:
            self.vmax.x = box.vmax.x
        if self.vmin.y < box.vmin.y:
            self.vmin.y = box.vmin.y
        if self.vmax.y > box.vmax.y:
            self.vmax.y = box.vmax.y

    def translate(self, vct: Vect2) -> None:
        self.vmin = self.vmin + vct
        self.vmax = self.vmax + vct

    def translated(self, vct: Vect2) -> "BBox2":
        return BBox2(self.vmin + vct, self.vmax + vct)

    def diag(self) -> Vect2:
        return self.vmax - self.vmin

    def center(self) -> Point2:
        return _center(self.vmax, self.vmin)

    def width(self) -> Number:
        return self.vmax.x - self.vmin.x

    def height(self) -> Number:
        return self.vmax.y - self.vmin.y

    def area(self) -> Number:
        return self.width() * self.height()