"""Two-dimensional vectors and points with the usual geometric helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Union

TOLERANCE = 1e-6
EPSILON = 1e-12

Number = Union[int, float]


def _clamp(value: Number, vmin: Number, vmax: Number) -> Number:
    if value < vmin:
        return vmin
    if value > vmax:
        return vmax
    return value


def _check_range(vmin: Number, vmax: Number) -> None:
    if vmax < vmin:
        raise ValueError(f"empty range: vmin={vmin} > vmax={vmax}")


def _check_index(i: int) -> None:
    if i not in (0, 1):
        raise IndexError(f"component index {i} out of range")


@dataclass
class Vect2:
    """A free vector in the plane."""

    x: Number = 0.0
    y: Number = 0.0

    def __getitem__(self, i: int) -> Number:
        _check_index(i)
        return self.x if i == 0 else self.y

    def __setitem__(self, i: int, value: Number) -> None:
        _check_index(i)
        if i == 0:
            self.x = value
        else:
            self.y = value

    def __iter__(self) -> Iterator[Number]:
        yield self.x
        yield self.y

    def __lt__(self, u: "Vect2") -> bool:
        """Lexicographic order: first by x, then by y."""
        if not isinstance(u, Vect2):
            return NotImplemented
        return (self.x, self.y) < (u.x, u.y)

    def __add__(self, u):
        if isinstance(u, Vect2):
            return Vect2(self.x + u.x, self.y + u.y)
        if isinstance(u, Real):
            return Vect2(self.x + u, self.y + u)
        return NotImplemented

    def __sub__(self, u):
        if isinstance(u, Vect2):
            return Vect2(self.x - u.x, self.y - u.y)
        if isinstance(u, Real):
            return Vect2(self.x - u, self.y - u)
        return NotImplemented

    def __mul__(self, u):
        if isinstance(u, Vect2):
            return Vect2(self.x * u.x, self.y * u.y)
        if isinstance(u, Real):
            return Vect2(self.x * u, self.y * u)
        return NotImplemented

    def __rmul__(self, d):
        if isinstance(d, Real):
            return Vect2(self.x * d, self.y * d)
        return NotImplemented

    def __truediv__(self, u):
        if isinstance(u, Vect2):
            if u.x == 0 or u.y == 0:
                raise ZeroDivisionError("component-wise division by zero")
            return Vect2(self.x / u.x, self.y / u.y)
        if isinstance(u, Real):
            if u == 0:
                raise ZeroDivisionError("vector division by zero")
            return Vect2(self.x / u, self.y / u)
        return NotImplemented

    def __neg__(self) -> "Vect2":
        return Vect2(-self.x, -self.y)

    def copy(self) -> "Vect2":
        return Vect2(self.x, self.y)

    def less_or_equal(self, u: "Vect2") -> bool:
        """True if every component is <= the matching one of ``u``."""
        return self.x <= u.x and self.y <= u.y

    def less(self, u: "Vect2") -> bool:
        """True if every component is < the matching one of ``u``."""
        return self.x < u.x and self.y < u.y

    def is_ok(self) -> bool:
        """True if both components are finite numbers."""
        return math.isfinite(self.x) and math.isfinite(self.y)

    def add_with_weight(self, u: "Vect2", w: Number) -> "Vect2":
        """Add ``u * w`` in place and return self."""
        self.x += u.x * w
        self.y += u.y * w
        return self

    def negate(self) -> None:
        self.x = -self.x
        self.y = -self.y

    def clip(self, vmin: Number, vmax: Number) -> None:
        """Clamp both components into ``[vmin, vmax]`` in place."""
        _check_range(vmin, vmax)
        self.x = _clamp(self.x, vmin, vmax)
        self.y = _clamp(self.y, vmin, vmax)

    def clip_lower(self, vmin: Number) -> bool:
        """Raise components below ``vmin`` to it; report whether any changed."""
        changed = False
        if self.x < vmin:
            self.x = vmin
            changed = True
        if self.y < vmin:
            self.y = vmin
            changed = True
        return changed

    def clip_higher(self, vmax: Number) -> bool:
        """Lower components above ``vmax`` to it; report whether any changed."""
        changed = False
        if self.x > vmax:
            self.x = vmax
            changed = True
        if self.y > vmax:
            self.y = vmax
            changed = True
        return changed

    def val_to_range(self, vmin: Number, vmax: Number) -> "Vect2":
        """Return a copy with both components clamped into ``[vmin, vmax]``."""
        _check_range(vmin, vmax)
        return Vect2(_clamp(self.x, vmin, vmax), _clamp(self.y, vmin, vmax))

    def in_range(self, vmin: Number, vmax: Number) -> bool:
        _check_range(vmin, vmax)
        return vmin <= self.x <= vmax and vmin <= self.y <= vmax

    def max_element_index(self) -> int:
        """Index of the component with the largest absolute value (x wins ties)."""
        return 0 if abs(self.x) >= abs(self.y) else 1

    def max_element(self) -> Number:
        return max(abs(self.x), abs(self.y))

    def sqr_length(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.sqr_length())

    def sum(self) -> Number:
        return self.x + self.y

    def project(self, u: "Vect2") -> "Vect2":
        """Projection of this vector onto ``u``."""
        sqr_len = dot_prod(u, u)
        if sqr_len <= 0.0:
            raise ValueError("cannot project onto a zero vector")
        return u * dot_prod(self, u) / sqr_len

    def any_orthogonal(self) -> "Vect2":
        """A unit vector orthogonal to this one."""
        len_ = self.length()
        if len_ == 0.0:
            raise ValueError("zero vector has no defined orthogonal")
        return Vect2(self.y, -self.x) / len_

    def normalize(self) -> "Vect2":
        """Scale to unit length in place and return self."""
        len_ = self.length()
        if len_ == 0.0:
            raise ValueError("cannot normalize a zero vector")
        self.x /= len_
        self.y /= len_
        return self

    def mod_normalize(self) -> float:
        """Normalize if non-zero; return the original length."""
        len_ = self.length()
        if len_ > 0.0:
            self.x /= len_
            self.y /= len_
        return len_

    def sum_normalize(self) -> Number:
        """Scale so components sum to one; a zero sum gives (0.5, 0.5)."""
        total = self.sum()
        if total != 0.0:
            self.x /= total
            self.y /= total
        else:
            self.x = self.y = 0.5
        return total

    def max_normalize(self) -> Number:
        """Scale by the largest absolute component; all-zero gives (1, 1)."""
        largest = self.max_element()
        if largest != 0.0:
            self.x /= largest
            self.y /= largest
        else:
            self.x = 1
            self.y = 1
        return largest

    def is_normalized(self) -> bool:
        return abs(self.length() - 1.0) <= TOLERANCE

    def orient(self, v: "Vect2") -> None:
        """Flip this vector if it points away from ``v``."""
        if dot_prod(self, v) < 0:
            self.negate()

    def to_point(self) -> "Point2":
        return Point2(self.x, self.y)


@dataclass
class Point2:
    """A position in the plane."""

    x: Number = 0.0
    y: Number = 0.0

    def __getitem__(self, i: int) -> Number:
        _check_index(i)
        return self.x if i == 0 else self.y

    def __setitem__(self, i: int, value: Number) -> None:
        _check_index(i)
        if i == 0:
            self.x = value
        else:
            self.y = value

    def __iter__(self) -> Iterator[Number]:
        yield self.x
        yield self.y

    def __lt__(self, u: "Point2") -> bool:
        if not isinstance(u, Point2):
            return NotImplemented
        return (self.x, self.y) < (u.x, u.y)

    def __add__(self, u):
        if isinstance(u, (Point2, Vect2)):
            return Point2(self.x + u.x, self.y + u.y)
        if isinstance(u, Real):
            return Point2(self.x + u, self.y + u)
        return NotImplemented

    def __sub__(self, u):
        if isinstance(u, Point2):
            return Vect2(self.x - u.x, self.y - u.y)
        if isinstance(u, Vect2):
            return Point2(self.x - u.x, self.y - u.y)
        if isinstance(u, Real):
            return Point2(self.x - u, self.y - u)
        return NotImplemented

    def __mul__(self, d):
        if isinstance(d, Real):
            return Point2(self.x * d, self.y * d)
        return NotImplemented

    def __rmul__(self, d):
        return self.__mul__(d)

    def __truediv__(self, d):
        if isinstance(d, Real):
            if d == 0:
                raise ZeroDivisionError("point division by zero")
            return Point2(self.x / d, self.y / d)
        return NotImplemented

    def __neg__(self) -> "Point2":
        return Point2(-self.x, -self.y)

    def copy(self) -> "Point2":
        return Point2(self.x, self.y)

    def less_or_equal(self, u: "Point2") -> bool:
        return self.x <= u.x and self.y <= u.y

    def less(self, u: "Point2") -> bool:
        return self.x < u.x and self.y < u.y

    def is_ok(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def add_with_weight(self, u: Vect2, w: Number) -> "Point2":
        self.x += u.x * w
        self.y += u.y * w
        return self

    def negate(self) -> None:
        self.x = -self.x
        self.y = -self.y

    def clip(self, vmin: Number, vmax: Number) -> None:
        _check_range(vmin, vmax)
        self.x = _clamp(self.x, vmin, vmax)
        self.y = _clamp(self.y, vmin, vmax)

    def clip_lower(self, vmin: Number) -> None:
        self.x = max(self.x, vmin)
        self.y = max(self.y, vmin)

    def val_to_range(self, vmin: Number, vmax: Number) -> "Point2":
        _check_range(vmin, vmax)
        return Point2(_clamp(self.x, vmin, vmax), _clamp(self.y, vmin, vmax))

    def to_vector(self) -> Vect2:
        return Vect2(self.x, self.y)


Planar = Union[Vect2, Point2]


def dot_prod(a: Vect2, b: Vect2) -> float:
    return float(a.x) * float(b.x) + float(a.y) * float(b.y)


def cross_prod(a: Vect2, b: Vect2) -> float:
    """The z component of the 3D cross product of ``a`` and ``b``."""
    return a.x * b.y - a.y * b.x


def sqr_length(u: Vect2) -> float:
    return dot_prod(u, u)


def length(u: Vect2) -> float:
    return math.sqrt(sqr_length(u))


def _check_nonzero(a: Vect2, b: Vect2) -> None:
    if sqr_length(a) == 0 or sqr_length(b) == 0:
        raise ValueError("angle with a zero vector is undefined")


def cos(a: Vect2, b: Vect2) -> float:
    """Cosine of the angle between two non-zero vectors."""
    _check_nonzero(a, b)
    return _clamp(dot_prod(a, b) / math.sqrt(sqr_length(a) * sqr_length(b)), -1.0, 1.0)


def sin(a: Vect2, b: Vect2) -> float:
    """Absolute sine of the angle between two non-zero vectors."""
    _check_nonzero(a, b)
    return _clamp(abs(cross_prod(a, b)) / math.sqrt(sqr_length(a) * sqr_length(b)), 0.0, 1.0)


def sqr_dist(a: Point2, b: Point2) -> float:
    return sqr_length(a - b)


def dist(a: Point2, b: Point2) -> float:
    return length(a - b)


def center(*args: Point2) -> Point2:
    """Centroid of two or three points."""
    if len(args) not in (2, 3):
        raise TypeError("center() takes two or three points")
    return Point2(
        sum(p.x for p in args) / float(len(args)),
        sum(p.y for p in args) / float(len(args)),
    )


def trg_area(a: Point2, b: Point2, c: Point2) -> float:
    return abs(0.5 * (a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y)))


def trg_perimeter(a: Point2, b: Point2, c: Point2) -> float:
    return length(b - a) + length(c - b) + length(a - c)


def about_zero(v: Planar, tolerance: float = TOLERANCE) -> bool:
    return abs(v.x) <= tolerance and abs(v.y) <= tolerance


def about_equal(v1: Planar, v2: Planar, tolerance: float = TOLERANCE) -> bool:
    return abs(v1.x - v2.x) <= tolerance and abs(v1.y - v2.y) <= tolerance


def near_zero(v: Planar) -> bool:
    return about_zero(v, EPSILON)


def near_equal(v1: Planar, v2: Planar) -> bool:
    return about_equal(v1, v2, EPSILON)