"""Two-by-two matrices acting on planar vectors and points."""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Real
from typing import Optional

from kiammath.vect2 import (
    TOLERANCE,
    Number,
    Point2,
    Vect2,
    about_zero as _vect_about_zero,
    dot_prod,
)


def _check_index(i: int) -> None:
    if i not in (0, 1):
        raise IndexError(f"matrix index {i} out of range")


@dataclass
class Matrix2:
    """A 2x2 matrix stored as two row vectors."""

    r0: Vect2 = field(default_factory=Vect2)
    r1: Vect2 = field(default_factory=Vect2)

    def __post_init__(self) -> None:
        # Rows are held by value, like the vectors they were built from.
        self.r0 = self.r0.copy()
        self.r1 = self.r1.copy()

    @classmethod
    def diagonal(cls, a: Number, b: Optional[Number] = None) -> "Matrix2":
        """Diagonal matrix diag(a, b); with ``b`` omitted, a scaled identity."""
        if b is None:
            b = a
        return cls(Vect2(float(a), 0.0), Vect2(0.0, float(b)))

    @classmethod
    def identity(cls) -> "Matrix2":
        return cls.diagonal(1.0)

    @classmethod
    def from_values(cls, a00: Number, a01: Number, a10: Number, a11: Number) -> "Matrix2":
        """Build a matrix from its elements in row order."""
        return cls(Vect2(float(a00), float(a01)), Vect2(float(a10), float(a11)))

    def __getitem__(self, i: int) -> Vect2:
        """The row ``i``; changing it changes the matrix."""
        _check_index(i)
        return self.r0 if i == 0 else self.r1

    def __add__(self, other):
        if isinstance(other, Matrix2):
            return Matrix2(self.r0 + other.r0, self.r1 + other.r1)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Matrix2):
            return Matrix2(self.r0 - other.r0, self.r1 - other.r1)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Matrix2):
            return Matrix2.from_values(
                self.r0.x * other.r0.x + self.r0.y * other.r1.x,
                self.r0.x * other.r0.y + self.r0.y * other.r1.y,
                self.r1.x * other.r0.x + self.r1.y * other.r1.x,
                self.r1.x * other.r0.y + self.r1.y * other.r1.y,
            )
        if isinstance(other, Vect2):
            return Vect2(dot_prod(self.r0, other), dot_prod(self.r1, other))
        if isinstance(other, Real):
            return Matrix2(self.r0 * other, self.r1 * other)
        return NotImplemented

    def __rmul__(self, other):
        """Scalar times matrix, or a row vector or point times the matrix."""
        if isinstance(other, Real):
            return self * other
        if isinstance(other, (Vect2, Point2)):
            kind = type(other)
            return kind(
                other.x * self.r0.x + other.y * self.r1.x,
                other.x * self.r0.y + other.y * self.r1.y,
            )
        return NotImplemented

    def __truediv__(self, d):
        if isinstance(d, Real):
            if d == 0:
                raise ZeroDivisionError("matrix division by zero")
            return Matrix2(self.r0 / d, self.r1 / d)
        return NotImplemented

    def copy(self) -> "Matrix2":
        return Matrix2(self.r0, self.r1)

    def set_col(self, j: int, u: Vect2) -> None:
        _check_index(j)
        self.r0[j] = u.x
        self.r1[j] = u.y

    def get_col(self, j: int) -> Vect2:
        _check_index(j)
        return Vect2(self.r0[j], self.r1[j])

    def det(self) -> float:
        return self.r0.x * self.r1.y - self.r0.y * self.r1.x

    def inversed(self) -> "Matrix2":
        """The inverse matrix; a singular matrix raises ValueError."""
        det = self.det()
        if det == 0:
            raise ValueError("singular matrix has no inverse")
        rdet = 1.0 / det
        return Matrix2.from_values(
            self.r1.y * rdet,
            -self.r0.y * rdet,
            -self.r1.x * rdet,
            self.r0.x * rdet,
        )

    def transposed(self) -> "Matrix2":
        return Matrix2(self.get_col(0), self.get_col(1))

    def transpose(self) -> None:
        self.r0.y, self.r1.x = self.r1.x, self.r0.y

    def about_zero(self, tolerance: float = TOLERANCE) -> bool:
        return _vect_about_zero(self.r0, tolerance) and _vect_about_zero(self.r1, tolerance)

    def about_equal(self, other: "Matrix2", tolerance: float = TOLERANCE) -> bool:
        return (self - other).about_zero(tolerance)