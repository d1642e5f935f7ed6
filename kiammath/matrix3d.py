"""Dense three-dimensional arrays stored in row-major order."""

from __future__ import annotations

from itertools import product
from typing import Any, List, Sequence, Tuple

from kiammath.vect2 import Point2, Vect2


class Matrix3D:
    """An ``n1 x n2 x n3`` array; element ``(i, j, k)`` sits at ``k + n3 * (j + n2 * i)``."""

    __hash__ = None  # mutable container

    def __init__(self, n1: int = 0, n2: int = 0, n3: int = 0, fill: Any = 0) -> None:
        self._fill = fill
        self._n1 = self._n2 = self._n3 = 0
        self._data: List[Any] = []
        self.allocate(n1, n2, n3)

    @property
    def shape(self) -> Tuple[int, int, int]:
        return (self._n1, self._n2, self._n3)

    def _check_ij(self, i: int, j: int) -> None:
        if not (0 <= i < self._n1 and 0 <= j < self._n2):
            raise IndexError(f"index ({i}, {j}) out of range for shape {self.shape}")

    def _offset(self, index: tuple) -> int:
        if len(index) != 3:
            raise IndexError("an element needs three indices")
        i, j, k = index
        self._check_ij(i, j)
        if not 0 <= k < self._n3:
            raise IndexError(f"index {index} out of range for shape {self.shape}")
        return k + self._n3 * (j + self._n2 * i)

    def __getitem__(self, index: tuple) -> Any:
        """An element for ``(i, j, k)``; a copy of the row along k for ``(i, j)``."""
        if len(index) == 2:
            i, j = index
            self._check_ij(i, j)
            start = self._n3 * (j + self._n2 * i)
            return self._data[start:start + self._n3]
        return self._data[self._offset(index)]

    def __setitem__(self, index: tuple, value: Any) -> None:
        if len(index) == 2:
            i, j = index
            self._check_ij(i, j)
            row = list(value)
            if len(row) != self._n3:
                raise ValueError(f"row must have {self._n3} values, got {len(row)}")
            start = self._n3 * (j + self._n2 * i)
            self._data[start:start + self._n3] = row
            return
        self._data[self._offset(index)] = value

    def __len__(self) -> int:
        return self._n1 * self._n2 * self._n3

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix3D):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    def __imul__(self, c: float) -> "Matrix3D":
        self._data = [value * c for value in self._data]
        return self

    def __repr__(self) -> str:
        return f"Matrix3D(shape={self.shape})"

    @staticmethod
    def _check_dims(n1: int, n2: int, n3: int) -> None:
        if n1 < 0 or n2 < 0 or n3 < 0:
            raise ValueError(f"dimensions must not be negative: ({n1}, {n2}, {n3})")

    def allocate(self, n1: int, n2: int, n3: int) -> None:
        """Set the shape; contents are reset unless the element count is unchanged."""
        self._check_dims(n1, n2, n3)
        new_len = n1 * n2 * n3
        if new_len != len(self._data):
            self._data = [self._fill] * new_len
        self._n1, self._n2, self._n3 = n1, n2, n3

    def resize(self, n1: int, n2: int, n3: int) -> None:
        """Set the shape, keeping the elements that lie in both shapes."""
        self._check_dims(n1, n2, n3)
        if len(self) == 0:
            self.allocate(n1, n2, n3)
            return
        resized = Matrix3D(n1, n2, n3, self._fill)
        for idx in product(
            range(min(self._n1, n1)), range(min(self._n2, n2)), range(min(self._n3, n3))
        ):
            resized[idx] = self[idx]
        self.swap(resized)

    def dimension(self, i: int) -> int:
        if i not in (0, 1, 2):
            raise IndexError(f"dimension index {i} out of range")
        return self.shape[i]

    def fill(self, value: Any) -> None:
        """Set every element to ``value``."""
        self._data = [value] * len(self._data)

    def data(self) -> List[Any]:
        """The flat storage list; changes to it show in the matrix."""
        return self._data

    def copy(self) -> "Matrix3D":
        result = Matrix3D(fill=self._fill)
        result._n1, result._n2, result._n3 = self.shape
        result._data = list(self._data)
        return result

    def swap(self, other: "Matrix3D") -> None:
        self._n1, other._n1 = other._n1, self._n1
        self._n2, other._n2 = other._n2, self._n2
        self._n3, other._n3 = other._n3, self._n3
        self._data, other._data = other._data, self._data

    def _planes(self) -> List[List[Any]]:
        plane = self._n2 * self._n3
        return [self._data[r * plane:(r + 1) * plane] for r in range(self._n1)]

    def vert_flip(self) -> None:
        """Reverse the order along the first dimension."""
        self._data = [value for plane in reversed(self._planes()) for value in plane]

    def hor_flip(self) -> None:
        """Reverse the order along the second dimension."""
        n3 = self._n3
        flipped: List[Any] = []
        for plane in self._planes():
            cells = [plane[c * n3:(c + 1) * n3] for c in range(self._n2)]
            flipped.extend(value for cell in reversed(cells) for value in cell)
        self._data = flipped

    def crop(self, beg: Point2, size: Vect2) -> None:
        """Keep only the ``size.y x size.x`` region whose first corner is ``beg``.

        ``x`` runs along the second dimension and ``y`` along the first.
        """
        width, height = self._n2, self._n1
        if not (
            0 <= beg.x < width
            and 0 <= beg.y < height
            and size.x >= 0
            and size.y >= 0
            and beg.x + size.x <= width
            and beg.y + size.y <= height
        ):
            raise ValueError(f"crop region {beg}, {size} outside shape {self.shape}")
        cropped = Matrix3D(size.y, size.x, self._n3, self._fill)
        for y, x in product(range(size.y), range(size.x)):
            cropped[y, x] = self[beg.y + y, beg.x + x]
        self.swap(cropped)

    def row(self, i: int, j: int) -> Sequence[Any]:
        """Copy of the values along the last dimension at ``(i, j)``."""
        return self[i, j]