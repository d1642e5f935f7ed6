"""Cholesky factorisation of small symmetric matrices."""

from __future__ import annotations

import math
import warnings
from typing import List, Sequence


def choldc(a: Sequence[Sequence[float]]) -> List[List[float]]:
    """Return the lower-triangular ``L`` with ``L @ L.T == a``.

    Only the upper triangle of ``a`` (diagonal included) is read. A pivot
    that is not positive means ``a`` is not positive definite; a
    ``RuntimeWarning`` is issued and the pivot's magnitude is used instead,
    so a factor is still returned.
    """
    rows = [list(map(float, row)) for row in a]
    n = len(rows)
    if any(len(row) != n for row in rows):
        raise ValueError("choldc needs a square matrix")

    lower = [[0.0] * n for _ in range(n)]
    for i in range(n):
        for j in range(i, n):
            total = rows[i][j] - sum(lower[i][k] * lower[j][k] for k in range(i))
            if i == j:
                if total <= 0.0:
                    warnings.warn(
                        f"choldc failed: non-positive pivot {total} at row {i}",
                        RuntimeWarning,
                        stacklevel=2,
                    )
                    total = -total
                lower[i][i] = math.sqrt(total)
            else:
                lower[j][i] = total / lower[i][i]
    return lower