"""A combined multiplicative congruential random number generator."""

from __future__ import annotations

import math
from typing import Sequence

from kiammath.vect2 import Point2

_MOD1, _MOD2, _MOD3 = 30269, 30307, 30323
_MULT1, _MULT2, _MULT3 = 171, 172, 170


class Rnd:
    """Uniform generator built from three small congruential sequences."""

    __hash__ = None  # mutable state

    def __init__(self, m1: int, m2: int, m3: int) -> None:
        for seed, mod in ((m1, _MOD1), (m2, _MOD2), (m3, _MOD3)):
            if not 1 <= seed < mod:
                raise ValueError(f"seed {seed} must lie in [1, {mod})")
        self._m1, self._m2, self._m3 = m1, m2, m3
        self._dvalue = 0.0
        self._gen()

    def _gen(self) -> None:
        value = self._m1 / _MOD1 + self._m2 / _MOD2 + self._m3 / _MOD3
        self._dvalue = value - int(value)

    def drnd(self) -> float:
        """Next uniform value in [0, 1)."""
        self._m1 = (self._m1 * _MULT1) % _MOD1
        self._m2 = (self._m2 * _MULT2) % _MOD2
        self._m3 = (self._m3 * _MULT3) % _MOD3
        result = self._dvalue
        self._gen()
        return result

    def drnd_range(self, a: float, b: float) -> float:
        """Uniform value between ``a`` and ``b``."""
        return a + (b - a) * self.drnd()

    def irnd(self, n: int) -> int:
        """Uniform integer in ``range(n)``."""
        if n <= 0:
            raise ValueError("n must be positive")
        nx = int(n * self.drnd())
        return 0 if nx == n else nx

    def sphr_unif(self, phi: Sequence[float], cos_theta: Sequence[float]) -> Point2:
        """Direction (phi, theta) uniform on a spherical rectangle."""
        p_phi = phi[0] + (phi[1] - phi[0]) * self.drnd()
        ct = cos_theta[0] + (cos_theta[1] - cos_theta[0]) * self.drnd()
        return Point2(p_phi, math.acos(ct))

    def sphr_bilin(
        self,
        phi: Sequence[float],
        theta: Sequence[float],
        cos_theta: Sequence[float],
        f: Sequence[Sequence[float]],
    ) -> Point2:
        """Direction with density bilinear in (phi, theta), by rejection."""
        fmax = max(f[0][0], f[0][1], f[1][0], f[1][1])
        if fmax <= 0:
            raise ValueError("density must be positive somewhere")
        sp = 1 / (phi[1] - phi[0])
        st = 1 / (theta[1] - theta[0])
        while True:
            p = self.sphr_unif(phi, cos_theta)
            cp = sp * (p[0] - phi[0])
            ct = st * (p[1] - theta[0])
            fp = (1 - cp) * ((1 - ct) * f[0][0] + ct * f[0][1]) + cp * (
                (1 - ct) * f[1][0] + ct * f[1][1]
            )
            if fp >= fmax * self.drnd():
                return p

    def sphr_lin(
        self, theta: Sequence[float], cos_theta: Sequence[float], f: Sequence[float]
    ) -> float:
        """Polar angle with density linear in theta, by rejection."""
        fmax = max(f[0], f[1])
        if fmax <= 0:
            raise ValueError("density must be positive somewhere")
        st = 1 / (theta[1] - theta[0])
        while True:
            t = cos_theta[0] + (cos_theta[1] - cos_theta[0]) * self.drnd()
            t = math.acos(t)
            ct = st * (t - theta[0])
            fp = (1 - ct) * f[0] + ct * f[1]
            if fp >= fmax * self.drnd():
                return t

    def _state(self) -> tuple:
        return (self._dvalue, self._m1, self._m2, self._m3)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rnd):
            return NotImplemented
        return self._state() == other._state()

    def __repr__(self) -> str:
        return f"Rnd(m1={self._m1}, m2={self._m2}, m3={self._m3})"