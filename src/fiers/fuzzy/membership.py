import math
from abc import ABC, abstractmethod

import numpy as np
from scipy.integrate import trapezoid

from ..core.types import AF, Degree
from ..range import DiscreteRange


def _ensure_finite(cls_name: str, *vertices: float) -> None:
    if not all(math.isfinite(v) for v in vertices):
        raise ValueError(f"{cls_name} vertices must be finite, got {vertices}")


class MembershipFunction(ABC):
    """Maps a crisp value to a degree of membership.

    ``mu`` is vectorised over numpy arrays, ``eval`` is the scalar form. The
    abstraction itself does not bound the result; every shape below keeps it
    within [0, 1].
    """

    def __call__(self, x: Degree) -> Degree:
        return self.mu(x)

    def __str__(self):
        return f"{self.__class__.__name__}:{self.domain()}"

    @abstractmethod
    def mu(self, x: Degree) -> Degree:
        raise NotImplementedError("mu() must be implemented in subclass")

    def eval(self, x: float) -> float:
        return float(self.mu(x))

    @abstractmethod
    def domain(self) -> AF:
        raise NotImplementedError("domain() must be implemented in subclass")

    def in_domain(self, x: Degree) -> bool:
        lo, hi = self.domain()
        return bool(np.all(np.logical_and(lo <= x, x <= hi)))

    def _samples(self, discrete_points: int) -> tuple[AF, AF]:
        lo, hi = self.domain()
        x = DiscreteRange(lo, hi, discrete_points).to_array()
        return x, np.asarray(self.mu(x), dtype=float)

    def area(self, discrete_points: int = 1001) -> float:
        x, y = self._samples(discrete_points)
        return float(trapezoid(y, x))

    def centroid(self, discrete_points: int = 1001) -> float:
        x, y = self._samples(discrete_points)
        a = trapezoid(y, x)
        if a == 0.0:
            raise ValueError(f"{self} has zero area, centroid is undefined")
        return float(trapezoid(x * y, x) / a)


class TriangleMF(MembershipFunction):
    """Triangle with feet at ``a`` and ``c`` and its peak at ``b``.

    Requires ``a < b < c``: equal vertices would divide by zero.
    """

    def __init__(self, a: float, b: float, c: float):
        _ensure_finite("TriangleMF", a, b, c)
        if not a < b < c:
            raise ValueError(f"TriangleMF requires a < b < c, got ({a}, {b}, {c})")
        self.a = float(a)
        self.b = float(b)
        self.c = float(c)

    def __repr__(self) -> str:
        return f"TriangleMF(a: {self.a}, b: {self.b}, c: {self.c})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, TriangleMF):
            return NotImplemented
        return (self.a, self.b, self.c) == (other.a, other.b, other.c)

    def __hash__(self) -> int:
        return hash((TriangleMF, self.a, self.b, self.c))

    def mu(self, x: Degree) -> Degree:
        return np.maximum(
            np.minimum(
                (x - self.a) / (self.b - self.a), (self.c - x) / (self.c - self.b)
            ),
            0.0,
        )

    def domain(self) -> AF:
        return np.array([self.a, self.c])

    def centroid(self, discrete_points: int = 1001) -> float:
        return (self.a + self.b + self.c) / 3.0


class TrapezoidMF(MembershipFunction):
    def __init__(self, a: float, b: float, c: float, d: float):
        _ensure_finite("TrapezoidMF", a, b, c, d)
        if not a < b <= c < d:
            raise ValueError(
                f"TrapezoidMF requires a < b <= c < d, got ({a}, {b}, {c}, {d})"
            )
        self.a = float(a)
        self.b = float(b)
        self.c = float(c)
        self.d = float(d)

    def __repr__(self) -> str:
        return f"TrapezoidMF(a: {self.a}, b: {self.b}, c: {self.c}, d: {self.d})"

    def mu(self, x: Degree) -> Degree:
        return np.maximum(
            np.minimum(
                np.minimum((x - self.a) / (self.b - self.a), 1.0),
                (self.d - x) / (self.d - self.c),
            ),
            0.0,
        )

    def domain(self) -> AF:
        return np.array([self.a, self.d])


class LeftShoulderMF(MembershipFunction):
    """Full membership up to ``a``, falling linearly to zero at ``b``."""

    def __init__(self, a: float, b: float):
        _ensure_finite("LeftShoulderMF", a, b)
        if not a < b:
            raise ValueError(f"LeftShoulderMF requires a < b, got ({a}, {b})")
        self.a = float(a)
        self.b = float(b)

    def __repr__(self) -> str:
        return f"LeftShoulderMF(a: {self.a}, b: {self.b})"

    def mu(self, x: Degree) -> Degree:
        return np.maximum(np.minimum((self.b - x) / (self.b - self.a), 1.0), 0.0)

    def domain(self) -> AF:
        return np.array([self.a, self.b])

    def centroid(self, discrete_points: int = 1001) -> float:
        return 2 * self.a / 3 + self.b / 3


class RightShoulderMF(MembershipFunction):
    """Zero membership up to ``a``, rising linearly to full at ``b``."""

    def __init__(self, a: float, b: float):
        _ensure_finite("RightShoulderMF", a, b)
        if not a < b:
            raise ValueError(f"RightShoulderMF requires a < b, got ({a}, {b})")
        self.a = float(a)
        self.b = float(b)

    def __repr__(self) -> str:
        return f"RightShoulderMF(a: {self.a}, b: {self.b})"

    def mu(self, x: Degree) -> Degree:
        return np.maximum(np.minimum((x - self.a) / (self.b - self.a), 1.0), 0.0)

    def domain(self) -> AF:
        return np.array([self.a, self.b])

    def centroid(self, discrete_points: int = 1001) -> float:
        return 2 * self.b / 3 + self.a / 3


# Factory methods
def create_uniform_triangle_memberships(
    x0: float, x1: float, n_fcns: int
) -> list[MembershipFunction]:
    """Evenly spaced partition of ``[x0, x1]`` with shoulders at both ends."""
    n_fcns = int(n_fcns)
    if n_fcns < 2:
        raise ValueError(f"n_fcns must be at least 2, got {n_fcns}")
    peaks = DiscreteRange(x0, x1, n_fcns).to_array()
    all_mus: list[MembershipFunction] = [LeftShoulderMF(peaks[0], peaks[1])]
    for ij in range(1, n_fcns - 1):
        all_mus.append(TriangleMF(peaks[ij - 1], peaks[ij], peaks[ij + 1]))
    all_mus.append(RightShoulderMF(peaks[-2], peaks[-1]))
    return all_mus


def create_triangle_memberships(
    triangle_data: dict[str, float],
) -> list[tuple[str, MembershipFunction]]:
    """Named partition from a ``{term: peak}`` mapping, peaks strictly increasing."""
    items = list(triangle_data.items())
    if len(items) < 2:
        raise ValueError("At least two peaks are required")
    peaks = [p for _, p in items]
    if any(p0 >= p1 for p0, p1 in zip(peaks, peaks[1:])):
        raise ValueError(f"Peaks must be strictly increasing, got {peaks}")
    all_mus: list[tuple[str, MembershipFunction]] = []
    for idx, (name, value) in enumerate(items):
        if idx == 0:
            all_mus.append((name, LeftShoulderMF(value, items[idx + 1][1])))
        elif idx == len(items) - 1:
            all_mus.append((name, RightShoulderMF(items[idx - 1][1], value)))
        else:
            a, b, c = items[idx - 1][1], value, items[idx + 1][1]
            all_mus.append((name, TriangleMF(a, b, c)))
    return all_mus
