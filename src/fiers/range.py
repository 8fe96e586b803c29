import math
from numbers import Integral

import numpy as np

from .core.types import af64
from .util import min_max, value_range


class DiscreteRange:
    """Finite iterator over evenly spaced samples of a closed interval.

    The bounds are normalised so that ``start <= end`` regardless of argument
    order, and exactly ``discrete_points`` values are produced, the first being
    ``start`` and the last ``end``. The cursor is private to each instance; use
    :meth:`copy` or :meth:`restart` to hand independent sequences to several
    consumers.
    """

    __slots__ = ("_discrete_points", "_point", "_start", "_end", "_step")

    def __init__(self, a: float, b: float, discrete_points: int):
        if isinstance(discrete_points, bool) or not isinstance(
            discrete_points, Integral
        ):
            raise ValueError(
                f"discrete_points must be an integer, got {discrete_points!r}"
            )
        if discrete_points < 2:
            raise ValueError(
                f"discrete_points must be at least 2, got {discrete_points}"
            )
        if not (math.isfinite(a) and math.isfinite(b)):
            raise ValueError(f"Range bounds must be finite, got ({a}, {b})")
        a, b = min_max(float(a), float(b))
        self._discrete_points = int(discrete_points)
        self._point = 0
        self._start = a
        self._end = b
        self._step = value_range(a, b) / (self._discrete_points - 1)

    @classmethod
    def from_bounds(cls, a: float, b: float, pts: int) -> "DiscreteRange":
        return cls(a, b, pts)

    @property
    def start(self) -> float:
        return self._start

    @property
    def end(self) -> float:
        return self._end

    @property
    def discrete_points(self) -> int:
        return self._discrete_points

    @property
    def step(self) -> float:
        return self._step

    @property
    def point(self) -> int:
        """Index of the next sample to be produced."""
        return self._point

    @property
    def remaining(self) -> int:
        return max(0, self._discrete_points - self._point)

    def __iter__(self) -> "DiscreteRange":
        return self

    def __next__(self) -> float:
        if self._point >= self._discrete_points:
            raise StopIteration
        idx = self._point
        self._point += 1
        return self._value_at(idx)

    def __length_hint__(self) -> int:
        return self.remaining

    def _value_at(self, idx: int) -> float:
        # Pin the last sample to the end to avoid roundoff drift
        if idx == self._discrete_points - 1:
            return self._end
        return self._start + idx * self._step

    def copy(self) -> "DiscreteRange":
        """Duplicate configuration and cursor position."""
        dup = DiscreteRange(self._start, self._end, self._discrete_points)
        dup._point = self._point
        return dup

    def __copy__(self) -> "DiscreteRange":
        return self.copy()

    def restart(self) -> "DiscreteRange":
        """Fresh sequence with the same configuration, cursor at the beginning."""
        return DiscreteRange(self._start, self._end, self._discrete_points)

    def to_array(self) -> af64:
        """All configured samples, independent of the cursor."""
        x = self._start + np.arange(self._discrete_points, dtype=np.float64) * self._step
        x[-1] = self._end
        return x

    def __eq__(self, other) -> bool:
        if not isinstance(other, DiscreteRange):
            return NotImplemented
        return (
            self._start == other._start
            and self._end == other._end
            and self._discrete_points == other._discrete_points
            and self._point == other._point
        )

    def __repr__(self) -> str:
        return (
            f"DiscreteRange(start={self._start}, end={self._end}, "
            f"discrete_points={self._discrete_points}, step={self._step}, point={self._point})"
        )
