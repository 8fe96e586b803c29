"""Fuzzy norms: t-norms (conjunction) and s-norms (disjunction).

Every norm is a stateless binary operator over membership degrees. The
operators work elementwise on numpy arrays as well as on plain floats. Inputs
are not checked to lie in [0, 1]; ``Minimum`` and ``Maximum`` reduce to plain
real comparison outside that interval, so a NaN on the left yields the
right-hand operand.
"""
from abc import ABC, abstractmethod
from typing import Iterable, Literal, Type

import numpy as np

from ..core.base import ensure_literal_choice
from ..core.types import Degree


def _scalar(x: Degree) -> Degree:
    # Keep scalar in, scalar out for 0-d numpy results
    if isinstance(x, np.ndarray) and x.ndim == 0:
        return float(x)
    return x


class FuzzyNorm(ABC):
    identity: float
    """Neutral element: ``calculate(a, identity) == a``."""
    absorbing: float
    """Absorbing element: ``calculate(a, absorbing) == absorbing``."""

    def __call__(self, a: Degree, b: Degree) -> Degree:
        return self.calculate(a, b)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

    def __eq__(self, other) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    @abstractmethod
    def calculate(self, a: Degree, b: Degree) -> Degree:
        raise NotImplementedError("calculate() must be implemented in subclass")

    def reduce(self, values: Iterable[Degree]) -> Degree:
        """Fold the norm over any number of degrees, starting from the identity."""
        acc: Degree = self.identity
        for v in values:
            acc = self.calculate(acc, v)
        return acc

    def negate(self, a: Degree) -> Degree:
        return 1.0 - a


class TNorm(FuzzyNorm, ABC):
    identity = 1.0
    absorbing = 0.0


class SNorm(FuzzyNorm, ABC):
    identity = 0.0
    absorbing = 1.0


class Minimum(TNorm):
    def calculate(self, a: Degree, b: Degree) -> Degree:
        return _scalar(np.where(np.less(a, b), a, b))


class Maximum(SNorm):
    def calculate(self, a: Degree, b: Degree) -> Degree:
        return _scalar(np.where(np.greater(a, b), a, b))


class AlgebraicProduct(TNorm):
    def calculate(self, a: Degree, b: Degree) -> Degree:
        return _scalar(np.multiply(a, b))


class ProbabilisticSum(SNorm):
    def calculate(self, a: Degree, b: Degree) -> Degree:
        a = np.asarray(a, dtype=float)
        b = np.asarray(b, dtype=float)
        return _scalar(a + b - a * b)


class LukasiewiczTNorm(TNorm):
    def calculate(self, a: Degree, b: Degree) -> Degree:
        return _scalar(np.maximum(0.0, np.add(a, b) - 1.0))


class BoundedSum(SNorm):
    def calculate(self, a: Degree, b: Degree) -> Degree:
        return _scalar(np.minimum(1.0, np.add(a, b)))


class DrasticProduct(TNorm):
    def calculate(self, a: Degree, b: Degree) -> Degree:
        lo, hi = np.minimum(a, b), np.maximum(a, b)
        return _scalar(np.where(hi == 1.0, lo, 0.0))


class DrasticSum(SNorm):
    def calculate(self, a: Degree, b: Degree) -> Degree:
        lo, hi = np.minimum(a, b), np.maximum(a, b)
        return _scalar(np.where(lo == 0.0, hi, 1.0))


class HamacherProduct(TNorm):
    def calculate(self, a: Degree, b: Degree) -> Degree:
        a = np.asarray(a, dtype=float)
        b = np.asarray(b, dtype=float)
        denom = a + b - a * b
        with np.errstate(divide="ignore", invalid="ignore"):
            p = np.where(denom == 0.0, 0.0, a * b / denom)
        return _scalar(p)


class HamacherSum(SNorm):
    def calculate(self, a: Degree, b: Degree) -> Degree:
        a = np.asarray(a, dtype=float)
        b = np.asarray(b, dtype=float)
        denom = 1.0 - a * b
        with np.errstate(divide="ignore", invalid="ignore"):
            p = np.where(denom == 0.0, 1.0, (a + b - 2.0 * a * b) / denom)
        # Roundoff pushes the quotient past 1 when either side is 1
        p = np.where((a == 1.0) | (b == 1.0), 1.0, np.minimum(p, 1.0))
        return _scalar(p)


TNormName = Literal["min", "prod", "lukasiewicz", "drastic", "hamacher"]
SNormName = Literal["max", "prob", "bsum", "drastic", "hamacher"]

TNORMS: dict[str, Type[TNorm]] = {
    "min": Minimum,
    "prod": AlgebraicProduct,
    "lukasiewicz": LukasiewiczTNorm,
    "drastic": DrasticProduct,
    "hamacher": HamacherProduct,
}
SNORMS: dict[str, Type[SNorm]] = {
    "max": Maximum,
    "prob": ProbabilisticSum,
    "bsum": BoundedSum,
    "drastic": DrasticSum,
    "hamacher": HamacherSum,
}


def get_tnorm(name: TNormName) -> TNorm:
    ensure_literal_choice("tnorm", name, TNormName)
    return TNORMS[name]()


def get_snorm(name: SNormName) -> SNorm:
    ensure_literal_choice("snorm", name, SNormName)
    return SNORMS[name]()
