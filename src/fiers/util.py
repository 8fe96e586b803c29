"""Small numeric helpers shared across the package."""


def value_range(a: float, b: float) -> float:
    """Absolute difference between two values."""
    return abs(a - b)


def min_max(a: float, b: float) -> tuple[float, float]:
    """Return ``(a, b)`` ordered with the smaller value first."""
    if a >= b:
        return b, a
    return a, b
