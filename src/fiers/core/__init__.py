from .types import AF, F, Degree, af64, f64, ab8, b8
from .base import config_from_dict, ensure_literal_choice, literal_options

__all__ = [
    "AF",
    "F",
    "Degree",
    "af64",
    "f64",
    "ab8",
    "b8",
    "config_from_dict",
    "ensure_literal_choice",
    "literal_options",
]
