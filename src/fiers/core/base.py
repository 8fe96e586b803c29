import logging
from dataclasses import fields, is_dataclass
from typing import Type, TypeVar, get_args


def literal_options(literal_type) -> tuple:
    """Allowed values of a ``typing.Literal`` alias, empty for anything else."""
    return get_args(literal_type)


def ensure_literal_choice(name: str, value, literal_type) -> None:
    """Validate a value against a typing.Literal and raise a helpful error.

    Args:
        name: Name of the option being validated, used in the error message
        value: The provided value
        literal_type: The Literal type alias to validate against
    Raises:
        ValueError: if value not in allowed options
    """
    allowed = literal_options(literal_type)
    if allowed and value not in allowed:
        allowed_str = ", ".join(repr(x) for x in allowed)
        raise ValueError(
            f"Invalid {name}={value!r}. Allowed options: {allowed_str}"
        )


C = TypeVar("C")


def config_from_dict(cls: Type[C], data: dict) -> C:
    """Build the config dataclass ``cls`` from ``data``, skipping unknown keys."""
    if not is_dataclass(cls):
        raise TypeError(f"{cls!r} is not a dataclass")
    known = {f.name for f in fields(cls) if f.init}
    unknown = sorted(set(data) - known)
    if unknown:
        logging.debug(f"Ignoring unknown {cls.__name__} keys: {unknown}")
    return cls(**{k: data[k] for k in data if k in known})
