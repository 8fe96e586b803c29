"""A fuzzy inference engine library.

Start by defining a ``Blueprint`` inference engine::

    from fiers import MaxMin, TriangleMF

    blueprint = MaxMin.default()
    temperature = blueprint.add_input("temperature", 0.0, 40.0)
    temperature.add_term("warm", TriangleMF(15.0, 22.0, 30.0))
"""
from fiers.blueprint import (
    Blueprint,
    BlueprintConfig,
    FuzzyInput,
    FuzzyOutput,
    FuzzyRule,
    FuzzyVariable,
    MaxMin,
    Term,
    DEFAULT_DISCRETE_POINTS,
)
from fiers.fuzzy.membership import (
    MembershipFunction,
    TriangleMF,
    TrapezoidMF,
    LeftShoulderMF,
    RightShoulderMF,
    create_triangle_memberships,
    create_uniform_triangle_memberships,
)
from fiers.fuzzy.norm import FuzzyNorm, TNorm, SNorm, Minimum, Maximum
from fiers.range import DiscreteRange
from fiers.util import min_max, value_range

__all__ = [
    "Blueprint",
    "BlueprintConfig",
    "FuzzyInput",
    "FuzzyOutput",
    "FuzzyRule",
    "FuzzyVariable",
    "MaxMin",
    "Term",
    "DEFAULT_DISCRETE_POINTS",
    "MembershipFunction",
    "TriangleMF",
    "TrapezoidMF",
    "LeftShoulderMF",
    "RightShoulderMF",
    "create_triangle_memberships",
    "create_uniform_triangle_memberships",
    "FuzzyNorm",
    "TNorm",
    "SNorm",
    "Minimum",
    "Maximum",
    "DiscreteRange",
    "min_max",
    "value_range",
]
