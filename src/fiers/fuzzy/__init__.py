from .norm import (
    FuzzyNorm,
    TNorm,
    SNorm,
    Minimum,
    Maximum,
    AlgebraicProduct,
    ProbabilisticSum,
    LukasiewiczTNorm,
    BoundedSum,
    DrasticProduct,
    DrasticSum,
    HamacherProduct,
    HamacherSum,
    TNormName,
    SNormName,
    TNORMS,
    SNORMS,
    get_tnorm,
    get_snorm,
)
from .membership import (
    MembershipFunction,
    TriangleMF,
    TrapezoidMF,
    LeftShoulderMF,
    RightShoulderMF,
    create_uniform_triangle_memberships,
    create_triangle_memberships,
)

__all__ = [
    "FuzzyNorm",
    "TNorm",
    "SNorm",
    "Minimum",
    "Maximum",
    "AlgebraicProduct",
    "ProbabilisticSum",
    "LukasiewiczTNorm",
    "BoundedSum",
    "DrasticProduct",
    "DrasticSum",
    "HamacherProduct",
    "HamacherSum",
    "TNormName",
    "SNormName",
    "TNORMS",
    "SNORMS",
    "get_tnorm",
    "get_snorm",
    "MembershipFunction",
    "TriangleMF",
    "TrapezoidMF",
    "LeftShoulderMF",
    "RightShoulderMF",
    "create_uniform_triangle_memberships",
    "create_triangle_memberships",
]
