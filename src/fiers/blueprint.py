"""Declarative description of a fuzzy inference engine.

A :class:`Blueprint` owns its input and output variables, which own their
linguistic terms, which own one membership function each. The three norms are
chosen once, at construction, and cannot be swapped afterwards.
"""
import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

from .core.base import config_from_dict, ensure_literal_choice
from .core.types import Degree
from .fuzzy.membership import MembershipFunction
from .fuzzy.norm import (
    FuzzyNorm,
    Maximum,
    Minimum,
    SNormName,
    TNormName,
    get_snorm,
    get_tnorm,
)
from .range import DiscreteRange

DEFAULT_DISCRETE_POINTS: int = 101
"""Samples per universe of discourse when none is given."""


@dataclass
class Term:
    """Fuzzy linguistic term."""

    name: str
    """Unique name within the owning variable."""
    mf: MembershipFunction
    """Membership function, owned by this term alone."""

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"Term name must be a non-empty string, got {self.name!r}")
        if not isinstance(self.mf, MembershipFunction):
            raise TypeError(
                f"Term {self.name!r} needs a MembershipFunction, got {type(self.mf).__name__}"
            )


@dataclass
class FuzzyVariable:
    name: str
    """Unique variable name within the blueprint."""
    range: DiscreteRange
    """Universe of discourse. Kept as a descriptor and never iterated directly."""
    terms: list[Term] = field(default_factory=list)
    """Set of linguistic values, in insertion order."""

    def __getitem__(self, item: str) -> Term:
        for term in self.terms:
            if term.name == item:
                return term
        raise KeyError(f"Term {item!r} not found in {self.name!r}")

    def __contains__(self, item: str) -> bool:
        return any(term.name == item for term in self.terms)

    def __iter__(self) -> Iterator[Term]:
        return iter(self.terms)

    def __len__(self) -> int:
        return len(self.terms)

    def __bool__(self) -> bool:
        # A variable without terms is still a variable
        return True

    @property
    def term_names(self) -> list[str]:
        return [term.name for term in self.terms]

    def add_term(self, name: str, mf: MembershipFunction) -> Term:
        if name in self:
            raise ValueError(f"Duplicate term {name!r} in {self.name!r}")
        term = Term(name, mf)
        lo, hi = mf.domain()
        if lo < self.range.start or hi > self.range.end:
            logging.warning(
                f"Term {name!r} support [{lo}, {hi}] exceeds universe of "
                f"{self.name!r} [{self.range.start}, {self.range.end}]"
            )
        self.terms.append(term)
        logging.debug(f"Added term {name!r} to {self.name!r}: {mf!r}")
        return term

    def universe(self) -> DiscreteRange:
        """Fresh sampling sequence over this variable's universe of discourse."""
        return self.range.restart()

    def fuzzify(self, x: Degree) -> dict[str, Degree]:
        """Degree of membership of ``x`` in every term."""
        return {term.name: term.mf.mu(x) for term in self.terms}


@dataclass
class FuzzyInput(FuzzyVariable):
    """Input variable of an inference engine."""


@dataclass
class FuzzyOutput(FuzzyVariable):
    """Output variable of an inference engine."""


@dataclass
class FuzzyRule:
    """Inference rule placeholder. Carries no structure and no evaluation."""


@dataclass
class BlueprintConfig:
    """Configuration for building a blueprint from named norms."""

    name: Optional[str] = None
    """Optional engine name."""
    conjunction: TNormName = "min"
    """T-norm used to combine antecedents."""
    disjunction: SNormName = "max"
    """S-norm used for disjunction and aggregation."""
    implication: TNormName = "min"
    """T-norm applied between rule strength and consequent."""


class Blueprint:
    """Public representation of an inference engine."""

    def __init__(
        self,
        conjunction: FuzzyNorm,
        disjunction: FuzzyNorm,
        implication: FuzzyNorm,
        name: Optional[str] = None,
    ):
        for role, norm in (
            ("conjunction", conjunction),
            ("disjunction", disjunction),
            ("implication", implication),
        ):
            if not isinstance(norm, FuzzyNorm):
                raise TypeError(
                    f"{role} must be a FuzzyNorm, got {type(norm).__name__}"
                )
        self.name = name
        self._conjunction = conjunction
        self._disjunction = disjunction
        self._implication = implication
        self.inputs: list[FuzzyInput] = []
        self.outputs: list[FuzzyOutput] = []
        self.rule_base: list[FuzzyRule] = []

    @property
    def conjunction(self) -> FuzzyNorm:
        return self._conjunction

    @property
    def disjunction(self) -> FuzzyNorm:
        return self._disjunction

    @property
    def implication(self) -> FuzzyNorm:
        return self._implication

    @classmethod
    def default(cls) -> "Blueprint":
        """Empty max-min (Mamdani) blueprint."""
        return MaxMin()

    @classmethod
    def from_config(cls, config: BlueprintConfig) -> "Blueprint":
        ensure_literal_choice("conjunction", config.conjunction, TNormName)
        ensure_literal_choice("disjunction", config.disjunction, SNormName)
        ensure_literal_choice("implication", config.implication, TNormName)
        logging.info(
            f"Building blueprint {config.name!r}: conjunction={config.conjunction}, "
            f"disjunction={config.disjunction}, implication={config.implication}"
        )
        return Blueprint(
            get_tnorm(config.conjunction),
            get_snorm(config.disjunction),
            get_tnorm(config.implication),
            name=config.name,
        )

    @classmethod
    def from_dict(cls, data: dict) -> "Blueprint":
        return cls.from_config(config_from_dict(BlueprintConfig, data))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name={self.name!r}, "
            f"conjunction={self._conjunction!r}, disjunction={self._disjunction!r}, "
            f"implication={self._implication!r}, inputs={self.inputs!r}, "
            f"outputs={self.outputs!r}, rule_base={self.rule_base!r})"
        )

    def _variable_names(self) -> set[str]:
        return {v.name for v in self.inputs} | {v.name for v in self.outputs}

    def _check_new_variable(self, name: str) -> None:
        if not isinstance(name, str) or not name:
            raise ValueError(f"Variable name must be a non-empty string, got {name!r}")
        if name in self._variable_names():
            raise ValueError(f"Duplicate variable {name!r} in blueprint {self.name!r}")

    def add_input(
        self,
        name: str,
        start: float,
        end: float,
        discrete_points: int = DEFAULT_DISCRETE_POINTS,
    ) -> FuzzyInput:
        self._check_new_variable(name)
        variable = FuzzyInput(name, DiscreteRange(start, end, discrete_points))
        self.inputs.append(variable)
        logging.debug(f"Added input {name!r} over {variable.range!r}")
        return variable

    def add_output(
        self,
        name: str,
        start: float,
        end: float,
        discrete_points: int = DEFAULT_DISCRETE_POINTS,
    ) -> FuzzyOutput:
        self._check_new_variable(name)
        variable = FuzzyOutput(name, DiscreteRange(start, end, discrete_points))
        self.outputs.append(variable)
        logging.debug(f"Added output {name!r} over {variable.range!r}")
        return variable

    def add_rule(self, rule: FuzzyRule) -> FuzzyRule:
        if not isinstance(rule, FuzzyRule):
            raise TypeError(f"rule must be a FuzzyRule, got {type(rule).__name__}")
        self.rule_base.append(rule)
        return rule

    def get_input(self, name: str) -> FuzzyInput:
        for variable in self.inputs:
            if variable.name == name:
                return variable
        raise KeyError(f"Input {name!r} not found in blueprint {self.name!r}")

    def get_output(self, name: str) -> FuzzyOutput:
        for variable in self.outputs:
            if variable.name == name:
                return variable
        raise KeyError(f"Output {name!r} not found in blueprint {self.name!r}")


class MaxMin(Blueprint):
    """Blueprint of the common Mamdani engine: min conjunction, max disjunction, min implication."""

    def __init__(self, name: Optional[str] = None):
        super().__init__(Minimum(), Maximum(), Minimum(), name=name)
