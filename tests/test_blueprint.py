import logging

import numpy as np
import pytest

from fiers import (
    Blueprint,
    BlueprintConfig,
    DiscreteRange,
    FuzzyInput,
    FuzzyOutput,
    FuzzyRule,
    MaxMin,
    Term,
    TriangleMF,
    create_triangle_memberships,
)
from fiers.fuzzy.norm import (
    AlgebraicProduct,
    HamacherProduct,
    Maximum,
    Minimum,
    ProbabilisticSum,
)


@pytest.fixture()
def heater() -> Blueprint:
    bp = MaxMin(name="heater")
    temperature = bp.add_input("temperature", 0.0, 40.0, 81)
    for name, mf in create_triangle_memberships({"cold": 0.0, "warm": 20.0, "hot": 40.0}):
        temperature.add_term(name, mf)
    power = bp.add_output("power", 0.0, 100.0)
    power.add_term("low", TriangleMF(0.0, 25.0, 50.0))
    power.add_term("high", TriangleMF(50.0, 75.0, 100.0))
    return bp


def test_default_blueprint():
    bp = Blueprint.default()
    assert isinstance(bp, MaxMin)
    assert bp.name is None
    assert isinstance(bp.conjunction, Minimum)
    assert isinstance(bp.disjunction, Maximum)
    assert isinstance(bp.implication, Minimum)
    assert bp.inputs == []
    assert bp.outputs == []
    assert bp.rule_base == []
    assert MaxMin.default().conjunction == Minimum()


def test_norms_fixed_at_construction():
    bp = MaxMin()
    with pytest.raises(AttributeError):
        bp.conjunction = Maximum()
    with pytest.raises(TypeError):
        Blueprint(Minimum(), "max", Minimum())


def test_custom_norms():
    bp = Blueprint(AlgebraicProduct(), ProbabilisticSum(), AlgebraicProduct(), name="prob")
    assert bp.name == "prob"
    assert bp.conjunction.calculate(0.5, 0.5) == pytest.approx(0.25)
    assert bp.disjunction.calculate(0.5, 0.5) == pytest.approx(0.75)


def test_from_config():
    bp = Blueprint.from_config(
        BlueprintConfig(name="cfg", conjunction="prod", disjunction="prob", implication="hamacher")
    )
    assert bp.name == "cfg"
    assert isinstance(bp.conjunction, AlgebraicProduct)
    assert isinstance(bp.disjunction, ProbabilisticSum)
    assert isinstance(bp.implication, HamacherProduct)

    default = Blueprint.from_config(BlueprintConfig())
    assert isinstance(default.conjunction, Minimum)
    assert isinstance(default.disjunction, Maximum)
    assert isinstance(default.implication, Minimum)

    with pytest.raises(ValueError):
        Blueprint.from_config(BlueprintConfig(conjunction="max"))


def test_from_dict_ignores_unknown_keys():
    bp = Blueprint.from_dict({"name": "d", "disjunction": "bsum", "unused": 3})
    assert bp.name == "d"
    assert isinstance(bp.conjunction, Minimum)
    assert bp.disjunction.calculate(0.7, 0.7) == pytest.approx(1.0)


def test_builder(heater):
    assert [v.name for v in heater.inputs] == ["temperature"]
    assert [v.name for v in heater.outputs] == ["power"]
    temperature = heater.get_input("temperature")
    assert isinstance(temperature, FuzzyInput)
    assert isinstance(heater.get_output("power"), FuzzyOutput)
    assert temperature.term_names == ["cold", "warm", "hot"]
    assert len(temperature) == 3
    assert "warm" in temperature
    assert "tepid" not in temperature
    assert temperature["warm"].mf == TriangleMF(0.0, 20.0, 40.0)
    assert temperature.range == DiscreteRange(0.0, 40.0, 81)
    assert heater.get_output("power").range.discrete_points == 101
    with pytest.raises(KeyError):
        temperature["tepid"]
    with pytest.raises(KeyError):
        heater.get_input("power")
    with pytest.raises(KeyError):
        heater.get_output("temperature")


def test_duplicate_names_rejected(heater):
    with pytest.raises(ValueError):
        heater.add_input("temperature", 0.0, 1.0)
    with pytest.raises(ValueError):
        heater.add_output("temperature", 0.0, 1.0)
    with pytest.raises(ValueError):
        heater.get_input("temperature").add_term("warm", TriangleMF(1.0, 2.0, 3.0))
    with pytest.raises(ValueError):
        heater.add_input("", 0.0, 1.0)


def test_variable_without_terms_is_truthy():
    variable = FuzzyInput("x", DiscreteRange(0.0, 1.0, 2))
    assert len(variable) == 0
    assert bool(variable)
    assert MaxMin().add_output("y", 0.0, 1.0)


def test_variable_range_validated():
    bp = MaxMin()
    with pytest.raises(ValueError):
        bp.add_input("x", 0.0, 1.0, 1)
    assert bp.inputs == []


def test_term_validation():
    term = Term("test", TriangleMF(1.0, 2.0, 3.0))
    assert term.name == "test"
    assert term.mf.eval(2.0) == 1.0
    with pytest.raises(ValueError):
        Term("", TriangleMF(1.0, 2.0, 3.0))
    with pytest.raises(TypeError):
        Term("bad", lambda x: x)


def test_term_outside_universe_warns(caplog):
    bp = MaxMin()
    x = bp.add_input("x", 0.0, 1.0)
    with caplog.at_level(logging.WARNING):
        x.add_term("wide", TriangleMF(-1.0, 0.5, 2.0))
    assert "exceeds universe" in caplog.text
    assert x.term_names == ["wide"]


def test_fuzzify(heater):
    degrees = heater.get_input("temperature").fuzzify(10.0)
    assert set(degrees) == {"cold", "warm", "hot"}
    assert degrees["cold"] == pytest.approx(0.5)
    assert degrees["warm"] == pytest.approx(0.5)
    assert degrees["hot"] == 0.0
    x = np.array([0.0, 20.0, 40.0])
    vec = heater.get_input("temperature").fuzzify(x)
    assert np.allclose(vec["warm"], [0.0, 1.0, 0.0])


def test_universe_is_fresh(heater):
    temperature = heater.get_input("temperature")
    first = list(temperature.universe())
    assert len(first) == 81
    assert first[0] == 0.0
    assert first[-1] == 40.0
    # The stored range descriptor is never consumed
    assert temperature.range.point == 0
    assert list(temperature.universe()) == first


def test_rules_placeholder():
    bp = MaxMin()
    rule = bp.add_rule(FuzzyRule())
    assert bp.rule_base == [rule]
    with pytest.raises(TypeError):
        bp.add_rule("IF x THEN y")


def test_repr(heater):
    text = repr(MaxMin())
    assert text.startswith("MaxMin(name=None")
    assert "conjunction=Minimum()" in text
    assert "TriangleMF(a: 0.0, b: 20.0, c: 40.0)" in repr(heater)
