from __future__ import annotations

import pytest

from object_factory.components.base import Component, Updatable
from object_factory.components.variants import CompOne, CompThree, CompTwo
from object_factory.core.exceptions import ComponentTypeError
from object_factory.core.registry import Registry


@pytest.mark.parametrize(
    ("component_type", "updatable"),
    [
        pytest.param(CompOne, True, id="comp-one"),
        pytest.param(CompTwo, True, id="comp-two"),
        pytest.param(CompThree, False, id="comp-three"),
    ],
)
def test_updatable_is_opt_in(component_type: type, updatable: bool) -> None:
    assert issubclass(component_type, Updatable) is updatable
    assert callable(getattr(component_type, "update"))


@pytest.mark.parametrize(
    ("component", "expected"),
    [
        pytest.param(CompTwo("x"), "comp2 checking in\n", id="comp-two"),
        pytest.param(CompThree("x"), "comp3 checking in\n", id="comp-three-direct-call"),
    ],
)
def test_update_true_prints_check_in(component: object, expected: str, capsys) -> None:
    component.update(True)
    assert capsys.readouterr().out == expected


def test_update_false_prints_nothing(registry: Registry, capsys) -> None:
    for component in (CompOne(registry), CompTwo("x"), CompThree("y")):
        component.update(False)
    assert capsys.readouterr().out == ""


def test_comp_one_prints_source_data(registry: Registry, capsys) -> None:
    registry.add("comp2", CompTwo("it's number two!"))
    CompOne(registry).print_data()
    assert capsys.readouterr().out == "it's number two!\n"


def test_comp_one_reads_custom_source(registry: Registry, capsys) -> None:
    registry.add("other", CompTwo("elsewhere"))
    CompOne(registry, source_id="other").print_data()
    assert capsys.readouterr().out == "elsewhere\n"


@pytest.mark.parametrize(
    "stored",
    [
        pytest.param(None, id="none-entry"),
        pytest.param(CompThree("wrong"), id="comp-three"),
    ],
)
def test_comp_one_print_fails_on_bad_source(registry: Registry, stored: object) -> None:
    registry.add("comp2", stored)
    with pytest.raises(ComponentTypeError):
        CompOne(registry).print_data()


def test_comp_one_print_fails_on_missing_source(registry: Registry) -> None:
    with pytest.raises(ComponentTypeError, match="no entry 'comp2'"):
        CompOne(registry).print_data()


def test_data_variants_print_own_data(capsys) -> None:
    CompTwo("two").print_data()
    CompThree("three").print_data()
    assert capsys.readouterr().out.splitlines() == ["two", "three"]


def test_variants_repr_their_own_state(registry: Registry) -> None:
    assert "__repr__" not in Component.__dict__
    assert repr(CompOne(registry, source_id="x")) == "CompOne(source_id='x')"
    assert repr(CompTwo("two")) == "CompTwo(cool_data='two')"
    assert repr(CompThree("three")) == "CompThree(cool_data='three')"
