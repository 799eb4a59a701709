"""Tests for per-class cardinality validation."""

from __future__ import annotations

import pytest

from classy_k6.errors import DuplicateScenario, MultipleSetup, MultipleTeardown
from classy_k6.models import ClassDescriptor, MethodDescriptor, MethodRole
from classy_k6.validators import StructureValidator


def _method(name: str, role: MethodRole, config: str | None = None) -> MethodDescriptor:
    return MethodDescriptor(name=name, params="", body="", role=role, config=config)


def test_validate_builds_plan() -> None:
    descriptor = ClassDescriptor(
        name="Browse",
        options="{}",
        methods=[
            _method("setup", MethodRole.SETUP),
            _method("load", MethodRole.SCENARIO, "{ vus: 1 }"),
            _method("spike", MethodRole.SCENARIO, "{ vus: 50 }"),
            _method("teardown", MethodRole.TEARDOWN),
        ],
    )
    plan = StructureValidator().validate(descriptor)
    assert plan.name == "Browse"
    assert plan.options == "{}"
    assert plan.setup is descriptor.methods[0]
    assert plan.teardown is descriptor.methods[3]
    assert [s.name for s in plan.scenarios] == ["load", "spike"]


def test_validate_accepts_empty_class() -> None:
    plan = StructureValidator().validate(ClassDescriptor(name="Empty"))
    assert plan.setup is None
    assert plan.teardown is None
    assert plan.scenarios == []


def test_two_setups_raise() -> None:
    descriptor = ClassDescriptor(
        name="Twice",
        methods=[_method("setup", MethodRole.SETUP), _method("setup", MethodRole.SETUP)],
    )
    with pytest.raises(MultipleSetup, match="Only one setup\\(\\) allowed in class Twice"):
        StructureValidator().validate(descriptor)


def test_two_teardowns_raise() -> None:
    descriptor = ClassDescriptor(
        name="Twice",
        methods=[_method("teardown", MethodRole.TEARDOWN), _method("teardown", MethodRole.TEARDOWN)],
    )
    with pytest.raises(MultipleTeardown):
        StructureValidator().validate(descriptor)


def test_duplicate_scenario_names_raise() -> None:
    descriptor = ClassDescriptor(
        name="Clash",
        methods=[
            _method("load", MethodRole.SCENARIO, "{ vus: 1 }"),
            _method("load", MethodRole.SCENARIO, "{ vus: 2 }"),
        ],
    )
    with pytest.raises(DuplicateScenario) as excinfo:
        StructureValidator().validate(descriptor)
    assert excinfo.value.scenario == "load"
