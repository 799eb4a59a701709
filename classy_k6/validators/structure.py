"""Cardinality checks applied to a classified test class."""

from __future__ import annotations

from typing import Set

from ..errors import DuplicateScenario, MultipleSetup, MultipleTeardown
from ..models import ClassDescriptor, MethodRole, ScriptPlan


class StructureValidator:
    """Enforces one setup, one teardown and unique scenario names per class."""

    name = "structure"

    def validate(self, descriptor: ClassDescriptor) -> ScriptPlan:
        setups = descriptor.methods_with(MethodRole.SETUP)
        if len(setups) > 1:
            raise MultipleSetup(descriptor.name)
        teardowns = descriptor.methods_with(MethodRole.TEARDOWN)
        if len(teardowns) > 1:
            raise MultipleTeardown(descriptor.name)

        scenarios = descriptor.methods_with(MethodRole.SCENARIO)
        seen: Set[str] = set()
        for scenario in scenarios:
            if scenario.name in seen:
                raise DuplicateScenario(descriptor.name, scenario.name)
            seen.add(scenario.name)

        return ScriptPlan(
            name=descriptor.name,
            options=descriptor.options,
            setup=setups[0] if setups else None,
            teardown=teardowns[0] if teardowns else None,
            scenarios=scenarios,
        )


__all__ = ["StructureValidator"]
