"""Core data models shared across the generator pipeline."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class MethodRole(str, Enum):
    """Closed set of roles a class method can play in a generated script."""

    SETUP = "setup"
    TEARDOWN = "teardown"
    SCENARIO = "scenario"
    IGNORED = "ignored"


@dataclass
class ImportSpan:
    """One import statement carried over verbatim."""

    specifier: str
    text: str


@dataclass
class Preamble:
    """Module-level text placed ahead of the generated exports."""

    imports: List[ImportSpan] = field(default_factory=list)
    statements: List[str] = field(default_factory=list)


@dataclass
class MethodDescriptor:
    """A classified class method with its parameter and body spans."""

    name: str
    params: str
    body: str
    role: MethodRole = MethodRole.IGNORED
    config: Optional[str] = None
    # Body line indexes that continue a multi-line literal and must not be re-indented.
    literal_lines: Tuple[int, ...] = ()


@dataclass
class ClassDescriptor:
    """An exported class declaration reduced to the parts the generator uses."""

    name: str
    options: Optional[str] = None
    methods: List[MethodDescriptor] = field(default_factory=list)

    def methods_with(self, role: MethodRole) -> List[MethodDescriptor]:
        return [method for method in self.methods if method.role is role]


@dataclass
class ScriptPlan:
    """Validated view of one class, ready for synthesis."""

    name: str
    options: Optional[str]
    setup: Optional[MethodDescriptor]
    teardown: Optional[MethodDescriptor]
    scenarios: List[MethodDescriptor]


@dataclass
class OutputDocument:
    """Generated script text for one class."""

    class_name: str
    text: str
    extension: str
