"""Reads exported test classes and classifies their methods by role."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Set, Tuple

from tree_sitter import Node

from ..constants import (
    DEFAULT_CLASS_NAME,
    OPTIONS_PROPERTY,
    SCENARIO_MARKER,
    SETUP_METHOD,
    TEARDOWN_METHOD,
)
from ..errors import MissingScenarioConfig, NoExportedClass
from ..logging import get_logger
from ..models import ClassDescriptor, MethodDescriptor, MethodRole
from ..parsing import SourceModule, TopLevelClass

_ACCESSOR_TOKENS = {"get", "set"}
_LITERAL_NODE_TYPES = {"string", "template_string"}


@dataclass
class _Marker:
    name: str
    called: bool
    arguments: Tuple[str, ...]


class DeclarationReader:
    """Turns exported class declarations into classified descriptors.

    Methods are sorted into a closed role table: a method named ``setup`` or
    ``teardown`` takes that role, a method carrying the scenario marker becomes
    a scenario, and anything else is ignored.
    """

    def __init__(
        self,
        *,
        scenario_marker: str = SCENARIO_MARKER,
        options_property: str = OPTIONS_PROPERTY,
    ) -> None:
        self.scenario_marker = scenario_marker
        self.options_property = options_property
        self.logger = get_logger("extract.declarations")

    def read(self, module: SourceModule) -> List[ClassDescriptor]:
        classes = module.exported_classes()
        if not classes:
            raise NoExportedClass(module.path)
        return [self.describe(module, cls) for cls in classes]

    def describe(self, module: SourceModule, cls: TopLevelClass) -> ClassDescriptor:
        name = cls.name or DEFAULT_CLASS_NAME
        descriptor = ClassDescriptor(name=name)
        body = cls.node.child_by_field_name("body")
        if body is None:
            return descriptor

        pending: List[Node] = []
        for member in body.named_children:
            if member.type == "comment":
                continue
            if member.type == "decorator":
                pending.append(member)
                continue
            if member.type == "method_definition":
                method = self._describe_method(module, name, member, pending)
                if method is not None:
                    descriptor.methods.append(method)
            elif member.type == "public_field_definition" and descriptor.options is None:
                descriptor.options = self._property_initializer(module, member)
            pending = []

        self.logger.debug(
            "Class %s: %d setup, %d teardown, %d scenario method(s)",
            name,
            len(descriptor.methods_with(MethodRole.SETUP)),
            len(descriptor.methods_with(MethodRole.TEARDOWN)),
            len(descriptor.methods_with(MethodRole.SCENARIO)),
        )
        return descriptor

    def _property_initializer(self, module: SourceModule, member: Node) -> Optional[str]:
        name_node = member.child_by_field_name("name")
        if name_node is None or module.text(name_node) != self.options_property:
            return None
        value = member.child_by_field_name("value")
        if value is None:
            return None
        return module.text(value)

    def _describe_method(
        self,
        module: SourceModule,
        class_name: str,
        member: Node,
        leading_decorators: Sequence[Node],
    ) -> Optional[MethodDescriptor]:
        name_node = member.child_by_field_name("name")
        body_node = member.child_by_field_name("body")
        if name_node is None or body_node is None or _is_accessor(member, name_node):
            return None

        name = module.text(name_node)
        decorators = list(leading_decorators) + [
            child for child in member.named_children if child.type == "decorator"
        ]
        markers = [marker for marker in (_read_marker(module, d) for d in decorators) if marker]
        role = self._role_for(name, markers)
        if role is MethodRole.IGNORED:
            self.logger.debug("Ignoring method %s.%s", class_name, name)
            return None

        config = None
        if role is MethodRole.SCENARIO:
            marker = next(m for m in markers if m.name == self.scenario_marker)
            if not marker.called or not marker.arguments:
                raise MissingScenarioConfig(class_name, name)
            config = marker.arguments[0]

        body, literal_lines = _body_text(module, body_node)
        return MethodDescriptor(
            name=name,
            params=_parameter_text(module, member.child_by_field_name("parameters")),
            body=body,
            literal_lines=literal_lines,
            role=role,
            config=config,
        )

    def _role_for(self, name: str, markers: Sequence[_Marker]) -> MethodRole:
        if name == SETUP_METHOD:
            return MethodRole.SETUP
        if name == TEARDOWN_METHOD:
            return MethodRole.TEARDOWN
        if any(marker.name == self.scenario_marker for marker in markers):
            return MethodRole.SCENARIO
        return MethodRole.IGNORED


def _is_accessor(member: Node, name_node: Node) -> bool:
    for child in member.children:
        if child.start_byte >= name_node.start_byte:
            break
        if not child.is_named and child.type in _ACCESSOR_TOKENS:
            return True
    return False


def _read_marker(module: SourceModule, decorator: Node) -> Optional[_Marker]:
    expression = next((c for c in decorator.named_children if c.type != "comment"), None)
    while expression is not None and expression.type == "parenthesized_expression":
        expression = next((c for c in expression.named_children if c.type != "comment"), None)
    if expression is None:
        return None

    called = False
    arguments: Tuple[str, ...] = ()
    if expression.type == "call_expression":
        called = True
        args_node = expression.child_by_field_name("arguments")
        if args_node is not None:
            arguments = tuple(
                module.text(arg) for arg in args_node.named_children if arg.type != "comment"
            )
        expression = expression.child_by_field_name("function")
        if expression is None:
            return None

    if expression.type == "member_expression":
        prop = expression.child_by_field_name("property")
        name = module.text(prop) if prop is not None else module.text(expression)
    else:
        name = module.text(expression)
    return _Marker(name=name, called=called, arguments=arguments)


def _parameter_text(module: SourceModule, parameters: Optional[Node]) -> str:
    if parameters is None:
        return ""
    return ", ".join(
        module.text(param) for param in parameters.named_children if param.type != "comment"
    )


def _literal_rows(node: Node) -> Set[int]:
    """Rows that begin inside a multi-line string or template literal."""
    rows: Set[int] = set()
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type in _LITERAL_NODE_TYPES:
            rows.update(range(current.start_point[0] + 1, current.end_point[0] + 1))
            continue
        stack.extend(current.children)
    return rows


def _body_text(module: SourceModule, body_node: Node) -> Tuple[str, Tuple[int, ...]]:
    """Return the statements inside a ``{ ... }`` block and the indexes of literal lines.

    Only the indentation of the first statement is removed. Lines continuing a
    multi-line literal are kept byte for byte.
    """
    block = module.text(body_node)
    inner = block[1:-1] if block.startswith("{") and block.endswith("}") else block
    literal_rows = _literal_rows(body_node)
    start_row = body_node.start_point[0]
    rows = [(start_row + offset, line) for offset, line in enumerate(inner.split("\n"))]
    head_row, head = rows.pop(0)

    while rows and rows[0][0] not in literal_rows and not rows[0][1].strip():
        rows.pop(0)
    while rows and rows[-1][0] not in literal_rows and not rows[-1][1].strip():
        rows.pop()

    margin = ""
    for row, line in rows:
        if row not in literal_rows:
            margin = line[: len(line) - len(line.lstrip())]
            break

    lines: List[str] = []
    literal_lines: List[int] = []
    if head.strip():
        # A literal opened on the brace line keeps its trailing whitespace.
        lines.append(head.lstrip() if head_row + 1 in literal_rows else head.strip())
    for row, line in rows:
        if row in literal_rows:
            literal_lines.append(len(lines))
            lines.append(line)
        elif not line.strip():
            lines.append("")
        elif line.startswith(margin):
            lines.append(line[len(margin) :])
        else:
            lines.append(line.lstrip())
    return "\n".join(lines), tuple(literal_lines)


__all__ = ["DeclarationReader"]
