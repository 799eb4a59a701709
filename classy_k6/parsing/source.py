"""Tree-sitter powered view over a single TypeScript source file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Set

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser

from ..errors import SourceDecodeError
from ..logging import get_logger

_LANGUAGE_FACTORIES: Dict[str, Callable[[], object]] = {
    "typescript": tree_sitter_typescript.language_typescript,
    "tsx": tree_sitter_typescript.language_tsx,
}

_TSX_SUFFIXES = {".tsx", ".jsx"}

CLASS_NODE_TYPES = frozenset({"class_declaration", "abstract_class_declaration", "class"})


@dataclass
class TopLevelClass:
    """A class declared at module level, with its export status."""

    node: Node
    name: Optional[str]
    exported: bool


class SourceModule:
    """Parsed source file exposing the top-level queries the generator needs."""

    def __init__(self, path: Path, source_bytes: bytes, root: Node) -> None:
        self.path = path
        self._source_bytes = source_bytes
        self.root = root

    @property
    def has_errors(self) -> bool:
        return self.root.has_error

    @property
    def statements(self) -> List[Node]:
        return [child for child in self.root.named_children if child.type != "comment"]

    def text(self, node: Node) -> str:
        return self._source_bytes[node.start_byte : node.end_byte].decode("utf-8", errors="replace")

    def import_declarations(self) -> List[Node]:
        return [stmt for stmt in self.statements if stmt.type == "import_statement"]

    def import_source(self, node: Node) -> str:
        """Return the module specifier of an import statement without quotes."""
        source = node.child_by_field_name("source")
        if source is None:
            for child in node.named_children:
                if child.type == "import_require_clause":
                    source = child.child_by_field_name("source")
                    break
        if source is None:
            return ""
        return self.text(source)[1:-1]

    def classes(self) -> List[TopLevelClass]:
        exported_names = self._exported_names()
        found: List[TopLevelClass] = []
        for statement in self.statements:
            declaration = unwrap_export(statement)
            if declaration is None or declaration.type not in CLASS_NODE_TYPES:
                continue
            name_node = declaration.child_by_field_name("name")
            name = self.text(name_node) if name_node is not None else None
            exported = statement.type == "export_statement" or name in exported_names
            found.append(TopLevelClass(node=declaration, name=name, exported=exported))
        return found

    def exported_classes(self) -> List[TopLevelClass]:
        return [cls for cls in self.classes() if cls.exported]

    def _exported_names(self) -> Set[str]:
        names: Set[str] = set()
        for statement in self.statements:
            if statement.type != "export_statement":
                continue
            if statement.child_by_field_name("source") is not None:
                continue
            value = statement.child_by_field_name("value")
            if value is not None and value.type == "identifier":
                names.add(self.text(value))
            for child in statement.named_children:
                if child.type != "export_clause":
                    continue
                for specifier in child.named_children:
                    if specifier.type != "export_specifier":
                        continue
                    name_node = specifier.child_by_field_name("name")
                    if name_node is not None:
                        names.add(self.text(name_node))
        return names


def unwrap_export(statement: Node) -> Optional[Node]:
    """Return the declaration wrapped by an export statement, or the statement itself."""
    if statement.type != "export_statement":
        return statement
    declaration = statement.child_by_field_name("declaration")
    if declaration is not None:
        return declaration
    return statement.child_by_field_name("value")


class TypeScriptParser:
    """Parses TypeScript sources, caching one tree-sitter parser per dialect."""

    def __init__(self) -> None:
        self._parsers: Dict[str, Parser] = {}
        self.logger = get_logger("parsing")

    def parse_file(self, path: Path) -> SourceModule:
        try:
            source = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise SourceDecodeError(path, exc) from exc
        return self.parse_text(source, path=path)

    def parse_text(self, source: str, *, path: Path | None = None) -> SourceModule:
        path = path or Path("<memory>.ts")
        source_bytes = source.encode("utf-8")
        parser = self._get_parser(self.dialect_for(path))
        tree = parser.parse(source_bytes)
        module = SourceModule(path, source_bytes, tree.root_node)
        if module.has_errors:
            self.logger.warning("Syntax errors detected in %s; output may be incomplete", path)
        return module

    def _get_parser(self, dialect: str) -> Parser:
        parser = self._parsers.get(dialect)
        if parser is not None:
            return parser
        language = Language(_LANGUAGE_FACTORIES[dialect]())
        parser = Parser(language)
        self._parsers[dialect] = parser
        return parser

    @staticmethod
    def dialect_for(path: Path) -> str:
        if path.suffix.lower() in _TSX_SUFFIXES:
            return "tsx"
        return "typescript"


__all__ = ["SourceModule", "TopLevelClass", "TypeScriptParser", "unwrap_export", "CLASS_NODE_TYPES"]
