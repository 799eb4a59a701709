"""Selects the imports and free-standing declarations carried into generated scripts."""

from __future__ import annotations

from typing import List, Sequence

from ..constants import EXCLUDED_IMPORT_MARKERS
from ..logging import get_logger
from ..models import ImportSpan, Preamble
from ..parsing import SourceModule, unwrap_export

_PREAMBLE_NODE_TYPES = frozenset(
    {
        "function_declaration",
        "generator_function_declaration",
        "function_signature",
        "lexical_declaration",
        "variable_declaration",
    }
)


class PreambleExtractor:
    """Collects import statements and top-level function/variable declarations."""

    def __init__(self, exclude_imports: Sequence[str] = EXCLUDED_IMPORT_MARKERS) -> None:
        self.exclude_imports = tuple(exclude_imports)
        self.logger = get_logger("extract.preamble")

    def extract(self, module: SourceModule) -> Preamble:
        return Preamble(imports=self.imports(module), statements=self.statements(module))

    def imports(self, module: SourceModule) -> List[ImportSpan]:
        spans: List[ImportSpan] = []
        for node in module.import_declarations():
            specifier = module.import_source(node)
            if any(marker in specifier for marker in self.exclude_imports):
                self.logger.debug("Dropping DSL import '%s'", specifier)
                continue
            spans.append(ImportSpan(specifier=specifier, text=module.text(node)))
        return spans

    def statements(self, module: SourceModule) -> List[str]:
        kept: List[str] = []
        for statement in module.statements:
            declaration = unwrap_export(statement)
            if declaration is not None and declaration.type == "ambient_declaration":
                declaration = next(iter(declaration.named_children), None)
            if declaration is None or declaration.type not in _PREAMBLE_NODE_TYPES:
                continue
            kept.append(module.text(statement))
        return kept


__all__ = ["PreambleExtractor"]
