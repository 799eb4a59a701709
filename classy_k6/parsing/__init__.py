"""Source parsing backed by tree-sitter grammars."""

from .source import CLASS_NODE_TYPES, SourceModule, TopLevelClass, TypeScriptParser, unwrap_export

__all__ = [
    "CLASS_NODE_TYPES",
    "SourceModule",
    "TopLevelClass",
    "TypeScriptParser",
    "unwrap_export",
]
