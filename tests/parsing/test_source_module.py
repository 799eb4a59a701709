"""Tests for the tree-sitter source view."""

from __future__ import annotations

from pathlib import Path

from classy_k6.parsing import TypeScriptParser


def test_parser_selects_dialect_from_suffix() -> None:
    assert TypeScriptParser.dialect_for(Path("load.ts")) == "typescript"
    assert TypeScriptParser.dialect_for(Path("load.mts")) == "typescript"
    assert TypeScriptParser.dialect_for(Path("Load.TSX")) == "tsx"


def test_statements_skip_comments(source_builder) -> None:
    module = source_builder.parse(
        """
        // leading comment
        import http from "k6/http";
        const BASE = "https://test.k6.io";
        """
    )
    kinds = [stmt.type for stmt in module.statements]
    assert kinds == ["import_statement", "lexical_declaration"]


def test_import_source_strips_quotes(source_builder) -> None:
    module = source_builder.parse(
        """
        import http from "k6/http";
        import { check } from 'k6';
        """
    )
    sources = [module.import_source(node) for node in module.import_declarations()]
    assert sources == ["k6/http", "k6"]


def test_exported_classes_cover_export_forms(source_builder) -> None:
    module = source_builder.parse(
        """
        export class Direct {}
        class Hidden {}
        class Listed {}
        class Renamed {}
        class Defaulted {}
        export { Listed, Renamed as Alias };
        export default Defaulted;
        """
    )
    names = [cls.name for cls in module.exported_classes()]
    assert names == ["Direct", "Listed", "Renamed", "Defaulted"]
    hidden = [cls for cls in module.classes() if cls.name == "Hidden"]
    assert hidden and hidden[0].exported is False


def test_reexports_do_not_publish_local_classes(source_builder) -> None:
    module = source_builder.parse(
        """
        class Local {}
        export { Local } from "./other";
        """
    )
    assert module.exported_classes() == []


def test_anonymous_default_class_is_exported(source_builder) -> None:
    module = source_builder.parse(
        """
        export default class {
          setup() {}
        }
        """
    )
    classes = module.exported_classes()
    assert len(classes) == 1
    assert classes[0].name is None


def test_text_recovers_exact_span(source_builder) -> None:
    module = source_builder.parse('const greeting = "héllo";\n')
    (statement,) = module.statements
    assert module.text(statement) == 'const greeting = "héllo";'


def test_parse_text_flags_syntax_errors() -> None:
    module = TypeScriptParser().parse_text("export class {{{ broken")
    assert module.has_errors is True
