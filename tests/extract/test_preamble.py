"""Tests for import and preamble carry-over."""

from __future__ import annotations

from classy_k6.extract import PreambleExtractor


def test_imports_exclude_dsl_and_package_specifiers(source_builder) -> None:
    module = source_builder.parse(
        """
        import http from "k6/http";
        import { scenario } from "./dsl";
        import { k6Test } from "classy-k6";
        import { sleep } from "k6";
        """
    )
    spans = PreambleExtractor().imports(module)
    assert [span.specifier for span in spans] == ["k6/http", "k6"]
    assert [span.text for span in spans] == [
        'import http from "k6/http";',
        'import { sleep } from "k6";',
    ]


def test_custom_exclusions_apply_as_substrings(source_builder) -> None:
    module = source_builder.parse(
        """
        import http from "k6/http";
        import { scenario } from "@acme/k6-dsl";
        """
    )
    spans = PreambleExtractor(exclude_imports=["k6-dsl"]).imports(module)
    assert [span.specifier for span in spans] == ["k6/http"]


def test_statements_keep_functions_and_variables_in_order(source_builder) -> None:
    module = source_builder.parse(
        """
        import http from "k6/http";
        const BASE = "https://test.k6.io";
        console.log("dropped");
        function url(path: string) {
          return BASE + path;
        }
        export let counter = 0;
        var legacy = true;
        export class Browse {}
        interface Dropped {}
        """
    )
    statements = PreambleExtractor().statements(module)
    assert statements == [
        'const BASE = "https://test.k6.io";',
        "function url(path: string) {\n  return BASE + path;\n}",
        "export let counter = 0;",
        "var legacy = true;",
    ]


def test_empty_module_yields_empty_preamble(source_builder) -> None:
    module = source_builder.parse("export class Empty {}\n")
    preamble = PreambleExtractor().extract(module)
    assert preamble.imports == []
    assert preamble.statements == []


def test_ambient_variable_and_function_declarations_are_kept(source_builder) -> None:
    module = source_builder.parse(
        """
        declare const __ENV: Record<string, string>;
        declare function open(path: string): string;
        declare module "k6/x/custom" {
          export function run(): void;
        }
        export class Api {}
        """
    )
    assert PreambleExtractor().statements(module) == [
        "declare const __ENV: Record<string, string>;",
        "declare function open(path: string): string;",
    ]
