"""Failure conditions raised by the code generator."""

from __future__ import annotations

from pathlib import Path


class CodegenError(RuntimeError):
    """Base class for fatal code generation failures."""


class MissingTarget(CodegenError):
    """Raised when no input path was supplied."""

    def __init__(self) -> None:
        super().__init__("Provide path to your test file or directory")


class TargetNotFound(CodegenError):
    """Raised when the input path does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Test file not found: {path}")
        self.path = path


class SourceDecodeError(CodegenError):
    """Raised when the input file is not valid UTF-8."""

    def __init__(self, path: Path, reason: UnicodeDecodeError) -> None:
        super().__init__(f"Test file is not valid UTF-8: {path} (byte {reason.start})")
        self.path = path


class NoExportedClass(CodegenError):
    """Raised when the source file exports no class declaration."""

    def __init__(self, path: Path | None = None) -> None:
        location = f" in {path}" if path is not None else ""
        super().__init__(f"No exported classes found{location}")
        self.path = path


class MissingScenarioConfig(CodegenError):
    """Raised when a scenario marker is used without its config argument."""

    def __init__(self, class_name: str, method_name: str) -> None:
        super().__init__(f"@scenario missing config on {class_name}.{method_name}()")
        self.class_name = class_name
        self.method_name = method_name


class MultipleSetup(CodegenError):
    def __init__(self, class_name: str) -> None:
        super().__init__(f"Only one setup() allowed in class {class_name}")
        self.class_name = class_name


class MultipleTeardown(CodegenError):
    def __init__(self, class_name: str) -> None:
        super().__init__(f"Only one teardown() allowed in class {class_name}")
        self.class_name = class_name


class DuplicateScenario(CodegenError):
    """Raised when two scenario methods of one class share a name."""

    def __init__(self, class_name: str, scenario: str) -> None:
        super().__init__(f"Scenario '{scenario}' declared more than once in class {class_name}")
        self.class_name = class_name
        self.scenario = scenario


__all__ = [
    "CodegenError",
    "DuplicateScenario",
    "MissingScenarioConfig",
    "MissingTarget",
    "MultipleSetup",
    "MultipleTeardown",
    "NoExportedClass",
    "SourceDecodeError",
    "TargetNotFound",
]
