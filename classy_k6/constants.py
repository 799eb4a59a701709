"""Vocabulary of the class-shaped test DSL and generator defaults."""

from __future__ import annotations

SCENARIO_MARKER = "scenario"
OPTIONS_PROPERTY = "options"
SETUP_METHOD = "setup"
TEARDOWN_METHOD = "teardown"

# Import specifiers containing any of these substrings point at the DSL shim
# or at this package and are never carried into generated scripts.
EXCLUDED_IMPORT_MARKERS = ("./dsl", "classy-k6")

DEFAULT_EXECUTOR = "constant-vus"
DEFAULT_SUFFIX = "generated"
DEFAULT_EXTENSION = "ts"
DEFAULT_INDENT = 2
DEFAULT_CLASS_NAME = "Test"

CONFIG_FILENAME = ".classy-k6.yml"
