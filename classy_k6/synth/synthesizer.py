"""Renders k6 scripts from validated test plans using Jinja templates."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..constants import DEFAULT_EXECUTOR, DEFAULT_INDENT, SETUP_METHOD, TEARDOWN_METHOD
from ..models import MethodDescriptor, Preamble, ScriptPlan

_TEMPLATES_DIR = Path(__file__).with_name("templates")


class Synthesizer:
    """Assembles the exported functions and ``options`` object of a k6 script.

    Output depends only on its inputs: the same preamble and plan always
    render to the same text.
    """

    def __init__(
        self,
        *,
        executor: str = DEFAULT_EXECUTOR,
        indent: int = DEFAULT_INDENT,
        templates_dir: Path | None = None,
    ) -> None:
        self.executor = executor
        self.indent = indent
        self.templates_dir = templates_dir
        self._env = self._create_env(templates_dir)

    def render(self, preamble: Preamble, plan: ScriptPlan) -> str:
        blocks: List[str] = []
        if preamble.imports:
            blocks.append("\n".join(span.text for span in preamble.imports))
        blocks.extend(preamble.statements)

        if plan.setup is not None:
            blocks.append(self.render_function(SETUP_METHOD, plan.setup))
        if plan.teardown is not None:
            blocks.append(self.render_function(TEARDOWN_METHOD, plan.teardown))
        for scenario in plan.scenarios:
            blocks.append(self.render_function(scenario.name, scenario))

        blocks.append(self.render_options(plan))
        return "\n\n".join(blocks) + "\n"

    def render_function(self, name: str, method: MethodDescriptor) -> str:
        template = self._env.get_template("function.ts.j2")
        return template.render(
            name=name,
            params=method.params,
            body=method.body,
            literal_lines=method.literal_lines,
            width=self.indent,
        )

    def render_options(self, plan: ScriptPlan) -> str:
        template = self._env.get_template("options.ts.j2")
        return template.render(
            base_options=plan.options,
            scenarios=plan.scenarios,
            executor=self.executor,
        )

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories: List[str] = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(_TEMPLATES_DIR))
        env = Environment(
            loader=FileSystemLoader(directories),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        env.filters["reindent"] = _reindent
        return env


def _reindent(body: str, width: int, literal_lines: Iterable[int] = ()) -> str:
    """Indent code lines by ``width`` spaces, leaving blank and literal lines alone."""
    pad = " " * width
    skip = set(literal_lines)
    return "\n".join(
        line if index in skip or not line.strip() else pad + line
        for index, line in enumerate(body.split("\n"))
    )


__all__ = ["Synthesizer"]
