"""Pipeline orchestration: parse, extract, validate, synthesize, write."""

from __future__ import annotations

from pathlib import Path
from typing import List

from .config import CodegenConfig
from .constants import DEFAULT_EXTENSION
from .errors import MissingTarget, TargetNotFound
from .extract import DeclarationReader, PreambleExtractor
from .logging import get_logger
from .models import OutputDocument
from .parsing import TypeScriptParser
from .synth import Synthesizer
from .validators import StructureValidator
from .writer import DocumentWriter


class Codegen:
    """Converts one class-shaped test file into k6 scripts.

    Every exported class is read, validated and rendered before anything is
    written, so a failure in any class leaves the output directory untouched.
    """

    def __init__(
        self,
        config: CodegenConfig | None = None,
        *,
        parser: TypeScriptParser | None = None,
        extractor: PreambleExtractor | None = None,
        reader: DeclarationReader | None = None,
        validator: StructureValidator | None = None,
        synthesizer: Synthesizer | None = None,
        writer: DocumentWriter | None = None,
    ) -> None:
        self.config = config or CodegenConfig(root=Path.cwd())
        output = self.config.output
        self.parser = parser or TypeScriptParser()
        self.extractor = extractor or PreambleExtractor(self.config.exclude_imports)
        self.reader = reader or DeclarationReader()
        self.validator = validator or StructureValidator()
        self.synthesizer = synthesizer or Synthesizer(
            executor=self.config.executor,
            indent=output.indent,
            templates_dir=output.templates_dir,
        )
        self.writer = writer or DocumentWriter(output.directory, suffix=output.suffix)
        self.logger = get_logger("codegen")

    def generate(self, target: Path) -> List[OutputDocument]:
        """Return one document per exported class without touching the disk."""
        if not target.is_file():
            raise TargetNotFound(target)

        module = self.parser.parse_file(target)
        preamble = self.extractor.extract(module)
        self.logger.debug(
            "Carrying %d import(s) and %d statement(s) from %s",
            len(preamble.imports),
            len(preamble.statements),
            target,
        )

        extension = target.suffix.lstrip(".") or DEFAULT_EXTENSION
        documents: List[OutputDocument] = []
        for descriptor in self.reader.read(module):
            plan = self.validator.validate(descriptor)
            text = self.synthesizer.render(preamble, plan)
            documents.append(OutputDocument(class_name=plan.name, text=text, extension=extension))
        return documents

    def run(self, target: Path) -> List[Path]:
        documents = self.generate(target)
        written = self.writer.write_all(documents)
        self.logger.debug("Generated %d script(s) from %s", len(written), target)
        return written


def run_codegen(
    target: str | Path | None,
    *,
    config: CodegenConfig | None = None,
) -> List[Path]:
    """Resolve ``target`` against the working directory and generate its scripts."""
    if target is None or not str(target).strip():
        raise MissingTarget()
    full_path = (Path.cwd() / Path(target)).resolve()
    return Codegen(config).run(full_path)


__all__ = ["Codegen", "run_codegen"]
