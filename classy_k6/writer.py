"""Persists generated scripts next to the caller."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from .constants import DEFAULT_SUFFIX
from .logging import get_logger
from .models import OutputDocument


class DocumentWriter:
    """Writes ``<Class>.<suffix>.<ext>`` files, overwriting existing ones."""

    def __init__(self, directory: Path | None = None, *, suffix: str = DEFAULT_SUFFIX) -> None:
        self._directory = directory
        self.suffix = suffix
        self.logger = get_logger("writer")

    @property
    def directory(self) -> Path:
        return self._directory if self._directory is not None else Path.cwd()

    def filename_for(self, document: OutputDocument) -> str:
        return f"{document.class_name}.{self.suffix}.{document.extension}"

    def path_for(self, document: OutputDocument) -> Path:
        return self.directory / self.filename_for(document)

    def write(self, document: OutputDocument) -> Path:
        path = self.path_for(document)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(document.text, encoding="utf-8")
        self.logger.debug("Wrote %d characters to %s", len(document.text), path)
        return path

    def write_all(self, documents: Iterable[OutputDocument]) -> List[Path]:
        return [self.write(document) for document in documents]


__all__ = ["DocumentWriter"]
