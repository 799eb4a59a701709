"""Tests for persisting generated scripts."""

from __future__ import annotations

from pathlib import Path

from classy_k6.models import OutputDocument
from classy_k6.writer import DocumentWriter


def test_writer_uses_class_name_suffix_and_extension(tmp_path: Path) -> None:
    writer = DocumentWriter(tmp_path)
    path = writer.write(OutputDocument(class_name="Browse", text="export {};\n", extension="ts"))
    assert path == tmp_path / "Browse.generated.ts"
    assert path.read_text(encoding="utf-8") == "export {};\n"


def test_writer_defaults_to_working_directory(workdir: Path) -> None:
    writer = DocumentWriter(suffix="k6")
    path = writer.write(OutputDocument(class_name="Api", text="", extension="js"))
    assert path == workdir / "Api.k6.js"
    assert path.exists()


def test_writer_overwrites_existing_file(tmp_path: Path) -> None:
    target = tmp_path / "Browse.generated.ts"
    target.write_text("stale", encoding="utf-8")
    DocumentWriter(tmp_path).write(OutputDocument(class_name="Browse", text="fresh", extension="ts"))
    assert target.read_text(encoding="utf-8") == "fresh"


def test_write_all_preserves_order_and_creates_directory(tmp_path: Path) -> None:
    out_dir = tmp_path / "build" / "k6"
    documents = [
        OutputDocument(class_name="First", text="1", extension="ts"),
        OutputDocument(class_name="Second", text="2", extension="ts"),
    ]
    paths = DocumentWriter(out_dir).write_all(documents)
    assert [p.name for p in paths] == ["First.generated.ts", "Second.generated.ts"]
