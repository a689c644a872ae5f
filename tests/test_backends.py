from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Callable

import pytest

from pdfcombine.backends import PypdfBackend
from pdfcombine.exceptions import InvalidPDFError

from .conftest import read_widths


def test_open_for_import_reads_pages(pdf_factory: Callable[..., Path]) -> None:
    document = PypdfBackend().open_for_import(pdf_factory("three.pdf", pages=3))

    assert document.page_count == 3
    assert len(list(document.iter_pages())) == 3
    assert document.get_page(2) is not None


def test_open_for_import_missing_file(tmp_path: Path) -> None:
    with pytest.raises(InvalidPDFError, match="not found"):
        PypdfBackend().open_for_import(tmp_path / "missing.pdf")


def test_open_for_import_corrupt_file(corrupt_pdf: Path) -> None:
    with pytest.raises(InvalidPDFError):
        PypdfBackend().open_for_import(corrupt_pdf)


def test_imported_document_is_read_only(tmp_path: Path, pdf_factory: Callable[..., Path]) -> None:
    document = PypdfBackend().open_for_import(pdf_factory("source.pdf"))

    with pytest.raises(TypeError):
        document.append_page(document.get_page(0))
    with pytest.raises(TypeError):
        document.save(tmp_path / "copy.pdf")


def test_save_replaces_destination_without_leftovers(
    tmp_path: Path, pdf_factory: Callable[..., Path]
) -> None:
    backend = PypdfBackend()
    source = backend.open_for_import(pdf_factory("source.pdf", pages=2))
    output_dir = tmp_path / "out"
    output_dir.mkdir()
    destination = output_dir / "merged.pdf"
    destination.write_bytes(b"old")

    document = backend.new_document()
    for page in source.iter_pages():
        document.append_page(page)
    document.save(destination)

    assert len(read_widths(destination)) == 2
    assert sorted(p.name for p in output_dir.iterdir()) == ["merged.pdf"]


def test_failed_save_keeps_previous_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    document = PypdfBackend().new_document()
    document.writer.add_blank_page(width=72, height=72)
    output_dir = tmp_path / "out"
    output_dir.mkdir()
    destination = output_dir / "merged.pdf"
    destination.write_bytes(b"old")

    def broken_write(stream: object) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(document.writer, "write", broken_write)

    with pytest.raises(OSError, match="disk full"):
        document.save(destination)

    assert destination.read_bytes() == b"old"
    assert sorted(p.name for p in output_dir.iterdir()) == ["merged.pdf"]


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_save_applies_umask_and_keeps_existing_mode(tmp_path: Path) -> None:
    fresh = tmp_path / "fresh.pdf"
    existing = tmp_path / "existing.pdf"
    existing.write_bytes(b"old")
    os.chmod(existing, 0o640)

    previous = os.umask(0o022)
    try:
        for destination in (fresh, existing):
            document = PypdfBackend().new_document()
            document.writer.add_blank_page(width=72, height=72)
            document.save(destination)
    finally:
        os.umask(previous)

    assert stat.S_IMODE(fresh.stat().st_mode) == 0o644
    assert stat.S_IMODE(existing.stat().st_mode) == 0o640
