"""Backend protocol for PDF operations."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Protocol


@dataclass
class BackendDocument:
    """Represents a loaded or newly created PDF document."""

    source: Path | None = None

    @property
    def page_count(self) -> int:
        raise NotImplementedError

    def iter_pages(self) -> Iterable[object]:
        raise NotImplementedError

    def get_page(self, index: int) -> object:
        raise NotImplementedError

    def append_page(self, page: object) -> None:
        raise NotImplementedError

    def save(self, destination: Path) -> None:
        raise NotImplementedError


class PDFBackend(Protocol):
    """Protocol defining backend operations for PDF reading/writing."""

    def open_for_import(self, pdf_path: Path) -> BackendDocument:
        """Open a PDF read-only so its pages can be copied elsewhere."""

    def new_document(self) -> BackendDocument:
        """Return an empty document that pages can be appended to."""
