"""pypdf backend implementation for PDF Combine."""

from __future__ import annotations

import io
import os
import stat
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from pypdf import PdfReader, PdfWriter
from pypdf.errors import PdfReadError

from ..exceptions import EncryptedPDFError, InvalidPDFError
from ..utils import get_logger
from .base import BackendDocument, PDFBackend

LOGGER = get_logger("pdfcombine.backends")


def _output_mode(destination: Path) -> int:
    """Permission bits for the saved file: keep an existing file's, else honour the umask."""

    try:
        return stat.S_IMODE(destination.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


@dataclass
class PypdfImportDocument(BackendDocument):
    """Read-only view over an input PDF."""

    reader: PdfReader | None = None

    @property
    def page_count(self) -> int:
        return len(self.reader.pages)

    def iter_pages(self) -> Iterable[object]:
        return iter(self.reader.pages)

    def get_page(self, index: int) -> object:
        return self.reader.pages[index]

    def append_page(self, page: object) -> None:
        raise TypeError(f"Document opened for import is read-only: {self.source}")

    def save(self, destination: Path) -> None:
        raise TypeError(f"Document opened for import is read-only: {self.source}")


@dataclass
class PypdfOutputDocument(BackendDocument):
    """Writable document built up one page at a time."""

    writer: PdfWriter = field(default_factory=PdfWriter)

    @property
    def page_count(self) -> int:
        return len(self.writer.pages)

    def iter_pages(self) -> Iterable[object]:
        return iter(self.writer.pages)

    def get_page(self, index: int) -> object:
        return self.writer.pages[index]

    def append_page(self, page: object) -> None:
        self.writer.add_page(page)

    def save(self, destination: Path) -> None:
        """Write the document to *destination*, replacing it in one step.

        The bytes go to a temporary file beside the destination first, so an
        interrupted write never leaves a truncated PDF at *destination*.
        """

        destination = Path(destination)
        destination.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "wb", delete=False, dir=destination.parent, suffix=".tmp"
        ) as handle:
            temp_path = Path(handle.name)
            try:
                self.writer.write(handle)
            except BaseException:
                handle.close()
                temp_path.unlink(missing_ok=True)
                raise
        try:
            os.chmod(temp_path, _output_mode(destination))
            temp_path.replace(destination)
        except OSError:
            temp_path.unlink(missing_ok=True)
            raise
        self.source = destination


class PypdfBackend(PDFBackend):
    """Backend implementation that uses `pypdf` under the hood."""

    def open_for_import(self, pdf_path: Path) -> PypdfImportDocument:
        path = Path(pdf_path)
        if not path.is_file():
            raise InvalidPDFError(f"PDF file not found: {pdf_path}")

        try:
            raw_bytes = path.read_bytes()
        except OSError as exc:
            raise InvalidPDFError(f"Unable to read PDF file: {pdf_path}. Error: {exc}") from exc

        try:
            reader = PdfReader(io.BytesIO(raw_bytes))
        except PdfReadError as exc:
            raise InvalidPDFError(f"Corrupted or invalid PDF file: {pdf_path}. Error: {exc}") from exc
        except Exception as exc:
            raise InvalidPDFError(f"Unexpected error reading PDF: {pdf_path}. Error: {exc}") from exc

        if reader.is_encrypted:
            LOGGER.debug("Attempting to decrypt encrypted PDF %s", path)
            try:
                decrypted = reader.decrypt("")
            except Exception as exc:  # pragma: no cover - decrypt errors vary
                raise EncryptedPDFError(f"Unable to decrypt encrypted PDF: {pdf_path}. Error: {exc}") from exc
            if not decrypted:
                raise EncryptedPDFError(f"PDF is password protected: {pdf_path}")

        try:
            len(reader.pages)
        except Exception as exc:
            raise InvalidPDFError(f"Corrupted page tree in PDF: {pdf_path}. Error: {exc}") from exc

        return PypdfImportDocument(source=path, reader=reader)

    def new_document(self) -> PypdfOutputDocument:
        return PypdfOutputDocument()
