"""Merge functionality for :mod:`pdfcombine`."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from .backends import PDFBackend, PypdfBackend
from .exceptions import PdfMergeError
from .types import MergeResult
from .utils import PathLike, ensure_path, get_logger

LOGGER = get_logger("pdfcombine.merge")


def merge_pdfs(
    inputs: Iterable[PathLike],
    output: PathLike,
    *,
    backend: Optional[PDFBackend] = None,
) -> MergeResult:
    """Merge *inputs* into *output* and return a :class:`MergeResult`.

    Pages are appended input by input, in the order given, each input
    contributing its pages in their original order. Nothing is written
    unless every input opened cleanly.

    Args:
        inputs: Paths of the PDFs to merge, already in merge order.
        output: The output file path that will contain the merged PDF.
        backend: PDF backend to use; defaults to :class:`PypdfBackend`.

    Raises:
        PdfMergeError: If any input cannot be read or the output cannot be
            written.
    """

    pdf_paths = [ensure_path(path) for path in inputs]
    if not pdf_paths:
        raise PdfMergeError("No input PDFs provided")

    backend = backend or PypdfBackend()
    output_path = ensure_path(output)

    document = backend.new_document()
    page_sources: List[Tuple[Path, int]] = []
    expected_pages = 0

    for pdf_path in pdf_paths:
        LOGGER.debug("Processing input PDF %s", pdf_path)
        source = backend.open_for_import(pdf_path)
        expected_pages += source.page_count
        for page_index, page in enumerate(source.iter_pages()):
            LOGGER.debug("Adding page %s from %s", page_index, pdf_path)
            document.append_page(page)
            page_sources.append((pdf_path, page_index))

    if document.page_count != expected_pages:
        raise PdfMergeError(
            f"Merged document has {document.page_count} page(s), expected {expected_pages}"
        )

    try:
        document.save(output_path)
    except Exception as exc:  # pragma: no cover - IO errors vary
        LOGGER.error("Failed to write merged PDF to %s: %s", output_path, exc)
        raise PdfMergeError(
            f"Failed to write merged PDF to {output_path}: {exc}"
        ) from exc

    LOGGER.info("Merged %d PDFs (%d pages) into %s", len(pdf_paths), expected_pages, output_path)
    return MergeResult(
        output_path=output_path,
        inputs=pdf_paths,
        total_pages=expected_pages,
        page_sources=page_sources,
    )


__all__ = ["merge_pdfs"]
