"""Input discovery: turn raw command line arguments into merge inputs."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Tuple

from .exceptions import NoValidInputsError
from .utils import get_logger

LOGGER = get_logger("pdfcombine.collector")

PDF_SUFFIX = ".pdf"


def _strip_quotes(raw: str) -> str:
    return raw.strip('"')


def is_pdf_candidate(path: Path) -> bool:
    """Return ``True`` when *path* is an existing, readable ``.pdf`` file."""

    if not path.is_file():
        LOGGER.debug("Skipping %s: file does not exist", path)
        return False
    if path.suffix.lower() != PDF_SUFFIX:
        LOGGER.debug("Skipping %s: not a .pdf file", path)
        return False
    if not os.access(path, os.R_OK):
        LOGGER.debug("Skipping %s: permission denied", path)
        return False
    return True


def merge_order_key(candidate: str) -> str:
    return candidate.upper()


def collect_inputs(raw_args: Iterable[str]) -> List[Path]:
    """Filter *raw_args* down to PDF files and sort them into merge order.

    Entries are kept exactly as often as they appear, so a file passed
    twice contributes its pages twice. The result is sorted
    case-insensitively by each path as it was passed, which is the page
    order of the merged document.

    Raises:
        NoValidInputsError: If no argument names a usable PDF file.
    """

    accepted: List[Tuple[str, Path]] = []
    for raw in raw_args:
        candidate = _strip_quotes(raw)
        if not candidate.strip():
            continue
        path = Path(candidate)
        if is_pdf_candidate(path):
            accepted.append((candidate, path))

    if not accepted:
        raise NoValidInputsError()

    # sort on the argument text, Path() drops "." segments and doubled slashes
    accepted.sort(key=lambda item: merge_order_key(item[0]))
    inputs = [path for _, path in accepted]
    LOGGER.info("Collected %d input PDF(s)", len(inputs))
    return inputs


__all__ = ["collect_inputs", "is_pdf_candidate", "merge_order_key"]
