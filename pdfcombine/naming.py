"""Output filename handling."""

from __future__ import annotations

import os
from pathlib import Path
from typing import FrozenSet, Optional

from .dialogs import Dialogs
from .types import OutputSpec
from .utils import get_logger

LOGGER = get_logger("pdfcombine.naming")

PDF_SUFFIX = ".pdf"
REPLACEMENT_CHAR = "_"

_WINDOWS_INVALID = frozenset('<>:"/\\|?*') | frozenset(chr(code) for code in range(32))
_POSIX_INVALID = frozenset("\0/")


def invalid_filename_chars(platform: Optional[str] = None) -> FrozenSet[str]:
    """Return the characters the host filesystem forbids in a filename.

    *platform* takes an :data:`os.name` value and defaults to the running
    interpreter's.
    """

    platform = platform or os.name
    if platform == "nt":
        return _WINDOWS_INVALID
    return _POSIX_INVALID


def sanitize_filename(name: str, invalid_chars: Optional[FrozenSet[str]] = None) -> str:
    """Trim *name* and replace each forbidden character with an underscore."""

    if invalid_chars is None:
        invalid_chars = invalid_filename_chars()
    trimmed = name.strip()
    return "".join(REPLACEMENT_CHAR if char in invalid_chars else char for char in trimmed)


def ensure_pdf_extension(name: str) -> str:
    if name.lower().endswith(PDF_SUFFIX):
        return name
    return name + PDF_SUFFIX


def build_output_spec(
    name: Optional[str],
    base_dir: Path,
    invalid_chars: Optional[FrozenSet[str]] = None,
) -> Optional[OutputSpec]:
    """Return the :class:`OutputSpec` for a user supplied *name*.

    ``None`` is returned for a cancelled prompt and for a name that is
    empty once trimmed.
    """

    if name is None:
        return None
    sanitized = sanitize_filename(name, invalid_chars)
    if not sanitized:
        LOGGER.debug("Empty output filename treated as cancellation")
        return None
    filename = ensure_pdf_extension(sanitized)
    if filename != name:
        LOGGER.debug("Output filename %r normalised to %r", name, filename)
    return OutputSpec(directory=Path(base_dir), filename=filename)


def resolve_output_name(dialogs: Dialogs, base_dir: Path) -> Optional[OutputSpec]:
    """Prompt for the output filename and resolve it against *base_dir*."""

    return build_output_spec(dialogs.prompt_for_output_name(), base_dir)


__all__ = [
    "invalid_filename_chars",
    "sanitize_filename",
    "ensure_pdf_extension",
    "build_output_spec",
    "resolve_output_name",
]
