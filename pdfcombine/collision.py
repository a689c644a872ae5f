"""Overwrite confirmation for an existing output file."""

from __future__ import annotations

from .dialogs import Dialogs
from .types import OutputSpec
from .utils import get_logger

LOGGER = get_logger("pdfcombine.collision")


def confirm_destination(target: OutputSpec, dialogs: Dialogs) -> bool:
    """Return ``True`` when the merged PDF may be written to ``target.path``.

    A missing target needs no confirmation. An existing one is only
    replaced after the user agrees; the file is left untouched otherwise.
    The check is not atomic with the later write.
    """

    if not target.path.exists():
        return True

    LOGGER.debug("Output %s already exists; asking before overwriting", target.path)
    approved = bool(dialogs.confirm_overwrite(target.filename, target.directory))
    if not approved:
        LOGGER.info("Overwrite of %s declined", target.path)
    return approved


__all__ = ["confirm_destination"]
