"""Utilities shared by the PDF Combine modules."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(LOG_FORMAT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def configure_logging(verbose: bool = False) -> None:
    """Set the level of every ``pdfcombine`` logger created so far."""

    level = logging.DEBUG if verbose else logging.WARNING
    for name in list(logging.root.manager.loggerDict):
        if name == "pdfcombine" or name.startswith("pdfcombine."):
            logging.getLogger(name).setLevel(level)


def ensure_path(path: PathLike) -> Path:
    """Return a :class:`~pathlib.Path` instance for *path*."""

    resolved = Path(path).expanduser()
    try:
        return resolved.resolve(strict=False)
    except FileNotFoundError:  # pragma: no cover - defensive
        return resolved


def program_directory() -> Path:
    """Return the directory holding the running program.

    A frozen executable (PyInstaller and friends) lives next to
    ``sys.executable``; otherwise the launched script is ``sys.argv[0]``.
    """

    if getattr(sys, "frozen", False):
        return ensure_path(sys.executable).parent
    launched = sys.argv[0] if sys.argv and sys.argv[0] else __file__
    return ensure_path(launched).parent


__all__ = [
    "PathLike",
    "get_logger",
    "configure_logging",
    "ensure_path",
    "program_directory",
]
