"""
Pipeline orchestration for PDF Combine.

:func:`run` drives the four stages (collect inputs, name the output,
resolve collisions, merge) and is the single place where failures are
turned into notices and process exit codes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import List, Optional

from .backends import PDFBackend
from .collector import collect_inputs
from .collision import confirm_destination
from .dialogs import Dialogs
from .exceptions import NoValidInputsError, UserCancelledError
from .merger import merge_pdfs
from .naming import resolve_output_name
from .types import MergeResult
from .utils import ensure_path, get_logger

LOGGER = get_logger("pdfcombine.app")


class ExitCode(IntEnum):
    SUCCESS = 0
    NO_VALID_INPUTS = 1
    UNEXPECTED_ERROR = 2


@dataclass
class CombineContext:
    """Holds everything a single merge run needs."""

    dialogs: Dialogs
    base_dir: Path
    raw_args: List[str] = field(default_factory=list)
    backend: Optional[PDFBackend] = None
    result: Optional[MergeResult] = None

    def __post_init__(self) -> None:
        self.base_dir = ensure_path(self.base_dir)
        self.raw_args = list(self.raw_args)


def success_message(result: MergeResult) -> str:
    return f"Merged {result.files_merged} PDF(s) into:\n{result.output_path}"


def _combine(context: CombineContext) -> MergeResult:
    inputs = collect_inputs(context.raw_args)

    target = resolve_output_name(context.dialogs, context.base_dir)
    if target is None:
        raise UserCancelledError("No output filename given")

    if not confirm_destination(target, context.dialogs):
        raise UserCancelledError(f"Overwrite of {target.path} declined")

    return merge_pdfs(inputs, target.path, backend=context.backend)


def run(context: CombineContext) -> ExitCode:
    """Run one merge and return the process exit code."""

    dialogs = context.dialogs
    try:
        context.result = _combine(context)
    except UserCancelledError as exc:
        LOGGER.info("%s", exc.message)
        return ExitCode.SUCCESS
    except NoValidInputsError as exc:
        LOGGER.warning("No valid PDF inputs among %d argument(s)", len(context.raw_args))
        dialogs.show_info(exc.message)
        return ExitCode.NO_VALID_INPUTS
    except Exception as exc:
        LOGGER.error("Merge failed: %s", exc)
        LOGGER.debug("Merge failure details", exc_info=True)
        dialogs.show_error(f"Error:\n{exc}")
        return ExitCode.UNEXPECTED_ERROR

    dialogs.show_info(success_message(context.result))
    return ExitCode.SUCCESS


__all__ = ["ExitCode", "CombineContext", "run", "success_message"]
