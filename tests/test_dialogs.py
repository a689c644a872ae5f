from __future__ import annotations

from pathlib import Path

import click
import pytest
from rich.console import Console

from pdfcombine.dialogs import ConsoleDialogs, overwrite_question


def test_overwrite_question_names_file_and_directory(tmp_path: Path) -> None:
    question = overwrite_question("merged.pdf", tmp_path)

    assert question == f'"merged.pdf" already exists in:\n{tmp_path}\n\nOverwrite?'


def test_console_prompt_abort_is_cancellation(monkeypatch: pytest.MonkeyPatch) -> None:
    def abort(*args: object, **kwargs: object) -> str:
        raise click.Abort()

    monkeypatch.setattr(click, "prompt", abort)
    monkeypatch.setattr(click, "confirm", abort)
    dialogs = ConsoleDialogs(console=Console(record=True))

    assert dialogs.prompt_for_output_name() is None
    assert dialogs.confirm_overwrite("merged.pdf", Path(".")) is False


def test_console_notices_are_printed_verbatim() -> None:
    console = Console(record=True, width=200)
    dialogs = ConsoleDialogs(console=console)

    dialogs.show_info("Merged 2 PDF(s) into:\n/tmp/[draft].pdf")
    dialogs.show_error("Error:\nboom")

    text = console.export_text()
    assert "/tmp/[draft].pdf" in text
    assert "Error:" in text and "boom" in text
