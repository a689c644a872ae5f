from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional
import sys

import pytest
from pypdf import PdfReader, PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def page_width(tag: int, page_index: int) -> int:
    """Width given to page *page_index* of the PDF created with *tag*."""

    return tag * 100 + page_index + 1


def read_widths(path: Path) -> list[int]:
    reader = PdfReader(str(path))
    return [int(float(page.mediabox.width)) for page in reader.pages]


class ScriptedDialogs:
    """Dialogs double answering with canned values and recording calls."""

    def __init__(self, name: Optional[str] = "merged", overwrite: bool = False) -> None:
        self.name = name
        self.overwrite = overwrite
        self.prompts = 0
        self.overwrite_questions: list[tuple[str, Path]] = []
        self.infos: list[str] = []
        self.errors: list[str] = []

    def prompt_for_output_name(self) -> Optional[str]:
        self.prompts += 1
        return self.name

    def confirm_overwrite(self, filename: str, directory: Path) -> bool:
        self.overwrite_questions.append((filename, directory))
        return self.overwrite

    def show_info(self, message: str) -> None:
        self.infos.append(message)

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def close(self) -> None:
        pass


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(filename: str, pages: int = 1, tag: int = 1) -> Path:
        path = tmp_path / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        writer = PdfWriter()
        for index in range(pages):
            writer.add_blank_page(width=page_width(tag, index), height=72)
        with path.open("wb") as handle:
            writer.write(handle)
        return path

    return _create


@pytest.fixture()
def corrupt_pdf(tmp_path: Path) -> Path:
    path = tmp_path / "corrupt.pdf"
    path.write_bytes(b"this is not a pdf at all")
    return path


@pytest.fixture()
def output_dir(tmp_path: Path) -> Path:
    path = tmp_path / "program"
    path.mkdir()
    return path


@pytest.fixture()
def dialogs() -> ScriptedDialogs:
    return ScriptedDialogs()
