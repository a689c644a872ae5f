"""
Data structures shared across the merge pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple


@dataclass(frozen=True)
class OutputSpec:
    """
    Sanitized output filename resolved against the fixed base directory.

    Attributes:
        directory: Directory the merged PDF is written into
        filename: Sanitized filename, always ending in ``.pdf``
    """
    directory: Path
    filename: str

    @property
    def path(self) -> Path:
        return self.directory / self.filename


@dataclass
class MergeResult:
    """
    Result of a merge operation.

    Attributes:
        output_path: Path of the written PDF
        inputs: Input files in the order they were merged
        total_pages: Number of pages in the merged document
        page_sources: ``(input, original page index)`` for every output page
    """
    output_path: Path
    inputs: List[Path]
    total_pages: int
    page_sources: List[Tuple[Path, int]] = field(default_factory=list)

    @property
    def files_merged(self) -> int:
        return len(self.inputs)

    def __str__(self) -> str:
        return f"MergeResult(files={self.files_merged}, pages={self.total_pages})"
