"""
PDF Combine - merge dropped PDF files into one document.

Quick Start:
    >>> from pdfcombine import collect_inputs, merge_pdfs
    >>> inputs = collect_inputs(['b.pdf', 'A.pdf'])
    >>> result = merge_pdfs(inputs, 'combined.pdf')

For interactive use, run the 'pdf-combine' command with the files to merge.
"""

__version__ = "1.0.0"

# Pipeline stages
from pdfcombine.collector import collect_inputs
from pdfcombine.naming import build_output_spec, ensure_pdf_extension, sanitize_filename
from pdfcombine.collision import confirm_destination
from pdfcombine.merger import merge_pdfs

# Orchestration
from pdfcombine.app import CombineContext, ExitCode, run

# Data types
from pdfcombine.types import MergeResult, OutputSpec

# Exceptions
from pdfcombine.exceptions import (
    PDFCombineError,
    UserCancelledError,
    NoValidInputsError,
    PdfMergeError,
    InvalidPDFError,
    EncryptedPDFError,
)

__all__ = [
    "collect_inputs",
    "build_output_spec",
    "ensure_pdf_extension",
    "sanitize_filename",
    "confirm_destination",
    "merge_pdfs",
    "CombineContext",
    "ExitCode",
    "run",
    "MergeResult",
    "OutputSpec",
    "PDFCombineError",
    "UserCancelledError",
    "NoValidInputsError",
    "PdfMergeError",
    "InvalidPDFError",
    "EncryptedPDFError",
    "__version__",
]
