"""Backend abstractions for PDF Combine."""

from .base import BackendDocument, PDFBackend
from .pypdf_backend import PypdfBackend, PypdfImportDocument, PypdfOutputDocument

__all__ = [
    "BackendDocument",
    "PDFBackend",
    "PypdfBackend",
    "PypdfImportDocument",
    "PypdfOutputDocument",
]
