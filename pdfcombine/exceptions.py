"""
Custom exceptions for PDF Combine.

Every error raised by the package derives from :class:`PDFCombineError` so
the application layer can map it to a user-facing notice and exit code.
"""


class PDFCombineError(Exception):
    """Base exception for all PDF Combine errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown PDF combine error occurred."


class UserCancelledError(PDFCombineError):
    """Raised when the user declines to name the output or to overwrite it."""

    @property
    def default_message(self) -> str:
        return "Operation cancelled by the user."


class NoValidInputsError(PDFCombineError):
    """Raised when no usable PDF file was supplied."""

    @property
    def default_message(self) -> str:
        return "Drag one or more PDF files onto this program to merge them."


class PdfMergeError(PDFCombineError):
    """Raised when the merge operation fails."""

    @property
    def default_message(self) -> str:
        return "Failed to merge PDF files."


class InvalidPDFError(PdfMergeError):
    """Raised when an input PDF is missing, unreadable or corrupted."""

    @property
    def default_message(self) -> str:
        return "Invalid or corrupted PDF file."


class EncryptedPDFError(PdfMergeError):
    """Raised when an input PDF is password protected."""

    @property
    def default_message(self) -> str:
        return "PDF is encrypted and cannot be merged without a password."
