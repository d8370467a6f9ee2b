class PdfError(Exception):
    """Base exception for PDF handling errors."""


class MalformedDocumentError(PdfError):
    """Raised when a byte buffer cannot be parsed as a PDF document."""
