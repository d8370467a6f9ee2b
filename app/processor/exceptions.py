class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class UploadValidationError(ProcessorError):
    """Raised when an upload request violates the upload limits."""


class UnsupportedFileTypeError(UploadValidationError):
    """Raised when a file's extension or MIME type is not accepted."""
