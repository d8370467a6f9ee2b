class RecognitionError(Exception):
    """Base exception for text recognition errors."""


class RecognitionFailure(RecognitionError):
    """Raised when the recognition engine fails on an image."""
