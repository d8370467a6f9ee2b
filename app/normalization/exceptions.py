class NormalizationError(Exception):
    """Raised when text normalization fails."""


class DictionaryLoadError(NormalizationError):
    """Raised when a spelling dictionary cannot be loaded."""
