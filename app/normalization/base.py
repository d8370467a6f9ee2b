from abc import ABC, abstractmethod


class BaseNormalizer(ABC):
    """Contract for text normalizers applied after recognition."""

    @abstractmethod
    def normalize(self, text: str, language: str | None = None) -> str:
        """Return *text* with recognition errors corrected.

        Args:
            text: Raw text from the recognition engine.
            language: Declared language tag of the source file.

        Returns:
            Corrected text. Words without a correction are left unchanged.

        Raises:
            NormalizationError: if a spelling engine fails.
        """
