from abc import ABC, abstractmethod

from app.normalization.models import CorrectionSpan


class BaseSpellEngine(ABC):
    """Contract for dictionary-backed spelling engines."""

    @abstractmethod
    def misspelled_spans(self, text: str) -> list[CorrectionSpan]:
        """Return the misspelled words of *text*, ordered by start offset."""

    @abstractmethod
    def is_misspelled(self, word: str) -> bool:
        """Return True if *word* is not in the dictionary."""

    @abstractmethod
    def suggest(self, word: str) -> list[str]:
        """Return corrections for *word*, best first; empty if none."""
