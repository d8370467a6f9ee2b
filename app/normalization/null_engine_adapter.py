"""Spell engine used when no dictionary is configured for a language.

Also serves as a template for new engine adapters: implement
BaseSpellEngine and register the adapter in SpellEngineFactory.
"""

from app.normalization.engine_base import BaseSpellEngine
from app.normalization.models import CorrectionSpan


class NullSpellEngine(BaseSpellEngine):
    """Accepts every word and never suggests a correction."""

    def misspelled_spans(self, text: str) -> list[CorrectionSpan]:
        _ = text
        return []

    def is_misspelled(self, word: str) -> bool:
        _ = word
        return False

    def suggest(self, word: str) -> list[str]:
        _ = word
        return []
