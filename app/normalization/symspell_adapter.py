import re
from collections.abc import Iterable
from importlib import resources
from pathlib import Path
from typing import ClassVar

from symspellpy import SymSpell, Verbosity

from app.normalization.engine_base import BaseSpellEngine
from app.normalization.exceptions import DictionaryLoadError
from app.normalization.models import CorrectionSpan


class SymSpellEngine(BaseSpellEngine):
    """Spell engine over a SymSpell frequency dictionary."""

    BUNDLED_ENGLISH_DICTIONARY: ClassVar[str] = "frequency_dictionary_en_82_765.txt"

    # Letters only, with inner apostrophes ("don't"); digits are left to the
    # digit-aware pass.
    _WORD_RE: ClassVar[re.Pattern[str]] = re.compile(r"[^\W\d_]+(?:'[^\W\d_]+)*")

    def __init__(self, sym_spell: SymSpell, *, max_edit_distance: int = 2) -> None:
        self._sym_spell = sym_spell
        self._max_edit_distance = max_edit_distance

    @classmethod
    def from_dictionary(
        cls,
        path: str | Path,
        *,
        max_edit_distance: int = 2,
        separator: str = " ",
    ) -> "SymSpellEngine":
        """Load a ``term count`` frequency dictionary file."""
        sym_spell = SymSpell(max_dictionary_edit_distance=max_edit_distance)
        loaded = sym_spell.load_dictionary(
            str(path), term_index=0, count_index=1, separator=separator, encoding="utf-8"
        )
        if not loaded:
            raise DictionaryLoadError(f"Cannot load spelling dictionary: {path}")
        return cls(sym_spell, max_edit_distance=max_edit_distance)

    @classmethod
    def bundled_english(cls, *, max_edit_distance: int = 2) -> "SymSpellEngine":
        """Load the English frequency dictionary shipped with symspellpy."""
        path = resources.files("symspellpy") / cls.BUNDLED_ENGLISH_DICTIONARY
        return cls.from_dictionary(str(path), max_edit_distance=max_edit_distance)

    @classmethod
    def from_words(
        cls,
        words: Iterable[str],
        *,
        max_edit_distance: int = 2,
    ) -> "SymSpellEngine":
        """Build an in-memory dictionary; repeated words weigh more."""
        sym_spell = SymSpell(max_dictionary_edit_distance=max_edit_distance)
        for word in words:
            sym_spell.create_dictionary_entry(word.lower(), 1)
        return cls(sym_spell, max_edit_distance=max_edit_distance)

    def misspelled_spans(self, text: str) -> list[CorrectionSpan]:
        return [
            CorrectionSpan(start=match.start(), end=match.end(), original_word=match.group())
            for match in self._WORD_RE.finditer(text)
            if self.is_misspelled(match.group())
        ]

    def is_misspelled(self, word: str) -> bool:
        return bool(word) and word.lower() not in self._sym_spell.words

    def suggest(self, word: str) -> list[str]:
        # Numbers are never corrected, and a word may not be rewritten
        # entirely: "10" or the "t" of "don't" stay as they are.
        if not word or word.isdigit():
            return []
        distance = min(self._max_edit_distance, len(word) - 1)
        suggestions = self._sym_spell.lookup(
            word,
            Verbosity.TOP,
            max_edit_distance=distance,
            transfer_casing=True,
        )
        return [suggestion.term for suggestion in suggestions]
