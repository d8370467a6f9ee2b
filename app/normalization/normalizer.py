"""Two-pass spelling correction of recognized text.

Pass 1 (dictionary): misspelled words are located once on the input text and
replaced with the top suggestion, last span first, so splicing never shifts
the offsets of spans still to be applied.

Pass 2 (digit-aware): every alphanumeric token (with one optional trailing
``.,!?``) that contains a digit, or that the primary engine flags for
primary-language text, is looked up again. Digit tokens of secondary-language
text consult the secondary engine. By default the first textual occurrence of
the token is replaced; ``replacement="positional"`` replaces the flagged
occurrence instead.
"""

import re
from typing import ClassVar, Literal

from app.config.language import LanguageSelector, LanguageVariant
from app.logging.logger import Log
from app.normalization.base import BaseNormalizer
from app.normalization.engine_base import BaseSpellEngine
from app.normalization.exceptions import NormalizationError

ReplacementMode = Literal["first_occurrence", "positional"]


class TextNormalizer(BaseNormalizer):
    """Dictionary correction followed by digit/punctuation-aware correction."""

    _TOKEN_RE: ClassVar[re.Pattern[str]] = re.compile(r"[^\W_]+[.,!?]?")
    _PUNCTUATION: ClassVar[str] = ".,!?"
    _DIGIT_RE: ClassVar[re.Pattern[str]] = re.compile(r"\d")

    def __init__(
        self,
        *,
        primary_engine: BaseSpellEngine,
        secondary_engine: BaseSpellEngine,
        languages: LanguageSelector | None = None,
        replacement: ReplacementMode = "first_occurrence",
    ) -> None:
        if replacement not in ("first_occurrence", "positional"):
            raise ValueError(f"Unknown replacement mode '{replacement}'")
        self._engines = {
            LanguageVariant.PRIMARY: primary_engine,
            LanguageVariant.SECONDARY: secondary_engine,
        }
        self._languages = languages or LanguageSelector()
        self._replacement = replacement

    def normalize(self, text: str, language: str | None = None) -> str:
        variant = self._languages.variant(language)
        Log.debug(f"Starting spell check for text in {language or self._languages.primary}")
        try:
            corrected = self.correct_dictionary(text, variant)
            corrected = self.correct_with_digits(corrected, variant)
        except NormalizationError:
            raise
        except Exception as exc:
            raise NormalizationError(f"Spelling correction failed: {exc}") from exc
        return corrected

    # ------------------------------------------------------------------
    # Pass 1
    # ------------------------------------------------------------------

    def correct_dictionary(self, text: str, variant: LanguageVariant) -> str:
        engine = self._engines[variant]
        spans = engine.misspelled_spans(text)
        if not spans:
            return text

        corrected = text
        for span in sorted(spans, key=lambda s: s.start, reverse=True):
            word = text[span.start:span.end]
            suggestions = engine.suggest(word)
            if suggestions:
                corrected = corrected[:span.start] + suggestions[0] + corrected[span.end:]
        Log.debug(f"Dictionary pass checked {len(spans)} misspelled word(s)")
        return corrected

    # ------------------------------------------------------------------
    # Pass 2
    # ------------------------------------------------------------------

    def correct_with_digits(self, text: str, variant: LanguageVariant) -> str:
        replacements: list[tuple[re.Match[str], str]] = []
        for match in self._TOKEN_RE.finditer(text):
            correction = self._correct_token(match.group(), variant)
            if correction is not None:
                replacements.append((match, correction))

        if self._replacement == "positional":
            return self._replace_positions(text, replacements)
        return self._replace_first_occurrences(text, replacements)

    def _correct_token(self, token: str, variant: LanguageVariant) -> str | None:
        punctuation = token[-1] if token[-1] in self._PUNCTUATION else ""
        word = token[:-1] if punctuation else token

        has_digits = self._DIGIT_RE.search(word) is not None
        primary = self._engines[LanguageVariant.PRIMARY]
        if variant is LanguageVariant.PRIMARY:
            if not (has_digits or primary.is_misspelled(word)):
                return None
            suggestions = primary.suggest(word)
        else:
            if not has_digits:
                return None
            suggestions = self._engines[LanguageVariant.SECONDARY].suggest(word)

        if not suggestions:
            return None
        return suggestions[0] + punctuation

    @staticmethod
    def _replace_first_occurrences(
        text: str,
        replacements: list[tuple[re.Match[str], str]],
    ) -> str:
        corrected = text
        for match, correction in replacements:
            corrected = corrected.replace(match.group(), correction, 1)
        return corrected

    @staticmethod
    def _replace_positions(
        text: str,
        replacements: list[tuple[re.Match[str], str]],
    ) -> str:
        corrected = text
        for match, correction in reversed(replacements):
            corrected = corrected[:match.start()] + correction + corrected[match.end():]
        return corrected
