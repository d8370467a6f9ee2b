from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CorrectionSpan:
    """Location of a misspelled word in a text buffer (end is exclusive)."""

    start: int
    end: int
    original_word: str


@dataclass(frozen=True)
class NormalizedResult:
    """Spell-corrected text of one image."""

    source_path: Path
    corrected_text: str
    language: str
