from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ExtractedText:
    """Raw recognized text of one image, tagged with its declared language."""

    source_path: Path
    raw_text: str
    language: str
