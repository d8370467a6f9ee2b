import asyncio
from pathlib import Path

from app.config.language import LanguageSelector
from app.logging.logger import Log
from app.recognition.base import BaseRecognizer
from app.recognition.exceptions import RecognitionFailure
from app.recognition.models import ExtractedText


class TextExtractor:
    """Runs the recognition engine on one image per call, without retries."""

    def __init__(self, recognizer: BaseRecognizer, languages: LanguageSelector) -> None:
        self._recognizer = recognizer
        self._languages = languages

    async def extract(self, path: Path, language: str | None = None) -> ExtractedText:
        """Recognize the text of *path* in the declared *language*.

        Raises:
            RecognitionFailure: if the engine fails.
        """
        declared = language or self._languages.primary
        code = self._languages.code(declared)
        Log.info(f"Starting OCR for image {path} in language {code}")
        try:
            raw_text = await asyncio.to_thread(self._recognizer.recognize, path, code)
        except RecognitionFailure:
            raise
        except Exception as exc:
            raise RecognitionFailure(f"Recognition failed for {path}: {exc}") from exc
        Log.debug(f"Recognized {len(raw_text)} chars from {path}")
        return ExtractedText(source_path=path, raw_text=raw_text, language=declared)
