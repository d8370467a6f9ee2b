from pathlib import Path

import pytesseract
from PIL import Image

from app.recognition.base import BaseRecognizer
from app.recognition.exceptions import RecognitionFailure


class TesseractRecognizer(BaseRecognizer):
    """Recognizes text with the Tesseract engine through pytesseract."""

    def __init__(self, *, tesseract_cmd: str = "", config: str = "") -> None:
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd
        self._config = config

    def recognize(self, image_path: Path, language: str) -> str:
        try:
            with Image.open(image_path) as image:
                rgb = image.convert("RGB")
            return pytesseract.image_to_string(rgb, lang=language, config=self._config)
        except RecognitionFailure:
            raise
        except Exception as exc:
            raise RecognitionFailure(
                f"tesseract recognition failed for {image_path}: {exc}"
            ) from exc
