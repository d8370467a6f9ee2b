from app.config.language import LanguageSelector
from app.config.settings import Settings
from app.recognition.extractor import TextExtractor
from app.recognition.tesseract_adapter import TesseractRecognizer


class TextExtractorFactory:
    """Creates a text extractor backed by the configured recognizer."""

    @classmethod
    def create(cls, settings: Settings) -> TextExtractor:
        recognizer = TesseractRecognizer(
            tesseract_cmd=settings.tesseract_cmd,
            config=settings.tesseract_config,
        )
        return TextExtractor(recognizer, LanguageSelector.from_settings(settings))
