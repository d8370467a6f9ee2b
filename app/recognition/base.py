from abc import ABC, abstractmethod
from pathlib import Path


class BaseRecognizer(ABC):
    """Contract for text recognition engines."""

    @abstractmethod
    def recognize(self, image_path: Path, language: str) -> str:
        """Return the text found in the image.

        Args:
            image_path: Path to a bitmap image on disk.
            language: Engine language code, e.g. ``"eng"`` or ``"deu"``.

        Raises:
            RecognitionFailure: on any engine error.
        """
