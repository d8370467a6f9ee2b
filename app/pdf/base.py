from abc import ABC, abstractmethod

from app.pdf.models import PageUnit


class BasePageSplitter(ABC):
    """Contract for all PDF page-splitting adapters."""

    @abstractmethod
    def split(self, document_bytes: bytes) -> list[PageUnit]:
        """Split a PDF into single-page PDF buffers.

        Args:
            document_bytes: Raw PDF file content.

        Returns:
            One PageUnit per source page, in source order, indexed from 1.

        Raises:
            MalformedDocumentError: if the bytes cannot be parsed as a PDF.
        """
