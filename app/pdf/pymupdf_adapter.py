import pymupdf

from app.logging.logger import Log
from app.pdf.base import BasePageSplitter
from app.pdf.exceptions import MalformedDocumentError
from app.pdf.models import PageUnit

MIN_PAGE_SIDE = 1.0


class PyMuPdfPageSplitter(BasePageSplitter):
    """Splits a PDF into single-page PDFs using PyMuPDF.

    Pages are copied with ``insert_pdf`` so content streams, fonts and
    annotations survive untouched. ``margin`` (in PDF points) is subtracted
    from the recorded width and height of every page.
    """

    def __init__(self, margin: float = 0.0) -> None:
        if margin < 0:
            raise ValueError(f"margin must be non-negative, got {margin}")
        self._margin = margin

    def split(self, document_bytes: bytes) -> list[PageUnit]:
        source = self._open(document_bytes)
        with source:
            units = [self._extract_page(source, i) for i in range(source.page_count)]
        Log.debug(f"Split document into {len(units)} page(s)")
        return units

    @staticmethod
    def _open(document_bytes: bytes) -> pymupdf.Document:
        if not document_bytes:
            raise MalformedDocumentError("Document is empty")
        try:
            document = pymupdf.open(stream=document_bytes, filetype="pdf")  # type: ignore[no-untyped-call]
        except Exception as exc:
            raise MalformedDocumentError(f"Cannot parse PDF: {exc}") from exc
        if document.page_count == 0:
            document.close()
            raise MalformedDocumentError("Document has no pages")
        return document

    def _extract_page(self, source: pymupdf.Document, i: int) -> PageUnit:
        rect = source[i].rect
        with pymupdf.open() as single:  # type: ignore[no-untyped-call]
            single.insert_pdf(source, from_page=i, to_page=i)
            data = single.tobytes()
        return PageUnit(
            index=i + 1,
            document_bytes=data,
            width=max(rect.width - self._margin, MIN_PAGE_SIDE),
            height=max(rect.height - self._margin, MIN_PAGE_SIDE),
        )
