from unittest.mock import patch

import pytest

from app.pdf.factory import PageSplitterFactory
from app.pdf.pymupdf_adapter import PyMuPdfPageSplitter


def _make_settings(pdf_engine: str, page_margin: float = 0.0):  # type: ignore[no-untyped-def]
    """Create a minimal Settings-like object with only the PDF fields."""
    with patch("app.config.settings.Settings") as mock_cls:
        settings = mock_cls.return_value
        settings.pdf_engine = pdf_engine
        settings.page_margin = page_margin
        return settings


class TestPageSplitterFactory:
    def test_creates_pymupdf_splitter(self) -> None:
        splitter = PageSplitterFactory.create(_make_settings("pymupdf"))
        assert isinstance(splitter, PyMuPdfPageSplitter)

    def test_is_case_insensitive(self) -> None:
        splitter = PageSplitterFactory.create(_make_settings("PyMuPDF"))
        assert isinstance(splitter, PyMuPdfPageSplitter)

    def test_passes_margin(self, sample_pdf_bytes: bytes) -> None:
        splitter = PageSplitterFactory.create(_make_settings("pymupdf", page_margin=10))
        [unit] = splitter.split(sample_pdf_bytes)
        assert unit.width == pytest.approx(612 - 10)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            PageSplitterFactory.create(_make_settings("pdflib"))
