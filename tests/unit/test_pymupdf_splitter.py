import pymupdf
import pytest

from app.pdf.exceptions import MalformedDocumentError
from app.pdf.pymupdf_adapter import PyMuPdfPageSplitter
from tests.fakes import THREE_PAGE_SIZES


class TestSplit:
    def test_returns_one_unit_per_page(self, three_page_pdf_bytes: bytes) -> None:
        units = PyMuPdfPageSplitter().split(three_page_pdf_bytes)
        assert [unit.index for unit in units] == [1, 2, 3]

    def test_records_page_geometry(self, three_page_pdf_bytes: bytes) -> None:
        units = PyMuPdfPageSplitter().split(three_page_pdf_bytes)
        for unit, (width, height) in zip(units, THREE_PAGE_SIZES):
            assert unit.width == pytest.approx(width, abs=0.01)
            assert unit.height == pytest.approx(height, abs=0.01)

    def test_each_unit_is_a_single_page_pdf_with_its_content(
        self, three_page_pdf_bytes: bytes
    ) -> None:
        units = PyMuPdfPageSplitter().split(three_page_pdf_bytes)
        for unit in units:
            with pymupdf.open(stream=unit.document_bytes, filetype="pdf") as doc:
                assert doc.page_count == 1
                assert f"Page {unit.index} content" in doc[0].get_text()

    def test_single_page_document(self, sample_pdf_bytes: bytes) -> None:
        units = PyMuPdfPageSplitter().split(sample_pdf_bytes)
        assert len(units) == 1
        assert units[0].index == 1


class TestMarginPolicy:
    def test_margin_is_subtracted(self, sample_pdf_bytes: bytes) -> None:
        [unit] = PyMuPdfPageSplitter(margin=5).split(sample_pdf_bytes)
        assert unit.width == pytest.approx(612 - 5)
        assert unit.height == pytest.approx(792 - 5)

    def test_margin_never_collapses_page(self, sample_pdf_bytes: bytes) -> None:
        [unit] = PyMuPdfPageSplitter(margin=10_000).split(sample_pdf_bytes)
        assert unit.width == 1.0
        assert unit.height == 1.0

    def test_negative_margin_rejected(self) -> None:
        with pytest.raises(ValueError, match="margin"):
            PyMuPdfPageSplitter(margin=-1)


class TestMalformedDocument:
    def test_raises_on_invalid_bytes(self) -> None:
        with pytest.raises(MalformedDocumentError):
            PyMuPdfPageSplitter().split(b"not a pdf")

    def test_raises_on_empty_bytes(self) -> None:
        with pytest.raises(MalformedDocumentError, match="empty"):
            PyMuPdfPageSplitter().split(b"")
