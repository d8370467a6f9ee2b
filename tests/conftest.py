import io
import logging
from collections.abc import Iterator

import pytest
from PIL import Image
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from tests.fakes import THREE_PAGE_SIZES


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def three_page_pdf_bytes() -> bytes:
    """Generate a three-page PDF, each page with its own size and text."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf)
    for number, size in enumerate(THREE_PAGE_SIZES, start=1):
        c.setPageSize(size)
        c.drawString(36, size[1] - 72, f"Page {number} content")
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_png_bytes() -> bytes:
    """Generate a small white PNG image."""
    buf = io.BytesIO()
    Image.new("RGB", (64, 32), "white").save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture(autouse=True)
def _reset_log_handlers() -> Iterator[None]:
    """Drop handlers bound to a test's captured stream once it finishes."""
    yield
    logger = logging.getLogger("scan_ingest")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
