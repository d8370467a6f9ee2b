from app.config.settings import Settings
from app.pdf.base import BasePageSplitter
from app.pdf.pymupdf_adapter import PyMuPdfPageSplitter


class PageSplitterFactory:
    """Creates the correct page splitter based on settings."""

    ADAPTERS: dict[str, type[PyMuPdfPageSplitter]] = {
        "pymupdf": PyMuPdfPageSplitter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePageSplitter:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls(margin=settings.page_margin)
