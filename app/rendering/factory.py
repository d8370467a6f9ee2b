from collections.abc import Callable

from app.config.settings import Settings
from app.rendering.base import BaseRenderSurface
from app.rendering.pymupdf_surface import PyMuPdfRenderSurface


class RenderSurfaceFactory:
    """Builds a factory of rendering surfaces, one surface per document."""

    ADAPTERS: dict[str, type[PyMuPdfRenderSurface]] = {
        "pymupdf": PyMuPdfRenderSurface,
    }

    @classmethod
    def create(cls, settings: Settings) -> Callable[[], BaseRenderSurface]:
        engine = settings.render_engine.lower()
        surface_cls = cls.ADAPTERS.get(engine)
        if surface_cls is None:
            raise ValueError(
                f"Unknown render engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        workers = settings.render_workers
        return lambda: surface_cls(max_workers=workers)
