from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from types import TracebackType

from app.logging.logger import Log
from app.rendering.exceptions import SurfaceClosedError
from app.rendering.models import Viewport


class BaseRenderPage(ABC):
    """A single page context opened on a rendering surface.

    Mirrors a headless browser tab: navigate to a document, wait until the
    surface is idle, then capture the full page.
    """

    def __init__(self, viewport: Viewport) -> None:
        self.viewport = viewport

    @abstractmethod
    async def goto(self, path: Path) -> None:
        """Start loading the document at *path*."""

    @abstractmethod
    async def wait_until_idle(self) -> None:
        """Block until the document has finished loading."""

    @abstractmethod
    async def screenshot(self, path: Path) -> None:
        """Capture the full page as a PNG at *path*."""

    @abstractmethod
    async def close(self) -> None:
        """Release per-page resources."""


class BaseRenderSurface(ABC):
    """Contract for rendering surfaces shared across the pages of one document.

    A surface is launched once, hands out independent page contexts, and is
    closed exactly once. Use it as an async context manager::

        async with surface:
            async with surface.new_page(viewport) as page:
                ...
    """

    def __init__(self) -> None:
        self._launched = False
        self._closed = False

    @property
    def is_open(self) -> bool:
        return self._launched and not self._closed

    @abstractmethod
    async def _launch(self) -> None:
        raise NotImplementedError

    @abstractmethod
    async def _close(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def _create_page(self, viewport: Viewport) -> BaseRenderPage:
        raise NotImplementedError

    async def launch(self) -> None:
        if self._closed:
            raise SurfaceClosedError("Rendering surface cannot be relaunched")
        if self._launched:
            return
        await self._launch()
        self._launched = True
        Log.debug(f"Rendering surface {type(self).__name__} launched")

    async def close(self) -> None:
        if not self._launched or self._closed:
            return
        self._closed = True
        await self._close()
        Log.debug(f"Rendering surface {type(self).__name__} closed")

    @asynccontextmanager
    async def new_page(self, viewport: Viewport) -> AsyncIterator[BaseRenderPage]:
        """Open a fresh page context; it is closed when the block exits."""
        if not self.is_open:
            raise SurfaceClosedError("Rendering surface is not open")
        page = self._create_page(viewport)
        try:
            yield page
        finally:
            await page.close()

    async def __aenter__(self) -> "BaseRenderSurface":
        await self.launch()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()
