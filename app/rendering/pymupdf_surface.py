"""Rendering surface backed by PyMuPDF running in a worker process pool.

The pool plays the role of the browser process: it is started once per
document and every page context submits its load and paint work to it.
PyMuPDF is not thread-safe, so painting happens in separate processes
started with the ``spawn`` method.
"""

import asyncio
import functools
import multiprocessing
from collections.abc import Callable
from concurrent.futures import Executor, ProcessPoolExecutor
from pathlib import Path
from typing import Any

import pymupdf

from app.rendering.base import BaseRenderPage, BaseRenderSurface
from app.rendering.exceptions import RenderError
from app.rendering.models import Viewport


def _probe_document(pdf_path: str) -> tuple[float, float]:
    """Open the document and return the size of its first page."""
    with pymupdf.open(pdf_path) as doc:  # type: ignore[no-untyped-call]
        if doc.page_count < 1:
            raise RenderError(f"Document has no pages: {pdf_path}")
        rect = doc[0].rect
        return rect.width, rect.height


def _paint_page(
    pdf_path: str,
    output_path: str,
    width: int,
    height: int,
    scale_factor: float,
) -> None:
    """Paint the first page so it fills ``width x height`` at ``scale_factor``."""
    with pymupdf.open(pdf_path) as doc:  # type: ignore[no-untyped-call]
        page = doc[0]
        display_list = page.get_displaylist()
        matrix = pymupdf.Matrix(
            width * scale_factor / page.rect.width,
            height * scale_factor / page.rect.height,
        )
        pixmap = display_list.get_pixmap(matrix=matrix, alpha=False)
        pixmap.save(output_path)


class PyMuPdfRenderPage(BaseRenderPage):
    """Page context that loads and paints one single-page PDF."""

    def __init__(self, viewport: Viewport, executor: Executor) -> None:
        super().__init__(viewport)
        self._executor = executor
        self._path: Path | None = None
        self._loading: asyncio.Future[tuple[float, float]] | None = None

    async def goto(self, path: Path) -> None:
        self._path = path
        self._loading = self._submit(_probe_document, str(path))

    async def wait_until_idle(self) -> None:
        if self._loading is None:
            raise RenderError("No document loaded in page")
        await self._loading

    async def screenshot(self, path: Path) -> None:
        await self.wait_until_idle()
        await self._submit(
            _paint_page,
            str(self._path),
            str(path),
            self.viewport.width,
            self.viewport.height,
            self.viewport.scale_factor,
        )

    async def close(self) -> None:
        if self._loading is not None and not self._loading.done():
            self._loading.cancel()
        self._loading = None
        self._path = None

    def _submit(self, fn: Callable[..., Any], *args: object) -> "asyncio.Future[Any]":
        loop = asyncio.get_running_loop()
        return loop.run_in_executor(self._executor, functools.partial(fn, *args))


class PyMuPdfRenderSurface(BaseRenderSurface):
    """Shares one process pool between all page contexts of a document."""

    def __init__(self, max_workers: int = 4) -> None:
        super().__init__()
        self._max_workers = max_workers
        self._executor: ProcessPoolExecutor | None = None

    async def _launch(self) -> None:
        self._executor = ProcessPoolExecutor(
            max_workers=self._max_workers,
            mp_context=multiprocessing.get_context("spawn"),
        )

    async def _close(self) -> None:
        executor, self._executor = self._executor, None
        if executor is not None:
            await asyncio.to_thread(executor.shutdown, wait=True, cancel_futures=True)

    def _create_page(self, viewport: Viewport) -> PyMuPdfRenderPage:
        if self._executor is None:
            raise RenderError("Rendering surface has no worker pool")
        return PyMuPdfRenderPage(viewport, self._executor)
