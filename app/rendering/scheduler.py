import asyncio
from collections.abc import Callable
from pathlib import Path

from app.logging.logger import Log
from app.pdf.base import BasePageSplitter
from app.pdf.models import PageUnit
from app.rendering.base import BaseRenderSurface
from app.rendering.exceptions import RenderFailure
from app.rendering.models import DocumentRenderReport, PageImage, PageRenderFailure
from app.rendering.renderer import PageRenderer


def images_dir_for(document_path: Path) -> Path:
    """Build the output directory for a document: ``<dir>/<stem>_images``."""
    return document_path.with_name(f"{document_path.stem}_images")


def discard_images(image_paths: list[Path], output_dir: Path) -> None:
    """Delete rendered images, then the output directory once it is empty."""
    for path in image_paths:
        path.unlink(missing_ok=True)
    if output_dir.is_dir() and not any(output_dir.iterdir()):
        output_dir.rmdir()


class RenderScheduler:
    """Renders every page of a document with at most ``concurrency`` in flight.

    One rendering surface is launched per document and shared by all page
    renders; it is closed once every page has either produced an image or
    failed. Results come back in page order regardless of completion order.
    """

    def __init__(
        self,
        splitter: BasePageSplitter,
        renderer: PageRenderer,
        surface_factory: Callable[[], BaseRenderSurface],
        *,
        concurrency: int = 7,
        fail_fast: bool = False,
    ) -> None:
        if concurrency < 1:
            raise ValueError(f"concurrency must be >= 1, got {concurrency}")
        self._splitter = splitter
        self._renderer = renderer
        self._surface_factory = surface_factory
        self._concurrency = concurrency
        self._fail_fast = fail_fast

    async def render_all(
        self,
        document_path: Path,
        document_id: str | None = None,
    ) -> DocumentRenderReport:
        """Split and render *document_path*.

        Raises:
            MalformedDocumentError: if the document cannot be parsed; no
                files are created in that case.
            RenderFailure: only with ``fail_fast``, after all pages settled.
        """
        document_id = document_id or document_path.stem
        document_bytes = await asyncio.to_thread(document_path.read_bytes)
        pages = self._splitter.split(document_bytes)
        Log.info(f"Document {document_id} has {len(pages)} page(s)")

        output_dir = images_dir_for(document_path)
        report = DocumentRenderReport(document_id=document_id, output_dir=output_dir)
        if not pages:
            return report
        if not output_dir.exists():
            Log.debug(f"Creating image output directory {output_dir}")
            output_dir.mkdir(parents=True, exist_ok=True)

        slots = asyncio.Semaphore(self._concurrency)
        async with self._surface_factory() as surface:
            outcomes = await asyncio.gather(
                *(
                    self._render_page(slots, surface, page, output_dir, document_id)
                    for page in pages
                ),
                return_exceptions=True,
            )

        for page, outcome in zip(pages, outcomes):
            if isinstance(outcome, PageImage):
                report.images.append(outcome)
            elif isinstance(outcome, Exception):
                Log.error(f"Page {page.index} of {document_id} failed to render: {outcome}")
                report.failures.append(
                    PageRenderFailure(
                        document_id=document_id,
                        page_index=page.index,
                        reason=str(outcome),
                    )
                )
            else:
                raise outcome

        report.images.sort(key=lambda image: image.page_index)
        Log.info(
            f"Rendered {len(report.images)}/{len(pages)} page(s) of {document_id}",
            failed_pages=report.failed_pages,
        )

        if self._fail_fast and report.failures:
            discard_images(report.image_paths, output_dir)
            first = report.failures[0]
            raise RenderFailure(first.page_index, first.reason)
        return report

    async def _render_page(
        self,
        slots: asyncio.Semaphore,
        surface: BaseRenderSurface,
        page: PageUnit,
        output_dir: Path,
        document_id: str,
    ) -> PageImage:
        async with slots:
            return await self._renderer.render(page, surface, output_dir, document_id)
