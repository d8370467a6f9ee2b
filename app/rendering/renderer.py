import asyncio
import math
from pathlib import Path

from app.logging.logger import Log
from app.pdf.models import PageUnit
from app.rendering.base import BaseRenderSurface
from app.rendering.exceptions import RenderFailure
from app.rendering.models import PageImage, RenderCandidate, Viewport


def page_document_path(output_dir: Path, page_index: int) -> Path:
    return output_dir / f"page-{page_index}.pdf"


def page_image_path(output_dir: Path, page_index: int) -> Path:
    return output_dir / f"page-{page_index}.png"


def round_image_path(output_dir: Path, page_index: int, round_number: int) -> Path:
    return output_dir / f"page-{page_index}-round-{round_number}.png"


def select_best(candidates: list[RenderCandidate]) -> RenderCandidate:
    """Return the largest candidate; the first one wins on equal sizes."""
    if not candidates:
        raise ValueError("select_best requires at least one candidate")
    best = candidates[0]
    for candidate in candidates[1:]:
        if candidate.byte_size > best.byte_size:
            best = candidate
    return best


class PageRenderer:
    """Renders one page unit to a PNG through a rendering surface.

    Each round opens a fresh page context sized to the page geometry, waits
    for the document to load, lets paint settle, and captures the page. With
    more than one round the largest capture is kept and the rest deleted.
    """

    def __init__(
        self,
        *,
        sample_count: int = 1,
        scale_factor: float = 2.0,
        settle_delay_ms: int = 300,
        timeout_seconds: float = 30.0,
        keep_page_documents: bool = False,
    ) -> None:
        if sample_count < 1:
            raise ValueError(f"sample_count must be >= 1, got {sample_count}")
        self._sample_count = sample_count
        self._scale_factor = scale_factor
        self._settle_delay = settle_delay_ms / 1000
        self._timeout = timeout_seconds
        self._keep_page_documents = keep_page_documents

    async def render(
        self,
        page_unit: PageUnit,
        surface: BaseRenderSurface,
        output_dir: Path,
        document_id: str,
        sample_count: int | None = None,
    ) -> PageImage:
        """Render *page_unit* and return the selected image.

        Raises:
            RenderFailure: if every round failed.
        """
        rounds = sample_count if sample_count is not None else self._sample_count
        if rounds < 1:
            raise ValueError(f"sample_count must be >= 1, got {rounds}")

        index = page_unit.index
        document_path = page_document_path(output_dir, index)
        await asyncio.to_thread(document_path.write_bytes, page_unit.document_bytes)

        candidates: list[RenderCandidate] = []
        selected = False
        try:
            for round_number in range(1, rounds + 1):
                output_path = (
                    page_image_path(output_dir, index)
                    if rounds == 1
                    else round_image_path(output_dir, index, round_number)
                )
                candidate = await self._render_round(
                    page_unit, surface, document_path, output_path, round_number
                )
                if candidate is not None:
                    candidates.append(candidate)

            if not candidates:
                raise RenderFailure(
                    index, f"All {rounds} render round(s) failed for page {index}"
                )
            path = self._keep_best(candidates, page_image_path(output_dir, index))
            selected = True
        finally:
            if not self._keep_page_documents:
                document_path.unlink(missing_ok=True)
            if not selected:
                for candidate in candidates:
                    candidate.path.unlink(missing_ok=True)

        Log.info(f"Rendered page {index} of {document_id} to {path}")
        return PageImage(document_id=document_id, page_index=index, path=path)

    def viewport_for(self, page_unit: PageUnit) -> Viewport:
        return Viewport(
            width=math.ceil(page_unit.width),
            height=math.ceil(page_unit.height),
            scale_factor=self._scale_factor,
        )

    async def _render_round(
        self,
        page_unit: PageUnit,
        surface: BaseRenderSurface,
        document_path: Path,
        output_path: Path,
        round_number: int,
    ) -> RenderCandidate | None:
        viewport = self.viewport_for(page_unit)
        try:
            await asyncio.wait_for(
                self._capture(surface, viewport, document_path, output_path),
                timeout=self._timeout,
            )
            byte_size = output_path.stat().st_size
        except asyncio.TimeoutError:
            Log.warning(
                f"Render round {round_number} of page {page_unit.index} timed out "
                f"after {self._timeout}s"
            )
            output_path.unlink(missing_ok=True)
            return None
        except Exception as exc:
            Log.warning(
                f"Render round {round_number} of page {page_unit.index} failed: {exc}"
            )
            output_path.unlink(missing_ok=True)
            return None
        return RenderCandidate(path=output_path, byte_size=byte_size)

    async def _capture(
        self,
        surface: BaseRenderSurface,
        viewport: Viewport,
        document_path: Path,
        output_path: Path,
    ) -> None:
        async with surface.new_page(viewport) as page:
            await page.goto(document_path.resolve())
            await page.wait_until_idle()
            await asyncio.sleep(self._settle_delay)
            await page.screenshot(output_path)

    @staticmethod
    def _keep_best(candidates: list[RenderCandidate], final_path: Path) -> Path:
        best = select_best(candidates)
        for candidate in candidates:
            if candidate is not best:
                candidate.path.unlink(missing_ok=True)
        if best.path != final_path:
            best.path.replace(final_path)
        return final_path
