"""In-memory stand-ins for the rendering surface and spelling engines."""

import asyncio
from collections import defaultdict
from pathlib import Path

from reportlab.lib.pagesizes import A4, letter

from app.normalization.engine_base import BaseSpellEngine
from app.normalization.models import CorrectionSpan
from app.rendering.base import BaseRenderPage, BaseRenderSurface
from app.rendering.models import Viewport

# Page sizes of the three-page PDF fixture, in PDF points.
THREE_PAGE_SIZES = [letter, A4, (300.5, 400.2)]


def page_index_of(path: Path) -> int:
    """``.../page-3.pdf`` -> 3"""
    return int(path.stem.split("-")[1])


class FakeRenderPage(BaseRenderPage):
    def __init__(self, viewport: Viewport, surface: "FakeRenderSurface") -> None:
        super().__init__(viewport)
        self._surface = surface
        self._path: Path | None = None
        self.closed = False

    async def goto(self, path: Path) -> None:
        self._path = path

    async def wait_until_idle(self) -> None:
        await asyncio.sleep(0)

    async def screenshot(self, path: Path) -> None:
        assert self._path is not None
        index = page_index_of(self._path)
        round_number = self._surface.rounds[index]
        self._surface.rounds[index] += 1
        payloads = self._surface.payloads.get(index)
        payload: bytes | BaseException = (
            payloads[round_number] if payloads else f"png-{index}".encode()
        )

        self._surface.active += 1
        self._surface.max_active = max(self._surface.max_active, self._surface.active)
        try:
            await asyncio.sleep(self._surface.delays.get(index, 0))
            if isinstance(payload, BaseException):
                raise payload
            path.write_bytes(payload)
        finally:
            self._surface.active -= 1

    async def close(self) -> None:
        self.closed = True
        self._surface.closed_pages += 1


class FakeRenderSurface(BaseRenderSurface):
    """Writes configured payloads instead of painting.

    ``payloads`` maps a page index to one entry per round: bytes are written
    as the capture, exceptions are raised from ``screenshot``.
    """

    def __init__(
        self,
        payloads: dict[int, list[bytes | BaseException]] | None = None,
        delays: dict[int, float] | None = None,
    ) -> None:
        super().__init__()
        self.payloads = payloads or {}
        self.delays = delays or {}
        self.rounds: dict[int, int] = defaultdict(int)
        self.viewports: list[Viewport] = []
        self.launch_count = 0
        self.close_count = 0
        self.opened_pages = 0
        self.closed_pages = 0
        self.active = 0
        self.max_active = 0

    async def _launch(self) -> None:
        self.launch_count += 1

    async def _close(self) -> None:
        self.close_count += 1

    def _create_page(self, viewport: Viewport) -> FakeRenderPage:
        self.viewports.append(viewport)
        self.opened_pages += 1
        return FakeRenderPage(viewport, self)


class FakeSpellEngine(BaseSpellEngine):
    """Dictionary of known words plus a fixed suggestion table."""

    def __init__(
        self,
        known: set[str] | None = None,
        suggestions: dict[str, list[str]] | None = None,
        spans: list[CorrectionSpan] | None = None,
    ) -> None:
        self.known = known or set()
        self.suggestions = suggestions or {}
        self.spans = spans
        self.suggest_calls: list[str] = []

    def misspelled_spans(self, text: str) -> list[CorrectionSpan]:
        if self.spans is not None:
            return list(self.spans)
        spans = []
        offset = 0
        for word in text.split(" "):
            if word and word.isalpha() and self.is_misspelled(word):
                spans.append(CorrectionSpan(offset, offset + len(word), word))
            offset += len(word) + 1
        return spans

    def is_misspelled(self, word: str) -> bool:
        return word.lower() not in self.known

    def suggest(self, word: str) -> list[str]:
        self.suggest_calls.append(word)
        return list(self.suggestions.get(word, []))
