from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from app.normalization.models import NormalizedResult
from app.processor.models import UploadedFile
from app.recognition.models import ExtractedText
from app.rendering.models import DocumentRenderReport


@dataclass(slots=True)
class PipelineContext:
    """Accumulates data as one uploaded file moves through the steps."""

    file: UploadedFile
    render_report: DocumentRenderReport | None = None
    images: list[Path] = field(default_factory=list)
    failed_pages: list[int] = field(default_factory=list)
    extracted: list[ExtractedText] = field(default_factory=list)
    normalized: list[NormalizedResult] = field(default_factory=list)


class PipelineStep(ABC):
    @abstractmethod
    async def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
