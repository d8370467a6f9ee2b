from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from app.normalization.models import NormalizedResult

if TYPE_CHECKING:
    from app.processor.pipeline import PipelineContext

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


@dataclass(frozen=True)
class IncomingFile:
    """A file as handed over by the multipart parser, before validation."""

    original_name: str
    mime_type: str
    path: Path
    size_bytes: int


@dataclass(frozen=True)
class UploadedFile:
    """A validated upload stored under a server-assigned path."""

    original_name: str
    sanitized_name: str
    stored_path: Path
    mime_type: str
    declared_language: str

    @property
    def is_pdf(self) -> bool:
        return self.mime_type == PDF_MIME_TYPE

    @property
    def is_image(self) -> bool:
        return self.mime_type.startswith("image/")


@dataclass
class IngestionResult:
    """Consolidated outcome of one upload request, one context per file."""

    files: list["PipelineContext"] = field(default_factory=list)

    @property
    def normalized(self) -> list[NormalizedResult]:
        return [result for context in self.files for result in context.normalized]
