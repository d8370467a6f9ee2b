from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Viewport:
    """Rendering viewport in CSS pixels with a device scale factor."""

    width: int
    height: int
    scale_factor: float = 1.0


@dataclass(frozen=True)
class RenderCandidate:
    """One captured bitmap produced by a render round."""

    path: Path
    byte_size: int


@dataclass(frozen=True)
class PageImage:
    """Selected bitmap for a single page of a document."""

    document_id: str
    page_index: int
    path: Path


@dataclass(frozen=True)
class PageRenderFailure:
    """Page whose render rounds all failed."""

    document_id: str
    page_index: int
    reason: str


@dataclass
class DocumentRenderReport:
    """Per-page outcome of rendering one document, ordered by page index."""

    document_id: str
    output_dir: Path
    images: list[PageImage] = field(default_factory=list)
    failures: list[PageRenderFailure] = field(default_factory=list)

    @property
    def image_paths(self) -> list[Path]:
        return [image.path for image in self.images]

    @property
    def failed_pages(self) -> list[int]:
        return [failure.page_index for failure in self.failures]
