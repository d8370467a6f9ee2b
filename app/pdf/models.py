from dataclasses import dataclass, field


@dataclass(frozen=True)
class PageUnit:
    """One page of a source PDF, split out as a standalone single-page PDF."""

    index: int  # 1-based, matches source page order
    document_bytes: bytes = field(repr=False)
    width: float
    height: float
