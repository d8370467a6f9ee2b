class RenderError(Exception):
    """Base exception for page rendering errors."""


class RenderFailure(RenderError):
    """Raised when every render round of a page failed."""

    def __init__(self, page_index: int, message: str) -> None:
        super().__init__(message)
        self.page_index = page_index


class SurfaceClosedError(RenderError):
    """Raised when a rendering surface is used outside its launch/close scope."""
