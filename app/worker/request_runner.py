from collections.abc import Mapping

from app.config.settings import Settings
from app.logging.logger import Log
from app.processor.exceptions import UploadValidationError
from app.processor.file_loader import FileLoader
from app.processor.models import IncomingFile
from app.processor.processor import Processor
from app.processor.response_builder import ResponseBuilder

HTTP_OK = 200
HTTP_BAD_REQUEST = 400


class RequestRunner:
    """Run one upload request, catch exceptions, and build the response."""

    def __init__(
        self,
        processor: Processor,
        file_loader: FileLoader,
        settings: Settings,
        response_builder: ResponseBuilder | None = None,
    ) -> None:
        self._processor = processor
        self._file_loader = file_loader
        self._settings = settings
        self._responses = response_builder or ResponseBuilder()

    async def run(
        self,
        files: list[IncomingFile],
        form: Mapping[str, str] | None = None,
    ) -> tuple[int, dict[str, object]]:
        """Return ``(status_code, body)`` for the request."""
        Log.info("Starting file upload process")
        try:
            uploaded = self._file_loader.accept(files, form)
        except UploadValidationError as exc:
            Log.error(f"Upload rejected: {exc}")
            return HTTP_BAD_REQUEST, self._responses.error(str(exc))
        except OSError as exc:
            Log.exception(f"Storing uploaded files failed: {exc}")
            return (
                self._settings.processing_error_status,
                self._responses.error("File upload failed!", str(exc)),
            )

        try:
            result = await self._processor.process(uploaded)
        except Exception as exc:
            Log.exception(f"Error during file processing: {exc}")
            return (
                self._settings.processing_error_status,
                self._responses.error("File upload failed!", str(exc)),
            )
        return HTTP_OK, self._responses.success(result)
