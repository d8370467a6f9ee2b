from app.processor.models import IngestionResult
from app.processor.pipeline import PipelineContext


class ResponseBuilder:
    """Converts an ingestion result into the JSON response body."""

    def success(self, result: IngestionResult) -> dict[str, object]:
        return {
            "status": "success",
            "message": f"{len(result.files)} file(s) uploaded successfully!",
            "files": [self._file_to_dict(context) for context in result.files],
        }

    def error(self, message: str, error: str | None = None) -> dict[str, object]:
        body: dict[str, object] = {"status": "error", "message": message}
        if error is not None:
            body["error"] = error
        return body

    def _file_to_dict(self, context: PipelineContext) -> dict[str, object]:
        file = context.file
        entry: dict[str, object] = {
            "fileName": file.sanitized_name,
            "filePath": file.stored_path.as_posix(),
        }
        if file.is_pdf:
            entry["images"] = [path.as_posix() for path in context.images]
            if context.failed_pages:
                entry["failedPages"] = list(context.failed_pages)
        entry["language"] = file.declared_language
        return entry
