import re
import shutil
from collections.abc import Mapping
from pathlib import Path
from typing import ClassVar

from app.config.settings import Settings
from app.logging.logger import Log
from app.processor.exceptions import UnsupportedFileTypeError, UploadValidationError
from app.processor.models import DOCX_MIME_TYPE, IncomingFile, UploadedFile

_WHITESPACE_RE = re.compile(r"\s+")


def sanitize_file_name(name: str, filler: str = "-") -> str:
    """Replace every run of whitespace in *name* with *filler*."""
    return _WHITESPACE_RE.sub(filler, name)


def declared_language(form: Mapping[str, str], index: int, default: str) -> str:
    """Read the ``language_<index>`` form field, falling back to *default*."""
    return form.get(f"language_{index}") or default


class UploadValidator:
    """Checks upload requests against file type, size and count limits."""

    ALLOWED_EXTENSIONS: ClassVar[frozenset[str]] = frozenset(
        {".jpeg", ".jpg", ".png", ".gif", ".pdf", ".docx"}
    )
    ALLOWED_MIME_TYPES: ClassVar[frozenset[str]] = frozenset(
        {
            "image/jpeg",
            "image/jpg",
            "image/png",
            "image/gif",
            "application/pdf",
            DOCX_MIME_TYPE,
        }
    )

    def __init__(self, *, max_files: int, max_bytes: int) -> None:
        self._max_files = max_files
        self._max_bytes = max_bytes

    def validate(self, files: list[IncomingFile]) -> None:
        """Raises:
            UploadValidationError: on too many or too large files.
            UnsupportedFileTypeError: if extension or MIME type is not allowed.
        """
        if not files:
            raise UploadValidationError("No files uploaded")
        if len(files) > self._max_files:
            raise UploadValidationError(
                f"Too many files: {len(files)} (limit {self._max_files})"
            )
        for incoming in files:
            self._validate_file(incoming)

    def _validate_file(self, incoming: IncomingFile) -> None:
        extension = Path(incoming.original_name).suffix.lower()
        if (
            incoming.mime_type not in self.ALLOWED_MIME_TYPES
            or extension not in self.ALLOWED_EXTENSIONS
        ):
            Log.info(f"File {incoming.original_name} failed mimetype or extension check")
            raise UnsupportedFileTypeError(
                "Only images, PDFs, and docx files are allowed!"
            )
        if incoming.size_bytes > self._max_bytes:
            raise UploadValidationError(
                f"File too large: {incoming.original_name} "
                f"({incoming.size_bytes} bytes, limit {self._max_bytes})"
            )


class FileLoader:
    """Validates incoming files and stores them under the upload directory."""

    def __init__(
        self,
        validator: UploadValidator,
        upload_dir: Path,
        default_language: str,
    ) -> None:
        self._validator = validator
        self._upload_dir = upload_dir
        self._default_language = default_language

    def accept(
        self,
        files: list[IncomingFile],
        form: Mapping[str, str] | None = None,
    ) -> list[UploadedFile]:
        """Validate and store the request's files, in request order."""
        self._validator.validate(files)
        form = form or {}
        return [
            self._store(incoming, declared_language(form, index, self._default_language))
            for index, incoming in enumerate(files)
        ]

    def _store(self, incoming: IncomingFile, language: str) -> UploadedFile:
        sanitized = sanitize_file_name(incoming.original_name)
        if not self._upload_dir.exists():
            Log.info(f"Creating upload directory {self._upload_dir}")
            self._upload_dir.mkdir(parents=True, exist_ok=True)
        stored_path = self._upload_dir / sanitized
        if incoming.path.resolve() != stored_path.resolve():
            shutil.copyfile(incoming.path, stored_path)
        Log.info(f"File {incoming.original_name} stored as {stored_path}, language {language}")
        return UploadedFile(
            original_name=incoming.original_name,
            sanitized_name=sanitized,
            stored_path=stored_path,
            mime_type=incoming.mime_type,
            declared_language=language,
        )


def build_file_loader(settings: Settings) -> FileLoader:
    validator = UploadValidator(
        max_files=settings.max_upload_files,
        max_bytes=settings.max_upload_bytes,
    )
    return FileLoader(validator, Path(settings.upload_dir), settings.default_language)
