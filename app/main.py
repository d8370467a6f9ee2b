import argparse
import asyncio
import json
import mimetypes
import sys
from pathlib import Path

from app.config.settings import Settings
from app.logging.logger import Log
from app.processor.file_loader import build_file_loader
from app.processor.models import IncomingFile
from app.processor.processor import build_processor
from app.worker.request_runner import HTTP_OK, RequestRunner


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rasterize, OCR and spell-correct uploaded documents."
    )
    parser.add_argument("files", nargs="+", type=Path, help="Images, PDFs or docx files.")
    parser.add_argument(
        "--language",
        action="append",
        default=[],
        help="Declared language per file, in file order (repeatable).",
    )
    return parser


def incoming_files(paths: list[Path]) -> list[IncomingFile]:
    files = []
    for path in paths:
        mime_type, _ = mimetypes.guess_type(path.name)
        files.append(
            IncomingFile(
                original_name=path.name,
                mime_type=mime_type or "application/octet-stream",
                path=path,
                size_bytes=path.stat().st_size,
            )
        )
    return files


def main(argv: list[str] | None = None) -> int:
    """Entry point: parse args -> build dependencies -> run one request."""
    args = build_arg_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    missing = [str(path) for path in args.files if not path.is_file()]
    if missing:
        Log.error(f"Input file(s) not found: {', '.join(missing)}")
        return 2

    form = {f"language_{index}": tag for index, tag in enumerate(args.language)}
    runner = RequestRunner(build_processor(settings), build_file_loader(settings), settings)
    status, body = asyncio.run(runner.run(incoming_files(args.files), form))
    json.dump(body, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0 if status == HTTP_OK else 1


if __name__ == "__main__":
    raise SystemExit(main())
