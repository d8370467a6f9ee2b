import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from app.main import build_arg_parser, incoming_files, main
from app.processor.models import IngestionResult


class TestArgParser:
    def test_collects_files_and_languages(self) -> None:
        args = build_arg_parser().parse_args(["a.pdf", "b.png", "--language", "deu"])
        assert args.files == [Path("a.pdf"), Path("b.png")]
        assert args.language == ["deu"]


class TestIncomingFiles:
    def test_guesses_mime_type(self, tmp_path: Path) -> None:
        path = tmp_path / "scan.pdf"
        path.write_bytes(b"%PDF")

        [incoming] = incoming_files([path])

        assert incoming.mime_type == "application/pdf"
        assert incoming.size_bytes == 4

    def test_unknown_extension(self, tmp_path: Path) -> None:
        path = tmp_path / "blob.zzz-unknown"
        path.write_bytes(b"x")
        assert incoming_files([path])[0].mime_type == "application/octet-stream"


class TestMain:
    def test_missing_input_returns_2(self, tmp_path: Path) -> None:
        assert main([str(tmp_path / "absent.pdf")]) == 2

    def test_prints_response(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("UPLOAD_DIR", str(tmp_path / "uploads"))
        source = tmp_path / "photo.png"
        source.write_bytes(b"png")
        processor = MagicMock()
        processor.process = AsyncMock(return_value=IngestionResult())

        with patch("app.main.build_processor", return_value=processor):
            code = main([str(source), "--language", "deu"])

        assert code == 0
        body = json.loads(capsys.readouterr().out)
        assert body["status"] == "success"
        [uploaded] = processor.process.call_args.args[0]
        assert uploaded.declared_language == "deu"

    def test_rejected_upload_returns_1(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("UPLOAD_DIR", str(tmp_path / "uploads"))
        source = tmp_path / "notes.txt"
        source.write_text("text")

        with patch("app.main.build_processor", return_value=MagicMock()):
            assert main([str(source)]) == 1
