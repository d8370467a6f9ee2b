import pytest
from pydantic import ValidationError

from app.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_render_concurrency(self) -> None:
        s = Settings()
        assert s.render_concurrency == 7

    def test_default_sample_count(self) -> None:
        s = Settings()
        assert s.render_sample_count == 1

    def test_default_settle_delay(self) -> None:
        s = Settings()
        assert s.settle_delay_ms == 300

    def test_default_render_scale(self) -> None:
        s = Settings()
        assert s.render_scale == 2.0

    def test_default_languages(self) -> None:
        s = Settings()
        assert s.default_language == "eng"
        assert s.primary_language == "eng"
        assert s.secondary_language == "deu"

    def test_partial_failure_is_default(self) -> None:
        s = Settings()
        assert s.render_fail_fast is False

    def test_default_engines(self) -> None:
        s = Settings()
        assert s.pdf_engine == "pymupdf"
        assert s.render_engine == "pymupdf"

    def test_default_upload_limits(self) -> None:
        s = Settings()
        assert s.max_upload_files == 10
        assert s.max_upload_bytes == 10 * 1024 * 1024


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_render_concurrency(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RENDER_CONCURRENCY", "3")
        s = Settings()
        assert s.render_concurrency == 3

    def test_loads_sample_count(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RENDER_SAMPLE_COUNT", "4")
        s = Settings()
        assert s.render_sample_count == 4

    def test_loads_fail_fast(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RENDER_FAIL_FAST", "true")
        s = Settings()
        assert s.render_fail_fast is True

    def test_loads_page_margin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAGE_MARGIN", "5")
        s = Settings()
        assert s.page_margin == 5.0


class TestSettingsValidation:
    def test_zero_concurrency_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RENDER_CONCURRENCY", "0")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_sample_count_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RENDER_SAMPLE_COUNT", "abc")
        with pytest.raises(ValidationError):
            Settings()

    def test_unknown_replacement_mode_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DIGIT_PASS_REPLACEMENT", "last_occurrence")
        with pytest.raises(ValidationError):
            Settings()
