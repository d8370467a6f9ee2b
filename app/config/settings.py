from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    upload_dir: str = "uploads"
    max_upload_files: int = 10
    max_upload_bytes: int = 10 * 1024 * 1024
    processing_error_status: int = 400

    pdf_engine: str = "pymupdf"
    page_margin: float = Field(default=0.0, ge=0.0)

    render_engine: str = "pymupdf"
    render_concurrency: int = Field(default=7, ge=1)
    render_sample_count: int = Field(default=1, ge=1)
    render_scale: float = Field(default=2.0, gt=0.0)
    settle_delay_ms: int = Field(default=300, ge=0)
    render_timeout_seconds: float = Field(default=30.0, gt=0.0)
    render_workers: int = Field(default=4, ge=1)
    render_fail_fast: bool = False
    keep_page_documents: bool = False

    default_language: str = "eng"
    primary_language: str = "eng"
    secondary_language: str = "deu"

    tesseract_cmd: str = ""
    tesseract_config: str = ""

    primary_dictionary_path: str = ""
    secondary_dictionary_path: str = ""
    max_edit_distance: int = Field(default=2, ge=0)
    digit_pass_replacement: Literal["first_occurrence", "positional"] = "first_occurrence"
