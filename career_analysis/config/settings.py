import tempfile

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    upload_dir: str = "uploads"
    scratch_root: str = tempfile.gettempdir()
    max_upload_bytes: int = 2 * 1024 * 1024

    # Shorter extractions are treated as failed and trigger OCR.
    min_text_length: int = 50

    pdf_engine: str = "pdfplumber"

    ocr_dpi: int = 300
    ocr_default_languages: str = "eng"
    ocr_profile_languages: str = "eng+fra"
    ocr_engine_mode: int = 3
    ocr_default_page_mode: int = 3
    ocr_profile_page_mode: int = 6
    ocr_max_workers: int = 4
    tesseract_cmd: str = ""

    analysis_provider: str = "gemini"
    analysis_api_key: str = ""
    analysis_models: list[str] = ["gemini-1.5-flash", "gemini-1.5-pro"]
    analysis_base_url: str = ""
    analysis_timeout_seconds: int = 60
    analysis_temperature: float = Field(default=0.2, ge=0.0, le=2.0)
    analysis_fallback_on_any_error: bool = True

    persist_results: bool = False

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "career_analysis"
    db_username: str = "career_analysis"
    db_password: str = "secret"
