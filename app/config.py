"""Application configuration with validation."""
from typing import Literal
from functools import lru_cache
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.extraction.fields import ExtractionMode
from app.extraction.pages import DEFAULT_PAGE_MARKER


class Settings(BaseSettings):
    """Application settings, overridable through environment / .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Financial Report Parser"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # API
    API_PREFIX: str = "/api/financial-report"
    MAX_UPLOAD_BYTES: int = Field(
        default=50 * 1024 * 1024,
        ge=1024,
        description="Largest accepted upload; annual reports run a few MB",
    )

    # Extraction
    PAGE_BOUNDARY_MARKER: str = Field(
        default=DEFAULT_PAGE_MARKER,
        description="Running footer that separates pages in the extracted text",
    )
    EXTRACTION_MAX_WORKERS: int = Field(default=8, ge=1, le=64)
    LINE_EXTRACTION_MODE: ExtractionMode = ExtractionMode.DEFENSIVE

    @field_validator("PAGE_BOUNDARY_MARKER")
    @classmethod
    def validate_marker(cls, v: str) -> str:
        if not v:
            raise ValueError("PAGE_BOUNDARY_MARKER must not be empty")
        return v

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure production does not run in debug mode."""
        if self.APP_ENV == "production" and self.DEBUG:
            raise ValueError("DEBUG must be False in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
