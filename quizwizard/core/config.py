"""
Application configuration management with environment-based settings.
"""
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from quizwizard import __version__

DEFAULT_QUESTIONS_FILE = str(Path(__file__).resolve().parent.parent / "data" / "questions.json")


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ============= Application Settings =============
    APP_NAME: str = "QuizWizard API"
    APP_VERSION: str = __version__
    ENVIRONMENT: str = Field(default="development")

    # ============= Server Settings =============
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=1323)
    CORS_ORIGINS: str = "*"

    # ============= Quiz Settings =============
    QUESTIONS_FILE: str = DEFAULT_QUESTIONS_FILE
    RANDOM_QUIZ_SIZE: int = Field(default=5, ge=1)
    SHUFFLE_SEED: Optional[int] = None

    # ============= Client Settings =============
    API_URL: str = "http://localhost:1323"
    REQUEST_TIMEOUT: float = 10.0

    # ============= Logging Settings =============
    LOG_LEVEL: str = "INFO"

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    @field_validator("API_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    def cors_origins(self) -> List[str]:
        """CORS origins as a list, parsed from a comma separated string."""
        return [i.strip() for i in self.CORS_ORIGINS.split(",") if i.strip()]

    def is_production(self) -> bool:
        """Check if running in production."""
        return self.ENVIRONMENT.lower() == "production"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
