"""Application configuration using pydantic-settings."""
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Levels understood by both stdlib logging and uvicorn
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Greeting returned by GET / and used as the page heading
    app_title: str = "Bookmark Manager"

    # Server (python -m api)
    host: str = "127.0.0.1"
    port: int = Field(default=4567, ge=1, le=65535)

    log_level: str = "INFO"
    debug: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case the level name and reject unknown names."""
        level = str(v).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: '{v}'. Use one of {', '.join(LOG_LEVELS)}.",
            )
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
