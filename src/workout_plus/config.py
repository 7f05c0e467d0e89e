"""Application settings and logging setup.

Settings are loaded from environment variables prefixed with
``WORKOUT_PLUS_`` (or a ``.env`` file). Use ``get_settings()`` for a
cached instance; tests can build ``Settings(...)`` directly.
"""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent / "data"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WORKOUT_PLUS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Runtime environment: development, staging, production, test",
    )
    database_path: Path = Field(
        default=DATA_DIR / "workout_plus.db",
        description="SQLite database file",
    )
    host: str = Field(default="127.0.0.1", description="Host to bind the API to")
    port: int = Field(default=3000, description="Port to bind the API to")
    cors_origins: list[str] = Field(
        default=["http://localhost:5173"],
        description="Origins allowed to call the API from a browser",
    )
    log_level: str = Field(default="INFO", description="Root log level")
    seed_on_startup: bool = Field(
        default=True,
        description="Ensure the exercise catalog is seeded when the API starts",
    )
    catalog_file: Path | None = Field(
        default=None,
        description="Optional JSON file replacing the built-in exercise catalog",
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is a valid value."""
        valid_environments = {"development", "staging", "production", "test"}
        if v.lower() not in valid_environments:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {valid_environments}"
            )
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level '{v}'")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    For testing, clear the cache with ``get_settings.cache_clear()``.
    """
    return Settings()


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the CLI and the API server."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
