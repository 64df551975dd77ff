"""Core application configuration and settings.

Handles environment variables and the optional ``.env`` file.
"""
import logging
import sys
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def load_env_file() -> bool:
    """Load the nearest .env file, searching upward from the working directory."""
    return load_dotenv(find_dotenv(usecwd=True))


load_env_file()

ENVIRONMENTS = ("development", "test", "production")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    environment: str = Field(default="development", alias="ENVIRONMENT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    # None means "JSON in production, plain text elsewhere"
    log_json: Optional[bool] = Field(default=None, alias="LOG_JSON")

    @property
    def json_logs(self) -> bool:
        if self.log_json is not None:
            return self.log_json
        return self.environment == "production"

    def validate_required_settings(self):
        """Validate that settings hold usable values."""
        if self.environment not in ENVIRONMENTS:
            raise ValueError(
                f"ENVIRONMENT must be one of {', '.join(ENVIRONMENTS)}, "
                f"got {self.environment!r}."
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(
                f"LOG_LEVEL {self.log_level!r} is not a known logging level."
            )


# Global settings instance
settings = Settings()


# Validate settings on module import (only in non-test environments)
if settings.environment != "test":
    try:
        settings.validate_required_settings()
    except ValueError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        # Don't raise in development to allow partial setup
        if settings.environment == "production":
            raise
