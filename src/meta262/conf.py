"""Configuration management for meta262 using Pydantic Settings."""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings configurable via environment variables and .env file.

    Environment variables must be prefixed with META262_.
    Example: META262_TEST_GLOB="test/**/*.js"
    """

    model_config = SettingsConfigDict(  # pyright: ignore[reportUnannotatedClassAttribute]
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="META262_",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Corpus loading ---

    ENCODING: str = Field(
        default="utf-8",
        description="Text encoding used when reading test files.",
    )

    TEST_GLOB: str = Field(
        default="**/*.js",
        description="Glob pattern (relative to the corpus root) selecting test files.",
    )

    # --- Logging ---

    LOG_LEVEL: str = Field(
        default="WARNING",
        description="Log level for console output.",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    LOG_FILE: Path | None = Field(
        default=None,
        description="Optional JSON-lines log file.",
    )


# Global settings instance
settings = Settings()
