"""Runtime configuration loaded from the environment."""
from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .logging import LogLevel


class Settings(BaseModel):
    """Settings shared by the CLI and the match session."""

    log_level: LogLevel = Field(default="WARNING", description="Minimum structlog level")
    delimiter: str = Field(default=",", description="Field delimiter for match exports")
    search_limit: int = Field(default=10, ge=1, description="Maximum search results shown")

    @field_validator("delimiter")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("delimiter must be a single character")
        return value


def get_config() -> Settings:
    """Load configuration from environment (and a .env file if present)."""
    load_dotenv()

    return Settings(
        log_level=os.getenv("DNA_MATRIX_LOG_LEVEL", "WARNING").upper(),
        delimiter=os.getenv("DNA_MATRIX_DELIMITER", ","),
        search_limit=int(os.getenv("DNA_MATRIX_SEARCH_LIMIT", "10")),
    )
