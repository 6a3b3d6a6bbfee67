"""Application settings.

Loaded from environment variables prefixed with ``STOCKKEEPER_`` (or a
``.env`` file) and validated by Pydantic Settings.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):

    DATA_DIR: Path = Field(default=_DEFAULT_DATA_DIR)
    LOG_LEVEL: str = Field(default="WARNING")

    model_config = SettingsConfigDict(
        env_prefix="STOCKKEEPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance; call ``get_settings.cache_clear()`` to reload."""
    return Settings()
