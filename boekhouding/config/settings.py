# boekhouding/config/settings.py
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME: str = "Boekhouding"

# File names below data_dir
TRANSACTIONS_FILENAME: str = "transactions.json"
SHEETS_DIRNAME: str = "sheets"
SHEET_EXTENSION: str = ".html"

DEFAULT_PORT: int = 3000
DEFAULT_MAX_BODY_BYTES: int = 1_000_000

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """
    Runtime configuration, read from the environment (and an optional .env).

    Only the port uses an unprefixed variable (PORT); everything else is
    prefixed with BOEKHOUDING_.
    """

    model_config = SettingsConfigDict(
        env_prefix="BOEKHOUDING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    port: int = Field(default=DEFAULT_PORT, validation_alias="PORT", ge=1, le=65535)
    host: str = "0.0.0.0"

    data_dir: Path = Path("data")
    static_dir: Optional[Path] = None

    max_body_bytes: int = Field(default=DEFAULT_MAX_BODY_BYTES, gt=0)

    # Report failed transaction writes as 500 instead of logging only
    strict_writes: bool = False

    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def upper_level(cls, v: str) -> str:
        level = v.strip().upper() or "INFO"
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def transactions_file(self) -> Path:
        return self.data_dir / TRANSACTIONS_FILENAME

    @property
    def sheets_dir(self) -> Path:
        return self.data_dir / SHEETS_DIRNAME


@lru_cache()
def get_settings() -> Settings:
    """Cached settings; call get_settings.cache_clear() to reload."""
    return Settings()
