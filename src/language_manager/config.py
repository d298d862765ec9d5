"""Settings and logging setup."""

import logging
import sys
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("language_manager")


class Settings(BaseSettings):
    """Application settings, read from LANGUAGE_MANAGER_* env vars or .env."""

    model_config = SettingsConfigDict(
        env_prefix="LANGUAGE_MANAGER_",
        env_file=".env",
        extra="ignore",
    )

    storage_dir: Path = Path("data")
    storage_file: str = "storage.json"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Removing the last record leaves the previous list in storage unless set
    persist_empty_list: bool = False
    # Reset the form when the record being edited is deleted
    clear_edit_on_delete: bool = True

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @property
    def storage_path(self) -> Path:
        return self.storage_dir / self.storage_file


@lru_cache
def get_settings() -> Settings:
    return Settings()


def setup_logging(level: str | int | None = None) -> None:
    """Attach a stdout handler to the package logger.

    Args:
        level: Logging level name or number (default from settings)
    """
    if level is None:
        level = get_settings().log_level
    elif isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    # Avoid duplicate handlers on repeated setup
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    logger.addHandler(handler)
