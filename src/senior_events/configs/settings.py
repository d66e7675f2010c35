"""Centralized settings management for the events catalog."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings powered by pydantic-settings.

    Loads configuration from environment variables and a .env file located
    in the current working directory.
    """

    # -------------------------------------------------------------------------
    # DATA SOURCES
    # -------------------------------------------------------------------------
    # Remote catalog document; the remote step is skipped when unset
    DATA_SOURCE_URL: str | None = None
    DATA_FILE_PATH: Path = Path("benchmark_eventos_seniores.json")
    REQUEST_TIMEOUT: float = Field(default=10.0, gt=0)

    # -------------------------------------------------------------------------
    # LOGGING
    # -------------------------------------------------------------------------
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # -------------------------------------------------------------------------
    # PATHS
    # -------------------------------------------------------------------------
    # CONFIG_DIR points to senior_events/configs
    CONFIG_DIR: Path = Path(__file__).resolve().parent

    UI_CONFIG_PATH: Path = CONFIG_DIR / "ui.yaml"

    # -------------------------------------------------------------------------
    # CONFIGURATION
    # -------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Allow extra fields in .env but ignore them in the model
        extra="ignore",
    )

    @property
    def remote_enabled(self) -> bool:
        """Whether the remote step of the load chain should be attempted."""
        return bool(self.DATA_SOURCE_URL and self.DATA_SOURCE_URL.strip())


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns
    -------
    Settings
        The singleton settings instance.
    """
    return Settings()
