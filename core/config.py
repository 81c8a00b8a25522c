# core/config.py

"""
Application settings for the Virtual Classroom Manager.

Settings are loaded from environment variables prefixed with `VCM_`, e.g.:

    VCM_LOG_LEVEL=DEBUG VCM_LOG_FORMAT=json classroom-manager
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Runtime configuration.

    Attributes:
        log_level (str): Minimum level for emitted log records. Defaults to WARNING to keep the console quiet.
        log_format (str): "console" for human-readable output, "json" for one JSON object per line.
    """

    model_config = SettingsConfigDict(
        env_prefix="VCM_",
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_format: Literal["console", "json"] = "console"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
