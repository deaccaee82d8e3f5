"""
clacks.demo.settings

Purpose:
    Centralized configuration for the demo FastAPI service.
    The middleware itself has no configuration; this only covers app metadata/logging.

Created:
    2026-10-19
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field, field_validator

from clacks.demo.contracts.api_paths import ApiPaths

LOG_LEVEL_ENV_VAR = "CLACKS_LOG_LEVEL"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseModel):
    service_name: str = Field(default="clacks-demo")
    service_version: str = Field(default="0.1.0")

    api_v1_prefix: str = Field(default=ApiPaths().v1_prefix)

    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v!r}. Allowed values: {', '.join(_LOG_LEVELS)}.")
        return level


def get_settings() -> Settings:
    log_level = os.getenv(LOG_LEVEL_ENV_VAR)
    if log_level:
        return Settings(log_level=log_level)
    return Settings()
