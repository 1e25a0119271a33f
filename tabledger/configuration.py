"""Mini README: Centralised configuration for the Tab Ledger service.

Structure:
    * TrackerSettings - pydantic-settings model describing runtime options.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``TABLEDGER_*`` environment variables (or
    a local ``.env`` file). Settings only shape the launcher and the web
    interface; ledger state itself is never persisted.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TrackerSettings(BaseSettings):
    """Runtime configuration for the tracker."""

    model_config = SettingsConfigDict(
        env_prefix="TABLEDGER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the web interface to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the web interface listens on.",
        ge=1,
        le=65535,
    )
    currency_symbol: str = Field(
        "$",
        description="Symbol prefixed to amounts when rendering pages.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level name, e.g. DEBUG or WARNING.",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        """Accept only level names known to the logging module."""

        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unknown log level: {value}")
        return normalised

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


@lru_cache()
def get_settings() -> TrackerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return TrackerSettings()
