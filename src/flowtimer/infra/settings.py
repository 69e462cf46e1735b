"""
Application settings for flowtimer.

This module defines process-level settings using Pydantic BaseSettings.
The runtime engine never reads these; the CLI and host applications pass the
relevant values in explicitly.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main application settings using Pydantic BaseSettings."""

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="json", alias="LOG_FORMAT")  # json|console
    env: str = Field(default="dev", alias="ENV")  # dev|prod|test

    # Schedule document (JSON or YAML). Unset means the built-in schedule.
    config_path: str | None = Field(default=None, alias="FLOWTIMER_CONFIG")
    # Minimum seconds between scheduler recomputations.
    tick_interval: float = Field(default=1.0, ge=0.0, alias="FLOWTIMER_TICK_INTERVAL")

    model_config: SettingsConfigDict = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


def _resolve_env_file() -> str | None:
    # 1) Explicit override
    explicit = os.getenv("FLOWTIMER_ENV_FILE")
    if explicit and Path(explicit).is_file():
        return explicit

    # 2) CWD .env
    cwd_env = Path.cwd() / ".env"
    if cwd_env.is_file():
        return str(cwd_env)
    return None


def load_settings() -> Settings:
    """Build settings from the environment and the best-effort .env file."""
    env_file = _resolve_env_file()
    return Settings(_env_file=env_file) if env_file else Settings()  # type: ignore[call-arg]


settings = load_settings()
