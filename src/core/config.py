"""Application settings.

Environment variables (prefix `OUTAGE_WAIT_`) and `.env` files are read with
pydantic-settings so the CLI and adapters share one validated configuration.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.language import Language


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "outage-wait"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "outage-wait"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "outage-wait"
    return Path.home() / ".config" / "outage-wait"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central configuration for outage-wait."""

    model_config = SettingsConfigDict(
        env_prefix="OUTAGE_WAIT_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first, then the per-user one.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    store_path: Path = Field(
        default=Path("outages.json"),
        description="JSON file holding the outage records.",
    )
    sleep_seconds: float = Field(
        default=300.0,
        gt=0,
        description="Default ceiling for a single sleep between checks (seconds).",
    )
    default_language: Language = Field(
        default=Language.ENGLISH,
        description="Language for user-facing messages (en/es).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Level for the stdlib logging tree (DEBUG, INFO, WARNING, ...).",
    )

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}:
            raise ValueError(f"unknown log level: {value}")
        return level
