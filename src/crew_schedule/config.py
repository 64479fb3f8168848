# src/crew_schedule/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every variable has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

from dotenv import load_dotenv

ENV_PREFIX = "CREW"

# Real environment wins over a local .env file.
load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_list(name: str, default: List[str]) -> List[str]:
    # Comma separated; observer names may contain spaces ("Mission Control").
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    parts = [p.strip() for p in raw.split(",") if p.strip()]
    return parts or list(default)


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path
    log_file_enabled: bool

    # ---- Console ----
    console_enabled: bool

    # ---- Scheduling ----
    observer_ids: List[str]
    time_format: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "crew-schedule").strip() or "crew-schedule"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/crew"))
        log_file_enabled = _env_bool(_k("LOG_FILE_ENABLED"), True)

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)

        observer_ids = _env_list(_k("OBSERVERS"), ["Mission Control"])
        time_format = _env(_k("TIME_FORMAT"), "%H:%M").strip() or "%H:%M"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            log_file_enabled=log_file_enabled,
            console_enabled=console_enabled,
            observer_ids=observer_ids,
            time_format=time_format,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
