# src/taskboard/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- No secrets required at import time (the bearer token is read per request).
- Settings are injected into the composition root, never read by the API layer directly.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKBOARD"

DEFAULT_API_BASE_URL = "http://localhost:8080/api"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_TOKEN_KEY = "authToken"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


# Real environment variables win over .env entries.
load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


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

    # ---- REST API ----
    api_base_url: str
    api_timeout_seconds: float

    # ---- Credentials (read-only key-value store) ----
    credentials_path: Path
    token_key: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskboard") or "taskboard"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        # A bare API_BASE_URL is accepted for parity with the web client's env file.
        api_base_url = (
            _first_env(_k("API_BASE_URL"), "API_BASE_URL", default=DEFAULT_API_BASE_URL)
            or DEFAULT_API_BASE_URL
        ).strip()
        api_timeout_seconds = _env_float(_k("API_TIMEOUT_SECONDS"), DEFAULT_TIMEOUT_SECONDS)
        if api_timeout_seconds <= 0:
            api_timeout_seconds = DEFAULT_TIMEOUT_SECONDS

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskboard"))
        credentials_path = _env_path(_k("CREDENTIALS_PATH"), data_dir / "credentials.json")
        token_key = _env(_k("TOKEN_KEY"), DEFAULT_TOKEN_KEY).strip() or DEFAULT_TOKEN_KEY

        return Settings(
            app_name=app_name,
            log_level=log_level,
            api_base_url=api_base_url,
            api_timeout_seconds=api_timeout_seconds,
            credentials_path=credentials_path,
            token_key=token_key,
            data_dir=data_dir,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
