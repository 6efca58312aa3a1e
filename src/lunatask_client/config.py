# src/lunatask_client/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- No secrets required at import time (the token is only checked when a client is built).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ENV_PREFIX = "LUNATASK"

DEFAULT_BASE_URL = "https://api.lunatask.app/v1"
DEFAULT_TIMEOUT_SECONDS = 10.0


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_timeout(name: str, default: float | None) -> float | None:
    """Parse a timeout in seconds. "0" or "none" disables the timeout."""
    raw = os.getenv(name)
    if raw is None:
        return default
    s = raw.strip().lower()
    if s in {"", "0", "none", "off"}:
        return None
    try:
        value = float(s)
    except ValueError:
        return default
    return value if value > 0 else None


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    log_level: str
    log_dir: Path

    # ---- Lunatask API ----
    access_token: Optional[str]
    base_url: str
    timeout_seconds: Optional[float]

    @staticmethod
    def from_env() -> "Settings":
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        log_dir = _env_path(_k("LOG_DIR"), Path(".local/lunatask"))

        access_token = _first_env(_k("ACCESS_TOKEN"), _k("TOKEN"), default=None)
        if access_token is not None:
            access_token = access_token.strip()

        base_url = (_env(_k("BASE_URL"), DEFAULT_BASE_URL).strip() or DEFAULT_BASE_URL).rstrip("/")
        timeout_seconds = _env_timeout(_k("TIMEOUT_SECONDS"), DEFAULT_TIMEOUT_SECONDS)

        return Settings(
            log_level=log_level,
            log_dir=log_dir,
            access_token=access_token,
            base_url=base_url,
            timeout_seconds=timeout_seconds,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
