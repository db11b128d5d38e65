from __future__ import annotations

"""Configuration helpers and environment-driven settings."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

API_ROOT = Path(__file__).resolve().parents[2]

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def _get_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except ValueError:
        return default


def _get_str(name: str, default: str) -> str:
    return os.getenv(name, default)


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    return default


def _get_log_level(name: str, default: str) -> str:
    value = os.getenv(name, default).strip().upper()
    # getLevelName maps known names to their numeric level
    if isinstance(logging.getLevelName(value), int):
        return value
    return default


@dataclass(frozen=True)
class Settings:
    """Typed configuration values used across the backend."""

    host: str
    port: int
    data_path: str
    cors_origins: list[str]
    log_level: str
    strict_persistence: bool

    def resolved_data_path(self) -> Path:
        """Absolute path of the store file; relative paths hang off the api root."""
        path = Path(self.data_path)
        if path.is_absolute():
            return path
        return API_ROOT / path


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment with defaults."""
    cors_raw = _get_str("CORS_ORIGINS", "*")
    cors_origins = [o.strip() for o in cors_raw.split(",") if o.strip()]
    if not cors_origins:
        cors_origins = ["*"]
    return Settings(
        host=_get_str("HOST", "0.0.0.0"),
        port=_get_int("PORT", 3000),
        data_path=_get_str("DATA_PATH", "data/data.json"),
        cors_origins=cors_origins,
        log_level=_get_log_level("LOG_LEVEL", "INFO"),
        strict_persistence=_get_bool("STRICT_PERSISTENCE", False),
    )
