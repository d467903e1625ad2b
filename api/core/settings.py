"""
Runtime settings read from environment variables.

Values are read on every call so tests (and a restarted process) can change
them without reloading modules. Empty or malformed values fall back to the
defaults below.
"""

from __future__ import annotations

import os

DEFAULT_DATA_DIR = "data/raw"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_CACHE_MAX_AGE = 300
DEFAULT_CACHE_S_MAXAGE = 3600

_TRUTHY = {"1", "true", "yes", "on"}
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in _TRUTHY


def data_dir() -> str:
    return _env_str("DATA_DIR", DEFAULT_DATA_DIR)


def strict_references() -> bool:
    # Lenient by default: orphaned parent ids are logged, not fatal.
    return _env_bool("DATA_STRICT_REFERENCES", False)


def host() -> str:
    return _env_str("HOST", DEFAULT_HOST)


def port() -> int:
    value = _env_int("PORT", DEFAULT_PORT)
    if not 0 < value < 65536:
        return DEFAULT_PORT
    return value


def log_level() -> str:
    level = _env_str("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if level not in _LOG_LEVELS:
        return DEFAULT_LOG_LEVEL
    return level


def cors_allow_origins() -> list[str]:
    raw = _env_str("CORS_ALLOW_ORIGINS", "*")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


def cache_max_age() -> int:
    return max(0, _env_int("CACHE_MAX_AGE", DEFAULT_CACHE_MAX_AGE))


def cache_s_maxage() -> int:
    return max(0, _env_int("CACHE_S_MAXAGE", DEFAULT_CACHE_S_MAXAGE))


def forwarded_allow_ips() -> str:
    return _env_str("FORWARDED_ALLOW_IPS", "*")
