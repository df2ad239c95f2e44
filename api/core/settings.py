"""
Environment-driven settings.

Each value is read on call so tests can change the environment with
`monkeypatch.setenv` without reloading modules.
"""

from __future__ import annotations

import os


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


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return url


def db_pool_min_size() -> int:
    return _env_int("DB_POOL_MIN_SIZE", 1)


def db_pool_max_size() -> int:
    return _env_int("DB_POOL_MAX_SIZE", 5)


def db_command_timeout() -> float:
    return _env_float("DB_COMMAND_TIMEOUT", 30.0)


def api_host() -> str:
    return _env_str("API_HOST", "127.0.0.1")


def api_port() -> int:
    return _env_int("API_PORT", 8080)


_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
_LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


def log_level() -> str:
    """
    A level name both `logging` and uvicorn accept; unknown names give DEBUG.
    """
    raw = _env_str("LOG_LEVEL", "DEBUG").upper()
    level = _LOG_LEVEL_ALIASES.get(raw, raw)
    return level if level in _LOG_LEVELS else "DEBUG"
