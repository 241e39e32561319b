"""
Environment-backed settings.

Values are read on each call so tests can monkeypatch the environment
without reloading modules.
"""

from __future__ import annotations

import os

DEFAULT_FRONTEND_URL = "http://localhost:5173"


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}.") from exc


def frontend_url() -> str:
    """
    The single origin allowed to call this API from a browser.
    """
    url = os.environ.get("FRONTEND_URL", "").strip() or DEFAULT_FRONTEND_URL
    return url.rstrip("/")


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def host() -> str:
    return os.environ.get("HOST", "0.0.0.0").strip() or "0.0.0.0"


def port() -> int:
    return _int_env("PORT", 4000)


def db_pool_min_size() -> int:
    return max(1, _int_env("DB_POOL_MIN_SIZE", 1))


def db_pool_max_size() -> int:
    return max(db_pool_min_size(), _int_env("DB_POOL_MAX_SIZE", 5))


def allow_no_origin() -> bool:
    """
    Let requests without an `Origin` header through (curl, same-origin /docs).
    Off by default: only the configured frontend origin is accepted.
    """
    return os.environ.get("ALLOW_NO_ORIGIN", "").strip().lower() in {"1", "true", "yes"}
