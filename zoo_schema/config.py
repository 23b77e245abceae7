"""Environment-driven configuration for the migration tooling."""

from __future__ import annotations

import os


def _get_env(name: str, *, default: str | None = None, required: bool = False) -> str | None:
    value = os.getenv(name)
    if value is None:
        if required:
            raise RuntimeError(f"Missing required environment variable: {name}")
        return default
    return value.strip()


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "t", "yes", "y", "on"}


def get_database_url() -> str:
    """Return ``DATABASE_URL``, raising when it is unset or blank."""

    url = _get_env("DATABASE_URL")
    if not url:
        raise RuntimeError(
            "DATABASE_URL environment variable is required to run migrations"
        )
    return url


def get_app_env() -> str:
    return (_get_env("APP_ENV", default="production") or "production").lower()


def get_log_level() -> str:
    return (_get_env("LOG_LEVEL", default="INFO") or "INFO").upper()


def log_json_enabled() -> bool:
    return _get_bool("LOG_JSON", default=True)


SERVICE_NAME = _get_env("SERVICE_NAME", default="zoo-schema") or "zoo-schema"
