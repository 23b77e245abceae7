"""Engine construction for the supported database backends."""

from __future__ import annotations

import warnings

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, Engine, make_url

from .config import get_app_env

_SYNC_POSTGRES_DRIVER = "postgresql+psycopg"
_ACCEPTED_DRIVERS = {
    "sqlite",
    "sqlite+pysqlite",
    "postgresql",
    _SYNC_POSTGRES_DRIVER,
    "mysql+pymysql",
}


def _parse_url(url: str | URL) -> URL:
    candidate = make_url(url)
    if candidate.drivername not in _ACCEPTED_DRIVERS:
        raise RuntimeError(
            "Unsupported database driver "
            f"{candidate.drivername!r}; use one of: {', '.join(sorted(_ACCEPTED_DRIVERS))}"
        )
    return candidate


def normalise_url(url: str | URL) -> URL:
    """Return ``url`` with PostgreSQL pinned to the psycopg driver."""

    parsed = _parse_url(url)
    if parsed.drivername == "postgresql":
        return parsed.set(drivername=_SYNC_POSTGRES_DRIVER)
    return parsed


def _uses_placeholder(url: URL) -> bool:
    """Return True when the connection URL uses the legacy postgres:postgres pair."""

    return bool(url.username == "postgres" and url.password == "postgres")  # noqa: S105


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores foreign keys, and so every cascade, unless asked per connection.
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA foreign_keys=ON")
    finally:
        cursor.close()


def make_engine(url: str | URL, **kwargs) -> Engine:
    """Return an Engine for ``url`` after validating the driver and credentials."""

    parsed = normalise_url(url)
    if _uses_placeholder(parsed):
        if get_app_env() == "production":
            raise RuntimeError(
                "Refusing to migrate in production with the legacy postgres:postgres "
                "placeholder in DATABASE_URL."
            )
        warnings.warn(
            "DATABASE_URL appears to use the 'postgres:postgres' placeholder. "
            "This is acceptable for local development and tests but must not be used in production.",
            RuntimeWarning,
            stacklevel=2,
        )

    engine = create_engine(parsed, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine
