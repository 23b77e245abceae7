"""Alembic environment: run revisions against a live connection."""

from __future__ import annotations

from alembic import context

from zoo_schema.config import get_database_url
from zoo_schema.database import make_engine
from zoo_schema.logging import configure_logging

config = context.config

if config.config_file_name is not None:
    configure_logging()


def run_migrations_offline() -> None:
    raise RuntimeError(
        "The zoo schema revisions inspect the database and cannot emit offline SQL"
    )


def run_migrations_online() -> None:
    connection = config.attributes.get("connection")
    if connection is not None:
        context.configure(connection=connection, transaction_per_migration=True)
        with context.begin_transaction():
            context.run_migrations()
        return

    url = config.get_main_option("sqlalchemy.url") or get_database_url()
    engine = make_engine(url)
    try:
        with engine.connect() as conn:
            context.configure(connection=conn, transaction_per_migration=True)
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
