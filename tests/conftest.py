import os

import pytest
from sqlalchemy import inspect

# Keep test output readable and never trip the production placeholder guard.
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LOG_JSON", "false")

from zoo_schema.database import make_engine  # noqa: E402
from zoo_schema.migrator import SchemaMigrator  # noqa: E402


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'zoos.db'}"


@pytest.fixture
def engine(database_url):
    eng = make_engine(database_url)
    yield eng
    eng.dispose()


@pytest.fixture
def migrator():
    return SchemaMigrator()


@pytest.fixture
def applied(engine, migrator):
    """Engine whose database already holds the zoo tables."""
    with engine.begin() as conn:
        migrator.apply(conn)
    return engine


@pytest.fixture
def table_names():
    def _table_names(engine):
        return set(inspect(engine).get_table_names())

    return _table_names
