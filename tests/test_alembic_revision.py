from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import inspect

import zoo_schema.migrations as migrations_pkg

ZOO_TABLE_NAMES = {"zoos", "species", "animals", "zoo_animals"}


def _alembic_config(url):
    cfg = Config()
    cfg.set_main_option("script_location", str(Path(migrations_pkg.__file__).parent))
    cfg.set_main_option("sqlalchemy.url", url)
    return cfg


def test_upgrade_and_downgrade_through_alembic(database_url, engine):
    cfg = _alembic_config(database_url)

    command.upgrade(cfg, "head")
    tables = set(inspect(engine).get_table_names())
    assert ZOO_TABLE_NAMES <= tables
    assert "alembic_version" in tables

    command.downgrade(cfg, "base")
    tables = set(inspect(engine).get_table_names())
    assert not ZOO_TABLE_NAMES & tables


def test_upgrade_reuses_a_supplied_connection(database_url, engine):
    cfg = _alembic_config(database_url)
    with engine.begin() as conn:
        cfg.attributes["connection"] = conn
        command.upgrade(cfg, "head")

    assert ZOO_TABLE_NAMES <= set(inspect(engine).get_table_names())
