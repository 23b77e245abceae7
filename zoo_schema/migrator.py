"""Apply and revert the zoo table set as one unit of schema change."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum

from sqlalchemy import Table, inspect
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from .definitions import ZOO_TABLES, TableDef, dependency_order
from .errors import (
    AlreadyExistsError,
    ConnectionFailureError,
    MissingDependencyError,
    SchemaError,
    translate_error,
)
from .metadata import build_metadata

logger = logging.getLogger("zoo_schema.migrator")


class SchemaState(str, Enum):
    ABSENT = "absent"
    PRESENT = "present"
    PARTIAL = "partial"


class SchemaMigrator:
    """Create or tear down a fixed set of tables in foreign-key order.

    The caller owns the connection and any surrounding transaction.  Nothing
    here retries or recovers: failures are translated into
    :class:`~zoo_schema.errors.SchemaError` subclasses and propagated.
    """

    def __init__(self, tables: Sequence[TableDef] = ZOO_TABLES) -> None:
        self.tables = dependency_order(
            tables, external=self._external_names(tables)
        )

    @staticmethod
    def _external_names(tables: Sequence[TableDef]) -> set[str]:
        # Parents outside the set are only checked against the live database.
        names = {table.name for table in tables}
        return {
            dep for table in tables for dep in table.dependencies if dep not in names
        }

    @property
    def table_names(self) -> list[str]:
        return [table.name for table in self.tables]

    def _existing(self, connection: Connection) -> set[str]:
        try:
            return set(inspect(connection).get_table_names())
        except SQLAlchemyError as exc:
            raise translate_error(exc) from exc

    @staticmethod
    def _check_connection(connection: Connection) -> None:
        if connection.closed or connection.invalidated:
            raise ConnectionFailureError("Database connection is closed or invalidated")

    def state(self, connection: Connection) -> SchemaState:
        """Report whether none, all, or only some of the tables exist."""

        self._check_connection(connection)
        present = self._existing(connection) & set(self.table_names)
        if not present:
            return SchemaState.ABSENT
        if len(present) == len(self.tables):
            return SchemaState.PRESENT
        return SchemaState.PARTIAL

    def apply(self, connection: Connection) -> None:
        """Create every table, parents first.  Fails if any already exists."""

        self._check_connection(connection)
        existing = self._existing(connection)
        clashing = [name for name in self.table_names if name in existing]
        if clashing:
            raise AlreadyExistsError(
                f"Refusing to apply schema, tables already exist: {', '.join(clashing)}",
                table=clashing[0],
            )

        dialect_name = connection.dialect.name
        metadata = build_metadata(self.tables, dialect_name)
        created: set[str] = set()
        for table in self.tables:
            for dependency in table.dependencies:
                if dependency in created:
                    continue
                if dependency not in existing:
                    raise MissingDependencyError(
                        f"{table.name} references {dependency}, which does not exist",
                        table=table.name,
                    )
                if dependency not in metadata.tables:
                    try:
                        Table(dependency, metadata, autoload_with=connection)
                    except SQLAlchemyError as exc:
                        raise translate_error(exc, table=dependency) from exc

            logger.info(
                "Creating table %s",
                table.name,
                extra={"table": table.name, "migration_direction": "up"},
            )
            try:
                metadata.tables[table.name].create(connection, checkfirst=False)
            except SQLAlchemyError as exc:
                raise translate_error(exc, table=table.name) from exc
            created.add(table.name)

    def revert(self, connection: Connection) -> None:
        """Drop every table, children first.  Missing tables are skipped."""

        self._check_connection(connection)
        existing = self._existing(connection)
        metadata = build_metadata(self.tables, connection.dialect.name)
        for table in reversed(self.tables):
            if table.name not in existing:
                logger.debug(
                    "Table %s does not exist, skipping drop",
                    table.name,
                    extra={"table": table.name, "migration_direction": "down"},
                )
                continue
            logger.info(
                "Dropping table %s",
                table.name,
                extra={"table": table.name, "migration_direction": "down"},
            )
            try:
                metadata.tables[table.name].drop(connection, checkfirst=True)
            except SQLAlchemyError as exc:
                raise translate_error(exc, table=table.name) from exc


def apply(connection: Connection) -> None:
    """Forward migration for the zoo tables."""

    SchemaMigrator().apply(connection)


def revert(connection: Connection) -> None:
    """Reverse migration for the zoo tables."""

    SchemaMigrator().revert(connection)


__all__ = [
    "SchemaError",
    "SchemaMigrator",
    "SchemaState",
    "apply",
    "revert",
]
