"""Build SQLAlchemy tables from the engine-neutral definitions."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKeyConstraint,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.dialects import mysql
from sqlalchemy.types import TypeEngine

from .definitions import ZOO_TABLES, ColumnDef, TableDef

_NATIVE_UNSIGNED = {"mysql", "mariadb"}


def _column_type(col: ColumnDef, dialect_name: str) -> TypeEngine:
    if col.kind == "string":
        return String(col.length)
    if col.unsigned and dialect_name in _NATIVE_UNSIGNED:
        return mysql.INTEGER(unsigned=True)
    return Integer()


def build_table(table: TableDef, metadata: MetaData, dialect_name: str) -> Table:
    """Attach ``table`` to ``metadata`` using constraints ``dialect_name`` supports."""

    auto_increment = (
        len(table.primary_key) == 1
        and table.column(table.primary_key[0]).kind == "integer"
    )

    columns = [
        Column(
            col.name,
            _column_type(col, dialect_name),
            nullable=col.nullable,
            autoincrement=auto_increment and col.name in table.primary_key,
        )
        for col in table.columns
    ]

    constraints: list = [
        PrimaryKeyConstraint(*table.primary_key, name=f"pk_{table.name}")
    ]
    for col in table.columns:
        if col.unique:
            constraints.append(
                UniqueConstraint(col.name, name=f"uq_{table.name}_{col.name}")
            )
        # Emulated UNSIGNED where the engine has no such modifier.
        if col.unsigned and dialect_name not in _NATIVE_UNSIGNED:
            constraints.append(
                CheckConstraint(
                    f"{col.name} >= 0", name=f"ck_{table.name}_{col.name}_unsigned"
                )
            )
    for fk in table.foreign_keys:
        constraints.append(
            ForeignKeyConstraint(
                [fk.column],
                [f"{fk.ref_table}.{fk.ref_column}"],
                name=f"fk_{table.name}_{fk.column}",
                ondelete=fk.on_delete.for_dialect(dialect_name, "delete"),
                onupdate=fk.on_update.for_dialect(dialect_name, "update"),
            )
        )

    return Table(
        table.name,
        metadata,
        *columns,
        *constraints,
        # SQLite reuses deleted rowids unless AUTOINCREMENT is declared.
        sqlite_autoincrement=auto_increment,
    )


def build_metadata(
    tables: Sequence[TableDef] = ZOO_TABLES, dialect_name: str = "default"
) -> MetaData:
    """Return a fresh ``MetaData`` holding every table in ``tables``."""

    metadata = MetaData()
    for table in tables:
        build_table(table, metadata, dialect_name)
    return metadata
