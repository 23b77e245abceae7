"""Schema migration for zoos, species, animals and their residency history."""

from .definitions import ZOO_TABLES, ColumnDef, ForeignKeyDef, TableDef, dependency_order
from .errors import (
    AlreadyExistsError,
    ConnectionFailureError,
    ConstraintViolationError,
    MissingDependencyError,
    SchemaError,
)
from .metadata import build_metadata
from .migrator import SchemaMigrator, SchemaState, apply, revert
from .policies import ReferentialAction

__all__ = [
    "AlreadyExistsError",
    "ColumnDef",
    "ConnectionFailureError",
    "ConstraintViolationError",
    "ForeignKeyDef",
    "MissingDependencyError",
    "ReferentialAction",
    "SchemaError",
    "SchemaMigrator",
    "SchemaState",
    "TableDef",
    "ZOO_TABLES",
    "apply",
    "build_metadata",
    "dependency_order",
    "revert",
]
