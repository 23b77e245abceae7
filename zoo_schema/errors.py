"""Error taxonomy raised by the schema migrator."""

from __future__ import annotations

from sqlalchemy import exc as sa_exc


class SchemaError(Exception):
    """Base class for every failure while applying or reverting the schema."""

    def __init__(self, message: str, *, table: str | None = None) -> None:
        super().__init__(message)
        self.table = table


class AlreadyExistsError(SchemaError):
    """``apply`` found a table of the set already present."""


class MissingDependencyError(SchemaError):
    """A table references a table that does not exist (yet)."""


class ConstraintViolationError(SchemaError):
    """The database refused a change because of a referential constraint."""


class ConnectionFailureError(SchemaError):
    """The supplied connection cannot be used."""


_ALREADY_EXISTS_MARKERS = ("already exists", "already an object named")
_DEPENDENT_OBJECT_MARKERS = ("foreign key constraint", "other objects depend on it")


def translate_error(exc: sa_exc.SQLAlchemyError, *, table: str | None = None) -> SchemaError:
    """Map a SQLAlchemy exception onto the schema error taxonomy."""

    message = str(getattr(exc, "orig", None) or exc)
    if isinstance(exc, sa_exc.IntegrityError):
        return ConstraintViolationError(message, table=table)
    if isinstance(exc, (sa_exc.ResourceClosedError, sa_exc.DisconnectionError)):
        return ConnectionFailureError(message, table=table)
    if isinstance(exc, sa_exc.DBAPIError) and exc.connection_invalidated:
        return ConnectionFailureError(message, table=table)
    if isinstance(exc, sa_exc.InterfaceError):
        return ConnectionFailureError(message, table=table)
    if isinstance(exc, sa_exc.DBAPIError) and any(
        marker in message.lower() for marker in _DEPENDENT_OBJECT_MARKERS
    ):
        return ConstraintViolationError(message, table=table)
    if isinstance(exc, sa_exc.DBAPIError) and any(
        marker in message.lower() for marker in _ALREADY_EXISTS_MARKERS
    ):
        return AlreadyExistsError(message, table=table)
    return SchemaError(message, table=table)
