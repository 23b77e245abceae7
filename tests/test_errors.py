import pytest
from sqlalchemy import exc as sa_exc

from zoo_schema.errors import (
    AlreadyExistsError,
    ConnectionFailureError,
    ConstraintViolationError,
    SchemaError,
    translate_error,
)


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (
            sa_exc.IntegrityError("DROP TABLE zoos", {}, Exception("FOREIGN KEY constraint failed")),
            ConstraintViolationError,
        ),
        (
            sa_exc.OperationalError("CREATE TABLE zoos", {}, Exception("table zoos already exists")),
            AlreadyExistsError,
        ),
        (
            sa_exc.ProgrammingError(
                "CREATE TABLE zoos",
                {},
                Exception('relation "zoos" already exists'),
            ),
            AlreadyExistsError,
        ),
        (
            sa_exc.OperationalError(
                "SELECT 1",
                {},
                Exception("server closed the connection"),
                connection_invalidated=True,
            ),
            ConnectionFailureError,
        ),
        (
            sa_exc.InterfaceError("SELECT 1", {}, Exception("cursor already closed")),
            ConnectionFailureError,
        ),
        (
            sa_exc.InternalError(
                "DROP TABLE zoos",
                {},
                Exception("cannot drop table zoos because other objects depend on it"),
            ),
            ConstraintViolationError,
        ),
        (sa_exc.ResourceClosedError("This Connection is closed"), ConnectionFailureError),
        (sa_exc.DisconnectionError("gone"), ConnectionFailureError),
    ],
)
def test_sqlalchemy_errors_map_onto_taxonomy(error, expected):
    translated = translate_error(error, table="zoos")
    assert type(translated) is expected
    assert translated.table == "zoos"


def test_unclassified_errors_become_plain_schema_errors():
    translated = translate_error(
        sa_exc.OperationalError("CREATE TABLE zoos", {}, Exception("disk I/O error"))
    )
    assert type(translated) is SchemaError
    assert "disk I/O error" in str(translated)
    assert translated.table is None


def test_every_schema_error_is_catchable_as_base():
    for cls in (AlreadyExistsError, ConnectionFailureError, ConstraintViolationError):
        assert issubclass(cls, SchemaError)
