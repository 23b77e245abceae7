import json
import logging
import sys

from zoo_schema.logging import ECSJsonFormatter


def _record(**extra):
    record = logging.LogRecord(
        "zoo_schema.migrator", logging.INFO, __file__, 1, "Creating table %s", ("zoos",), None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_migration_fields_are_renamed_to_ecs():
    formatter = ECSJsonFormatter(service_name="zoo-schema-test")
    payload = json.loads(formatter.format(_record(table="zoos", migration_direction="up")))

    assert payload["message"] == "Creating table zoos"
    assert payload["db.table"] == "zoos"
    assert payload["event.action"] == "up"
    assert payload["service.name"] == "zoo-schema-test"
    assert payload["event.dataset"] == "zoo-schema-test.migrations"
    assert payload["log.level"] == "INFO"
    assert "@timestamp" in payload
    assert "table" not in payload
    assert "migration_direction" not in payload


def test_missing_extras_are_omitted():
    payload = json.loads(ECSJsonFormatter().format(_record(table=None)))
    assert "db.table" not in payload


def test_exception_stack_is_included():
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord(
            "zoo_schema.cli", logging.ERROR, __file__, 1, "failed", (), None
        )
        record.exc_info = sys.exc_info()

    payload = json.loads(ECSJsonFormatter().format(record))
    assert "ValueError: boom" in payload["error.stack"]
