"""Run the zoo schema migration from the command line.

    python -m zoo_schema.cli up
    python -m zoo_schema.cli down
    python -m zoo_schema.cli status --database-url sqlite:///zoos.db
"""

from __future__ import annotations

import argparse
import logging
import sys

from .config import get_database_url
from .database import make_engine
from .errors import SchemaError
from .logging import configure_logging
from .migrator import SchemaMigrator

logger = logging.getLogger("zoo_schema.cli")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="zoo-schema",
        description="Create or drop the zoos, species, animals and zoo_animals tables.",
    )
    ap.add_argument(
        "command",
        choices=("up", "down", "status"),
        help="up creates the tables, down drops them, status reports what exists",
    )
    ap.add_argument(
        "--database-url",
        help="SQLAlchemy URL (defaults to the DATABASE_URL environment variable)",
    )
    ap.add_argument("--log-level", help="Override LOG_LEVEL for this run")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    url = args.database_url or get_database_url()
    engine = make_engine(url)
    migrator = SchemaMigrator()
    try:
        if args.command == "status":
            with engine.connect() as conn:
                state = migrator.state(conn)
            logger.info("Schema is %s", state.value, extra={"schema_state": state.value})
            print(state.value)
            return 0

        with engine.begin() as conn:
            if args.command == "up":
                migrator.apply(conn)
            else:
                migrator.revert(conn)
    except SchemaError as exc:
        logger.error(
            "Migration %s failed: %s",
            args.command,
            exc,
            extra={
                "migration_direction": args.command,
                "table": exc.table,
                "error_type": type(exc).__name__,
            },
        )
        return 1
    finally:
        engine.dispose()

    logger.info(
        "Migration %s finished",
        args.command,
        extra={"migration_direction": args.command, "dialect": engine.dialect.name},
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
