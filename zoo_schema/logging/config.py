"""Public entry point for configuring logging."""

from __future__ import annotations

import logging
import logging.config
from typing import Any

from ..config import SERVICE_NAME, get_log_level, log_json_enabled


def configure_logging(level: str | None = None) -> None:
    """Configure structured logging for migration runs."""

    log_level = (level or get_log_level()).upper()
    formatter_name = "json" if log_json_enabled() else "plain"

    formatters: dict[str, dict[str, Any]] = {
        "json": {
            "()": "zoo_schema.logging.formatter.ECSJsonFormatter",
            "service_name": SERVICE_NAME,
        },
        "plain": {
            "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
        },
    }

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "level": log_level,
                "formatter": formatter_name,
                "stream": "ext://sys.stderr",
            }
        },
        "root": {
            "level": log_level,
            "handlers": ["stderr"],
        },
        "loggers": {
            "zoo_schema": {"level": log_level, "handlers": [], "propagate": True},
            "alembic": {"level": "INFO", "handlers": [], "propagate": True},
            "sqlalchemy.engine": {"level": "WARNING", "handlers": [], "propagate": True},
        },
    }

    logging.config.dictConfig(logging_config)
    logging.captureWarnings(True)
