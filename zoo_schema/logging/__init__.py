"""Logging helpers for the migration tooling."""

from .config import configure_logging
from .formatter import ECSJsonFormatter, FIELD_MAP

__all__ = [
    "configure_logging",
    "ECSJsonFormatter",
    "FIELD_MAP",
]
