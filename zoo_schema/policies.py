"""Referential actions attached to foreign keys."""

from __future__ import annotations

import logging
from enum import Enum

logger = logging.getLogger("zoo_schema.policies")


class ReferentialAction(str, Enum):
    """What the database does to child rows when a parent key changes."""

    CASCADE = "CASCADE"
    RESTRICT = "RESTRICT"
    SET_NULL = "SET NULL"
    NO_ACTION = "NO ACTION"

    def for_dialect(self, dialect_name: str, event: str = "delete") -> str | None:
        """Return the keyword ``dialect_name`` understands, or ``None`` to omit it.

        ``event`` is either ``"delete"`` or ``"update"``.  Omitting the clause
        leaves the engine default in place, which is ``NO ACTION`` everywhere
        this package targets.
        """

        if event not in {"delete", "update"}:
            raise ValueError(f"Unknown referential event: {event!r}")

        if dialect_name == "mssql" and self is ReferentialAction.RESTRICT:
            return ReferentialAction.NO_ACTION.value
        if dialect_name == "oracle":
            if event == "delete" and self in {
                ReferentialAction.CASCADE,
                ReferentialAction.SET_NULL,
            }:
                return self.value
            if self is not ReferentialAction.NO_ACTION:
                logger.warning(
                    "Oracle has no ON %s %s; the rule is omitted",
                    event.upper(),
                    self.value,
                    extra={"dialect": dialect_name},
                )
            return None
        return self.value
