"""Engine-neutral declarations of the zoo tables."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Literal

from .errors import MissingDependencyError
from .policies import ReferentialAction

ColumnKind = Literal["integer", "string"]


@dataclass(frozen=True)
class ColumnDef:
    name: str
    kind: ColumnKind
    length: int | None = None
    nullable: bool = False
    unique: bool = False
    unsigned: bool = False


@dataclass(frozen=True)
class ForeignKeyDef:
    column: str
    ref_table: str
    ref_column: str = "id"
    on_delete: ReferentialAction = ReferentialAction.RESTRICT
    on_update: ReferentialAction = ReferentialAction.RESTRICT


@dataclass(frozen=True)
class TableDef:
    """A table, its primary key and the foreign keys it declares.

    A single-column integer primary key auto-increments.  Bridge tables list
    both foreign-key columns in ``primary_key`` so the pair is the identity.
    """

    name: str
    columns: tuple[ColumnDef, ...]
    primary_key: tuple[str, ...] = ("id",)
    foreign_keys: tuple[ForeignKeyDef, ...] = field(default_factory=tuple)

    @property
    def dependencies(self) -> tuple[str, ...]:
        seen: list[str] = []
        for fk in self.foreign_keys:
            if fk.ref_table != self.name and fk.ref_table not in seen:
                seen.append(fk.ref_table)
        return tuple(seen)

    def column(self, name: str) -> ColumnDef:
        for col in self.columns:
            if col.name == name:
                return col
        raise KeyError(f"{self.name} has no column {name!r}")


def _id() -> ColumnDef:
    return ColumnDef("id", "integer", unsigned=True)


def _name(column: str, *, unique: bool = False) -> ColumnDef:
    return ColumnDef(column, "string", length=255, unique=unique)


def _ref(column: str) -> ColumnDef:
    return ColumnDef(column, "integer", unsigned=True)


def _cascade(column: str, ref_table: str) -> ForeignKeyDef:
    return ForeignKeyDef(
        column,
        ref_table,
        on_delete=ReferentialAction.CASCADE,
        on_update=ReferentialAction.CASCADE,
    )


ZOOS = TableDef(
    "zoos",
    (_id(), _name("zoo_name"), _name("address", unique=True)),
)

SPECIES = TableDef(
    "species",
    (_id(), _name("species_name", unique=True)),
)

ANIMALS = TableDef(
    "animals",
    (_id(), _name("animal_name"), _ref("species_id")),
    foreign_keys=(_cascade("species_id", "species"),),
)

# Residency history: one row per (zoo, animal) pair, however many stays.
ZOO_ANIMALS = TableDef(
    "zoo_animals",
    (_ref("zoo_id"), _ref("animal_id")),
    primary_key=("zoo_id", "animal_id"),
    foreign_keys=(_cascade("zoo_id", "zoos"), _cascade("animal_id", "animals")),
)


def dependency_order(
    tables: Sequence[TableDef], *, external: Iterable[str] = ()
) -> tuple[TableDef, ...]:
    """Return ``tables`` with every parent ahead of its children.

    Declaration order is preserved wherever dependencies allow it.  Tables
    named in ``external`` are assumed to exist already.
    """

    known = {table.name for table in tables}
    outside = set(external)
    for table in tables:
        for dependency in table.dependencies:
            if dependency not in known and dependency not in outside:
                raise MissingDependencyError(
                    f"{table.name} references unknown table {dependency}",
                    table=table.name,
                )

    ordered: list[TableDef] = []
    placed: set[str] = set()
    pending = list(tables)
    while pending:
        for index, table in enumerate(pending):
            if all(
                dep in placed or dep not in known for dep in table.dependencies
            ):
                ordered.append(table)
                placed.add(table.name)
                del pending[index]
                break
        else:
            names = ", ".join(table.name for table in pending)
            raise MissingDependencyError(
                f"Circular foreign-key references between: {names}",
                table=pending[0].name,
            )
    return tuple(ordered)


ZOO_TABLES: tuple[TableDef, ...] = dependency_order(
    (ZOOS, SPECIES, ANIMALS, ZOO_ANIMALS)
)
