"""Create zoos, species, animals and the zoo_animals bridge table"""
from __future__ import annotations

from alembic import op

from zoo_schema.migrator import SchemaMigrator

# revision identifiers, used by Alembic.
revision = "20200727_create_tables"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    SchemaMigrator().apply(op.get_bind())


def downgrade() -> None:
    SchemaMigrator().revert(op.get_bind())
