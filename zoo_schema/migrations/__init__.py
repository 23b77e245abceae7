"""Alembic environment and revisions for the zoo schema."""
