"""Database Layer — declarative base shared by the ORM models and Alembic."""
