"""SQLAlchemy Declarative Base — shared base class for all catalog ORM models.

Invariants:
    - All models and association tables register on Base.metadata
    - Base is the single source of truth for table metadata (Alembic reads it)

Design Decisions:
    - Separate file for Base: avoids circular imports between models
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all catalog media ORM models."""
    pass
