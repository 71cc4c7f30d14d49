"""Catalog Repository — one parametrized data-access object for every catalog entity.

Invariants:
    - All reads go through visibility_clause; "with unpublished" excludes soft-deleted rows
    - list_with_unpublished_by_ids silently drops unknown ids and keeps the caller's order
    - set_published, soft_delete and set_video_id only match non-deleted rows;
      restore only matches deleted rows
    - batch_update writes one UPDATE ... SET col = CASE id ... END WHERE id IN (...)
    - decrement_image_count never takes a counter below zero
    - Mutations return affected row counts; callers decide what zero means

Design Decisions:
    - Bulk UPDATE/DELETE with synchronize_session=False: owner rows loaded earlier in
      the same session are never read back after a counter write
    - Column lookup through __table__.c instead of getattr: unknown columns fail loudly
"""

import logging
from datetime import datetime, timezone
from typing import Sequence

from sqlalchemy import case, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_media.core.domain_types import BatchField, VisibilityScope
from catalog_media.core.errors import UnknownBatchFieldError
from catalog_media.core.field_updates import (
    FieldUpdate, collect_field_values, resolve_batch_field,
)
from catalog_media.repositories.scoped_queries import scoped_select, visibility_clause

logger = logging.getLogger(__name__)


class CatalogRepository:
    """Data access for one catalog entity model."""

    def __init__(self, model, db: AsyncSession | None = None):
        self.model = model
        self._db = db

    def with_session(self, db: AsyncSession) -> "CatalogRepository":
        return CatalogRepository(self.model, db)

    @property
    def db(self) -> AsyncSession:
        if self._db is None:
            raise RuntimeError(
                f"{self.model.__name__} repository used without a session",
            )
        return self._db

    def _column(self, name: str):
        column = self.model.__table__.c.get(name)
        if column is None:
            raise ValueError(f"{self.model.__tablename__} has no column {name!r}")
        return column

    # ─── Reads ───────────────────────────────────────────────────

    async def get(
        self, entity_id: str, scope: VisibilityScope, lock: bool = False,
    ):
        query = scoped_select(self.model, scope).where(self.model.id == entity_id)
        if lock:
            query = query.with_for_update()
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def get_any(self, entity_id: str, lock: bool = False):
        """Row in any scope; the caller derives its visibility."""
        query = select(self.model).where(self.model.id == entity_id)
        if lock:
            query = query.with_for_update()
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def list_in_scope(
        self,
        scope: VisibilityScope,
        limit: int = 20,
        offset: int = 0,
        filters: dict[str, object] | None = None,
    ) -> list:
        query = scoped_select(self.model, scope)
        for name, value in (filters or {}).items():
            query = query.where(self._column(name) == value)
        query = (
            query.order_by(self.model.created_at.desc(), self.model.id)
            .limit(limit).offset(offset)
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def count(
        self, scope: VisibilityScope, filters: dict[str, object] | None = None,
    ) -> int:
        query = (
            select(func.count())
            .select_from(self.model)
            .where(visibility_clause(self.model, scope))
        )
        for name, value in (filters or {}).items():
            query = query.where(self._column(name) == value)
        result = await self.db.execute(query)
        return result.scalar_one()

    async def list_with_unpublished_by_ids(
        self, entity_ids: Sequence[str], lock: bool = False,
    ) -> list:
        """Non-deleted rows among entity_ids, in the order the ids were given."""
        if not entity_ids:
            return []
        query = (
            scoped_select(self.model, VisibilityScope.WITH_UNPUBLISHED)
            .where(self.model.id.in_(list(entity_ids)))
            .order_by(self.model.id)
        )
        if lock:
            query = query.with_for_update()
        result = await self.db.execute(query)
        by_id = {row.id: row for row in result.scalars().all()}
        return [by_id[i] for i in dict.fromkeys(entity_ids) if i in by_id]

    # ─── Visibility Mutations ────────────────────────────────────

    async def set_published(self, entity_id: str, published: bool) -> int:
        return await self._update_one(
            entity_id, VisibilityScope.WITH_UNPUBLISHED, published=published,
        )

    async def soft_delete(self, entity_id: str) -> int:
        return await self._update_one(
            entity_id, VisibilityScope.WITH_UNPUBLISHED,
            deleted_at=datetime.now(timezone.utc),
        )

    async def restore(self, entity_id: str) -> int:
        return await self._update_one(
            entity_id, VisibilityScope.DELETED, deleted_at=None,
        )

    async def delete_permanent(self, entity_id: str) -> int:
        result = await self.db.execute(
            delete(self.model)
            .where(self.model.id == entity_id)
            .execution_options(synchronize_session=False),
        )
        return result.rowcount

    async def set_video_id(self, entity_id: str, video_id: str | None) -> int:
        self._column("video_id")
        return await self._update_one(
            entity_id, VisibilityScope.WITH_UNPUBLISHED, video_id=video_id,
        )

    async def _update_one(
        self, entity_id: str, scope: VisibilityScope, **values,
    ) -> int:
        result = await self.db.execute(
            update(self.model)
            .where(self.model.id == entity_id, visibility_clause(self.model, scope))
            .values(**values)
            .execution_options(synchronize_session=False),
        )
        return result.rowcount

    # ─── Counter / Batch Field Writes ────────────────────────────

    async def batch_update(
        self, updates: Sequence[FieldUpdate], field: BatchField | str,
    ) -> int:
        """Write each owner's own value for one field in a single statement."""
        selected = resolve_batch_field(field)
        values = collect_field_values(list(updates), selected)
        if not values:
            return 0
        column = self.model.__table__.c.get(selected.value)
        if column is None:
            raise UnknownBatchFieldError(selected.value)
        result = await self.db.execute(
            update(self.model)
            .where(self.model.id.in_(list(values)))
            .values({column.name: case(values, value=self.model.id)})
            .execution_options(synchronize_session=False),
        )
        logger.debug(
            f"Batch update of {selected.value} on {result.rowcount} "
            f"{self.model.__tablename__} rows",
        )
        return result.rowcount

    async def decrement_image_count(self, entity_ids: Sequence[str]) -> int:
        if not entity_ids:
            return 0
        column = self._column(BatchField.UPLOADED_IMAGE_AMOUNT.value)
        result = await self.db.execute(
            update(self.model)
            .where(self.model.id.in_(list(entity_ids)), column > 0)
            .values({column.name: column - 1})
            .execution_options(synchronize_session=False),
        )
        return result.rowcount
