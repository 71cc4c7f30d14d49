"""Image Associations — writes and lookups on one owner-kind join table.

Invariants:
    - The Image row is inserted with ON CONFLICT DO NOTHING, so concurrent writers
      attaching the same new asset to different owners never collide on its key
    - remove/remove_batch are keyed on the (owner_id, image_media_service_id) pair,
      so removing a pair that does not exist is a no-op
    - find_owner_ids only returns ids from the candidate set
"""

from typing import Sequence

from sqlalchemy import Table, delete, insert, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_media.core.validate_media import MediaAsset
from catalog_media.models.image import Image

UPSERT_BY_DIALECT = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class ImageAssociationRepository:
    """Association rows between one owner kind and images."""

    def __init__(self, table: Table, db: AsyncSession | None = None):
        self.table = table
        self._db = db

    def with_session(self, db: AsyncSession) -> "ImageAssociationRepository":
        return ImageAssociationRepository(self.table, db)

    @property
    def db(self) -> AsyncSession:
        if self._db is None:
            raise RuntimeError(f"{self.table.name} repository used without a session")
        return self._db

    async def _ensure_image(self, asset: MediaAsset) -> None:
        dialect = self.db.get_bind().dialect.name
        upsert = UPSERT_BY_DIALECT.get(dialect)
        if upsert is None:
            raise RuntimeError(f"No idempotent image insert for dialect {dialect}")
        await self.db.execute(
            upsert(Image)
            .values(
                media_service_id=asset.media_service_id,
                url=asset.url,
                secure_url=asset.secure_url,
                public_id=asset.public_id,
            )
            .on_conflict_do_nothing(index_elements=["media_service_id"]),
        )

    async def append(self, owner_id: str, asset: MediaAsset) -> None:
        await self.append_batch([owner_id], asset)

    async def append_batch(self, owner_ids: Sequence[str], asset: MediaAsset) -> None:
        if not owner_ids:
            return
        await self._ensure_image(asset)
        await self.db.execute(
            insert(self.table),
            [
                {"owner_id": owner_id, "image_media_service_id": asset.media_service_id}
                for owner_id in owner_ids
            ],
        )

    async def remove(self, owner_id: str, media_service_id: str) -> int:
        return await self.remove_batch([owner_id], media_service_id)

    async def remove_batch(
        self, owner_ids: Sequence[str], media_service_id: str,
    ) -> int:
        if not owner_ids:
            return 0
        result = await self.db.execute(
            delete(self.table).where(
                self.table.c.image_media_service_id == media_service_id,
                self.table.c.owner_id.in_(list(owner_ids)),
            ),
        )
        return result.rowcount

    async def find_owner_ids(
        self, media_service_id: str, owner_ids: Sequence[str],
    ) -> list[str]:
        if not owner_ids:
            return []
        result = await self.db.execute(
            select(self.table.c.owner_id)
            .where(
                self.table.c.image_media_service_id == media_service_id,
                self.table.c.owner_id.in_(list(owner_ids)),
            )
            .order_by(self.table.c.owner_id),
        )
        return list(result.scalars().all())

    async def purge_owner(self, owner_id: str) -> int:
        result = await self.db.execute(
            delete(self.table).where(self.table.c.owner_id == owner_id),
        )
        return result.rowcount
