"""Owner Capability Adapters — uniform media capabilities over the entity repositories.

Invariants:
    - One adapter instance per owner kind, configured with that kind's entity
      repository (and join table for images)
    - with_session(db) returns a bound copy; the configured instance never holds a session
    - Adapters never open, commit or roll back transactions

Design Decisions:
    - One generic class configured per kind instead of one hand-written class per entity:
      the owner kinds differ only in model and join table
"""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from catalog_media.core.domain_types import BatchField, OwnerType, VisibilityScope
from catalog_media.core.field_updates import FieldUpdate
from catalog_media.core.repository_protocols import ImageOwner, VideoOwner
from catalog_media.core.validate_media import MediaAsset
from catalog_media.repositories.catalog_repository import CatalogRepository
from catalog_media.repositories.image_associations import ImageAssociationRepository


class CatalogImageOwnerAdapter:
    """ImageOwnerAdapter backed by a CatalogRepository and one join table."""

    def __init__(
        self,
        owner_type: OwnerType,
        entities: CatalogRepository,
        associations: ImageAssociationRepository,
    ):
        self.owner_type = owner_type
        self._entities = entities
        self._associations = associations

    def with_session(self, db: AsyncSession) -> "CatalogImageOwnerAdapter":
        return CatalogImageOwnerAdapter(
            self.owner_type,
            self._entities.with_session(db),
            self._associations.with_session(db),
        )

    async def fetch_with_unpublished(
        self, owner_id: str, lock: bool = False,
    ) -> ImageOwner | None:
        return await self._entities.get(
            owner_id, VisibilityScope.WITH_UNPUBLISHED, lock=lock,
        )

    async def list_with_unpublished(
        self, owner_ids: Sequence[str], lock: bool = False,
    ) -> list[ImageOwner]:
        return await self._entities.list_with_unpublished_by_ids(owner_ids, lock=lock)

    async def append_image(self, owner: ImageOwner, asset: MediaAsset) -> None:
        await self._associations.append(owner.id, asset)

    async def append_image_batch(
        self, owners: Sequence[ImageOwner], asset: MediaAsset,
    ) -> None:
        await self._associations.append_batch([o.id for o in owners], asset)

    async def remove_image(self, owner: ImageOwner, media_service_id: str) -> int:
        return await self._associations.remove(owner.id, media_service_id)

    async def remove_image_batch(
        self, owners: Sequence[ImageOwner], media_service_id: str,
    ) -> int:
        return await self._associations.remove_batch(
            [o.id for o in owners], media_service_id,
        )

    async def find_owner_ids_by_image(
        self, media_service_id: str, owner_ids: Sequence[str],
    ) -> list[str]:
        return await self._associations.find_owner_ids(media_service_id, owner_ids)

    async def decrement_image_count(self, owner_ids: Sequence[str]) -> int:
        return await self._entities.decrement_image_count(owner_ids)

    async def batch_update(
        self, updates: Sequence[FieldUpdate], field: BatchField | str,
    ) -> int:
        return await self._entities.batch_update(updates, field)


class CatalogVideoOwnerAdapter:
    """VideoOwnerAdapter backed by an entity with a single video_id column."""

    def __init__(self, owner_type: OwnerType, entities: CatalogRepository):
        self.owner_type = owner_type
        self._entities = entities

    def with_session(self, db: AsyncSession) -> "CatalogVideoOwnerAdapter":
        return CatalogVideoOwnerAdapter(self.owner_type, self._entities.with_session(db))

    async def fetch_with_unpublished(
        self, owner_id: str, lock: bool = False,
    ) -> VideoOwner | None:
        return await self._entities.get(
            owner_id, VisibilityScope.WITH_UNPUBLISHED, lock=lock,
        )

    async def set_video_id(self, owner_id: str, video_id: str | None) -> int:
        return await self._entities.set_video_id(owner_id, video_id)
