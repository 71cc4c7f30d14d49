"""Image Service — validated entry point for the four image operations.

Invariants:
    - Order of checks: payload/identifiers → owner-type routing → storage
      (InvalidArgument wins over UnknownOwnerType, which wins over any storage error)
    - Batch owner id lists are de-duplicated before reaching the managers
"""

from typing import Sequence

from catalog_media.core.domain_types import MediaServiceId, OwnerId, OwnerType
from catalog_media.core.validate_media import (
    MediaAsset, validate_asset, validate_uuid, validate_uuid_list,
)
from catalog_media.infrastructure.database import DatabaseSessionManager
from catalog_media.services.image_batch import BatchImageManager
from catalog_media.services.image_single import SingleImageManager
from catalog_media.services.owner_registry import OwnerRegistry


class ImageService:
    """AddImage / DeleteImage / AddImageBatch / DeleteImageBatch."""

    def __init__(self, db_manager: DatabaseSessionManager, registry: OwnerRegistry):
        self._registry = registry
        self._single = SingleImageManager(db_manager)
        self._batch = BatchImageManager(db_manager)

    async def add_image(
        self, owner_type: OwnerType | str, owner_id: str, asset: MediaAsset,
    ) -> None:
        owner_id = OwnerId(validate_uuid(owner_id, "owner_id"))
        asset = validate_asset(asset)
        adapter = self._registry.image_adapter(owner_type)
        await self._single.add(adapter, owner_id, asset)

    async def delete_image(
        self, owner_type: OwnerType | str, owner_id: str, media_service_id: str,
    ) -> None:
        owner_id = OwnerId(validate_uuid(owner_id, "owner_id"))
        media_service_id = MediaServiceId(
            validate_uuid(media_service_id, "media_service_id"),
        )
        adapter = self._registry.image_adapter(owner_type)
        await self._single.remove(adapter, owner_id, media_service_id)

    async def add_image_batch(
        self, owner_type: OwnerType | str, owner_ids: Sequence[str], asset: MediaAsset,
    ) -> int:
        owner_ids = [OwnerId(i) for i in validate_uuid_list(owner_ids, "owner_ids")]
        asset = validate_asset(asset)
        adapter = self._registry.image_adapter(owner_type)
        return await self._batch.add(adapter, owner_ids, asset)

    async def delete_image_batch(
        self, owner_type: OwnerType | str, owner_ids: Sequence[str], media_service_id: str,
    ) -> int:
        owner_ids = [OwnerId(i) for i in validate_uuid_list(owner_ids, "owner_ids")]
        media_service_id = MediaServiceId(
            validate_uuid(media_service_id, "media_service_id"),
        )
        adapter = self._registry.image_adapter(owner_type)
        return await self._batch.remove(adapter, owner_ids, media_service_id)
