"""Single Image Manager — add or remove one image on one owner inside one transaction.

Invariants:
    - The owner row is locked (SELECT ... FOR UPDATE) before the limit check, so the
      check and the counter write cannot interleave with another add on the same owner
    - On success the association row and uploaded_image_amount change together;
      on any error nothing is written
    - The counter increment goes through batch_update on a one-element set
"""

import logging

from catalog_media.core.domain_types import (
    BatchField, MAX_UPLOADED_IMAGES, MediaServiceId, OwnerId,
)
from catalog_media.core.errors import (
    ErrorContext, ImageAlreadyAttachedError, ImageLimitExceededError,
    ImageNotFoundOnOwnerError, OwnerNotFoundError,
)
from catalog_media.core.field_updates import counter_updates
from catalog_media.core.image_limits import has_capacity
from catalog_media.core.repository_protocols import ImageOwnerAdapter
from catalog_media.core.validate_media import MediaAsset
from catalog_media.infrastructure.database import DatabaseSessionManager

logger = logging.getLogger(__name__)


class SingleImageManager:
    """Transactional add/remove of one owner-image association."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db_manager = db_manager

    async def add(
        self, adapter: ImageOwnerAdapter, owner_id: OwnerId, asset: MediaAsset,
    ) -> None:
        context = ErrorContext(
            owner_type=adapter.owner_type.value, owner_id=owner_id,
            media_service_id=asset.media_service_id,
        )
        async with self._db_manager.transaction() as db:
            owners = adapter.with_session(db)
            owner = await owners.fetch_with_unpublished(owner_id, lock=True)
            if owner is None:
                raise OwnerNotFoundError(adapter.owner_type.value, owner_id)
            if not has_capacity(owner):
                raise ImageLimitExceededError(MAX_UPLOADED_IMAGES, context)
            if await owners.find_owner_ids_by_image(asset.media_service_id, [owner.id]):
                raise ImageAlreadyAttachedError(context)

            await owners.append_image(owner, asset)
            await owners.batch_update(
                counter_updates({owner.id: owner.uploaded_image_amount}),
                BatchField.UPLOADED_IMAGE_AMOUNT,
            )

        logger.info(
            f"Image attached to {adapter.owner_type.value} {owner_id}",
            extra={
                "owner_type": adapter.owner_type.value,
                "owner_id": owner_id,
                "media_service_id": asset.media_service_id,
            },
        )

    async def remove(
        self, adapter: ImageOwnerAdapter, owner_id: OwnerId,
        media_service_id: MediaServiceId,
    ) -> None:
        async with self._db_manager.transaction() as db:
            owners = adapter.with_session(db)
            owner = await owners.fetch_with_unpublished(owner_id, lock=True)
            if owner is None:
                raise OwnerNotFoundError(adapter.owner_type.value, owner_id)
            removed = await owners.remove_image(owner, media_service_id)
            if not removed:
                raise ImageNotFoundOnOwnerError(ErrorContext(
                    owner_type=adapter.owner_type.value, owner_id=owner_id,
                    media_service_id=media_service_id,
                ))
            await owners.decrement_image_count([owner.id])

        logger.info(
            f"Image detached from {adapter.owner_type.value} {owner_id}",
            extra={
                "owner_type": adapter.owner_type.value,
                "owner_id": owner_id,
                "media_service_id": media_service_id,
            },
        )
