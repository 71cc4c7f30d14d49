"""Batch Image Manager — attach or detach one image across many owners of one kind.

Invariants:
    - Unknown or soft-deleted ids are dropped; an empty remainder is OwnersNotFound
    - Add: owners at the limit or already holding the image are excluded, not errors;
      an empty eligible set returns 0 without opening a write transaction
    - Add: eligibility is re-checked on row-locked owners inside the write transaction,
      and each owner's counter is set to its own locked value + 1
    - Remove: the association delete covers every listed owner, the counter decrement
      only the owners that actually held the image
    - All writes of one call share one transaction (all-or-nothing)

Design Decisions:
    - Add reads twice: an unlocked read fails fast on OwnersNotFound and skips the
      write transaction when nothing is eligible; the locked re-read is authoritative
"""

import logging
from typing import Sequence

from catalog_media.core.domain_types import BatchField, MediaServiceId, OwnerId
from catalog_media.core.errors import (
    AssociationsNotFoundError, ErrorContext, OwnersNotFoundError,
)
from catalog_media.core.field_updates import counter_updates
from catalog_media.core.image_limits import eligible_for_upload, skipped_owner_ids
from catalog_media.core.repository_protocols import ImageOwner, ImageOwnerAdapter
from catalog_media.core.validate_media import MediaAsset
from catalog_media.infrastructure.database import DatabaseSessionManager

logger = logging.getLogger(__name__)


class BatchImageManager:
    """Transactional add/remove of one image over a set of owners."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db_manager = db_manager

    async def _eligible_owners(
        self, adapter: ImageOwnerAdapter, owners: list[ImageOwner],
        media_service_id: MediaServiceId,
    ) -> list[ImageOwner]:
        already = set(await adapter.find_owner_ids_by_image(
            media_service_id, [o.id for o in owners],
        ))
        eligible = eligible_for_upload(owners, already)
        skipped = skipped_owner_ids(owners, eligible)
        if skipped:
            logger.debug(
                f"Skipping {len(skipped)} {adapter.owner_type.value} owners "
                f"(at limit or already attached): {', '.join(skipped)}",
                extra={
                    "owner_type": adapter.owner_type.value,
                    "media_service_id": media_service_id,
                },
            )
        return eligible

    async def add(
        self, adapter: ImageOwnerAdapter, owner_ids: Sequence[OwnerId], asset: MediaAsset,
    ) -> int:
        """Attach asset to every eligible owner. Returns owners affected."""
        async with self._db_manager.session() as db:
            reader = adapter.with_session(db)
            listed = await reader.list_with_unpublished(owner_ids)
            if not listed:
                raise OwnersNotFoundError(adapter.owner_type.value, len(owner_ids))
            eligible = await self._eligible_owners(
                reader, listed, asset.media_service_id,
            )
        if not eligible:
            return 0

        async with self._db_manager.transaction() as db:
            owners = adapter.with_session(db)
            locked = await owners.list_with_unpublished(
                [o.id for o in eligible], lock=True,
            )
            eligible = await self._eligible_owners(
                owners, locked, asset.media_service_id,
            )
            if eligible:
                await owners.append_image_batch(eligible, asset)
                await owners.batch_update(
                    counter_updates({o.id: o.uploaded_image_amount for o in eligible}),
                    BatchField.UPLOADED_IMAGE_AMOUNT,
                )

        logger.info(
            f"Image attached to {len(eligible)} {adapter.owner_type.value} owners",
            extra={
                "owner_type": adapter.owner_type.value,
                "media_service_id": asset.media_service_id,
                "owners_affected": len(eligible),
            },
        )
        return len(eligible)

    async def remove(
        self, adapter: ImageOwnerAdapter, owner_ids: Sequence[OwnerId],
        media_service_id: MediaServiceId,
    ) -> int:
        """Detach the image from every listed owner. Returns owners that held it."""
        async with self._db_manager.transaction() as db:
            owners = adapter.with_session(db)
            listed = await owners.list_with_unpublished(owner_ids, lock=True)
            if not listed:
                raise OwnersNotFoundError(adapter.owner_type.value, len(owner_ids))
            associated = await owners.find_owner_ids_by_image(
                media_service_id, [o.id for o in listed],
            )
            if not associated:
                raise AssociationsNotFoundError(ErrorContext(
                    owner_type=adapter.owner_type.value,
                    media_service_id=media_service_id,
                ))
            await owners.remove_image_batch(listed, media_service_id)
            await owners.decrement_image_count(associated)

        logger.info(
            f"Image detached from {len(associated)} {adapter.owner_type.value} owners",
            extra={
                "owner_type": adapter.owner_type.value,
                "media_service_id": media_service_id,
                "owners_affected": len(associated),
            },
        )
        return len(associated)
