"""Video Manager — attach or detach the single video referenced by a video owner.

Invariants:
    - A video owner references at most one video; attaching replaces the previous one
    - Attaching the video the owner already references is VideoAlreadyAttached
    - Detaching a video the owner does not reference is VideoNotFoundOnOwner
    - Every call runs in one transaction with the owner row locked
"""

import logging

from catalog_media.core.domain_types import MediaServiceId, OwnerId, OwnerType
from catalog_media.core.errors import (
    ErrorContext, OwnerNotFoundError, VideoAlreadyAttachedError,
    VideoNotFoundOnOwnerError,
)
from catalog_media.core.validate_media import validate_uuid
from catalog_media.infrastructure.database import DatabaseSessionManager
from catalog_media.services.owner_registry import OwnerRegistry

logger = logging.getLogger(__name__)


class VideoManager:
    """AddVideo / RemoveVideo."""

    def __init__(self, db_manager: DatabaseSessionManager, registry: OwnerRegistry):
        self._db_manager = db_manager
        self._registry = registry

    async def add_video(
        self, owner_type: OwnerType | str, owner_id: str, media_service_id: str,
    ) -> None:
        owner_id = OwnerId(validate_uuid(owner_id, "owner_id"))
        media_service_id = MediaServiceId(
            validate_uuid(media_service_id, "media_service_id"),
        )
        adapter = self._registry.video_adapter(owner_type)
        context = ErrorContext(
            owner_type=adapter.owner_type.value, owner_id=owner_id,
            media_service_id=media_service_id,
        )

        async with self._db_manager.transaction() as db:
            owners = adapter.with_session(db)
            owner = await owners.fetch_with_unpublished(owner_id, lock=True)
            if owner is None:
                raise OwnerNotFoundError(adapter.owner_type.value, owner_id)
            if owner.video_id == media_service_id:
                raise VideoAlreadyAttachedError(context)
            previous = owner.video_id
            await owners.set_video_id(owner_id, media_service_id)

        logger.info(
            f"Video attached to {adapter.owner_type.value} {owner_id}"
            + (f" (replaced {previous})" if previous else ""),
            extra={
                "owner_type": adapter.owner_type.value,
                "owner_id": owner_id,
                "media_service_id": media_service_id,
            },
        )

    async def remove_video(
        self, owner_type: OwnerType | str, owner_id: str, media_service_id: str,
    ) -> None:
        owner_id = OwnerId(validate_uuid(owner_id, "owner_id"))
        media_service_id = MediaServiceId(
            validate_uuid(media_service_id, "media_service_id"),
        )
        adapter = self._registry.video_adapter(owner_type)

        async with self._db_manager.transaction() as db:
            owners = adapter.with_session(db)
            owner = await owners.fetch_with_unpublished(owner_id, lock=True)
            if owner is None:
                raise OwnerNotFoundError(adapter.owner_type.value, owner_id)
            if owner.video_id != media_service_id:
                raise VideoNotFoundOnOwnerError(ErrorContext(
                    owner_type=adapter.owner_type.value, owner_id=owner_id,
                    media_service_id=media_service_id,
                ))
            await owners.set_video_id(owner_id, None)

        logger.info(
            f"Video detached from {adapter.owner_type.value} {owner_id}",
            extra={
                "owner_type": adapter.owner_type.value,
                "owner_id": owner_id,
                "media_service_id": media_service_id,
            },
        )
