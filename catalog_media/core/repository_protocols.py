"""Boundary Protocols — capability contracts between the media managers and entity storage.

Invariants:
    - Managers depend only on these Protocols, never on concrete entity repositories
    - Every mutating adapter method runs inside the session passed to with_session();
      adapters never open, commit or roll back a transaction themselves
    - list_with_unpublished silently drops unknown ids

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy between owner kinds
    - with_session(db) returns a bound copy instead of mutating the registry instance,
      so the startup registry stays stateless and safe for concurrent callers
"""

from typing import Protocol, Sequence

from catalog_media.core.field_updates import FieldUpdate
from catalog_media.core.domain_types import (
    BatchField, MediaServiceId, OwnerId, OwnerType,
)
from catalog_media.core.validate_media import MediaAsset


class ImageOwner(Protocol):
    """Any entity that can hold images."""
    id: OwnerId
    uploaded_image_amount: int


class VideoOwner(Protocol):
    """Any entity that can reference one video."""
    id: OwnerId
    video_id: MediaServiceId | None


class ImageOwnerAdapter(Protocol):
    """Uniform image capability interface, one instance per image owner kind."""
    owner_type: OwnerType

    def with_session(self, db: object) -> "ImageOwnerAdapter": ...
    async def fetch_with_unpublished(
        self, owner_id: OwnerId, lock: bool = False,
    ) -> ImageOwner | None: ...
    async def list_with_unpublished(
        self, owner_ids: Sequence[OwnerId], lock: bool = False,
    ) -> list[ImageOwner]: ...
    async def append_image(self, owner: ImageOwner, asset: MediaAsset) -> None: ...
    async def append_image_batch(
        self, owners: Sequence[ImageOwner], asset: MediaAsset,
    ) -> None: ...
    async def remove_image(
        self, owner: ImageOwner, media_service_id: MediaServiceId,
    ) -> int: ...
    async def remove_image_batch(
        self, owners: Sequence[ImageOwner], media_service_id: MediaServiceId,
    ) -> int: ...
    async def find_owner_ids_by_image(
        self, media_service_id: MediaServiceId, owner_ids: Sequence[OwnerId],
    ) -> list[OwnerId]: ...
    async def decrement_image_count(self, owner_ids: Sequence[OwnerId]) -> int: ...
    async def batch_update(
        self, updates: Sequence[FieldUpdate], field: BatchField | str,
    ) -> int: ...


class VideoOwnerAdapter(Protocol):
    """Uniform video capability interface."""
    owner_type: OwnerType

    def with_session(self, db: object) -> "VideoOwnerAdapter": ...
    async def fetch_with_unpublished(
        self, owner_id: OwnerId, lock: bool = False,
    ) -> VideoOwner | None: ...
    async def set_video_id(
        self, owner_id: OwnerId, video_id: MediaServiceId | None,
    ) -> int: ...
