"""Owner Registry — static owner-type → adapter routing, built once at startup.

Invariants:
    - The image registry covers exactly owner_types_for(IMAGE); the video registry
      exactly owner_types_for(VIDEO). A mismatch fails startup with RuntimeError
    - Unknown tags (or tags of the other media kind) raise UnknownOwnerTypeError
    - Resolution is a dict lookup, never getattr or string dispatch

Design Decisions:
    - get_owner_registry() is lru_cached and called from the FastAPI lifespan so a
      missing adapter surfaces at boot, not on the first request for that kind
"""

from functools import lru_cache
from typing import Mapping

from catalog_media.core.domain_types import MediaKind, OwnerType, owner_types_for
from catalog_media.core.errors import UnknownOwnerTypeError
from catalog_media.core.repository_protocols import ImageOwnerAdapter, VideoOwnerAdapter
from catalog_media.models import (
    Course, CoursePart, PhysicalGood, Seminar, TrainingSession,
    course_images, physical_good_images, seminar_images, training_session_images,
)
from catalog_media.repositories.catalog_repository import CatalogRepository
from catalog_media.repositories.image_associations import ImageAssociationRepository
from catalog_media.services.image_owner_adapters import (
    CatalogImageOwnerAdapter, CatalogVideoOwnerAdapter,
)


def _image_adapter(owner_type: OwnerType, model, table) -> CatalogImageOwnerAdapter:
    return CatalogImageOwnerAdapter(
        owner_type, CatalogRepository(model), ImageAssociationRepository(table),
    )


def build_image_adapters() -> dict[OwnerType, ImageOwnerAdapter]:
    return {
        OwnerType.COURSE: _image_adapter(OwnerType.COURSE, Course, course_images),
        OwnerType.SEMINAR: _image_adapter(OwnerType.SEMINAR, Seminar, seminar_images),
        OwnerType.TRAINING_SESSION: _image_adapter(
            OwnerType.TRAINING_SESSION, TrainingSession, training_session_images,
        ),
        OwnerType.PHYSICAL_GOOD: _image_adapter(
            OwnerType.PHYSICAL_GOOD, PhysicalGood, physical_good_images,
        ),
    }


def build_video_adapters() -> dict[OwnerType, VideoOwnerAdapter]:
    return {
        OwnerType.COURSE_PART: CatalogVideoOwnerAdapter(
            OwnerType.COURSE_PART, CatalogRepository(CoursePart),
        ),
    }


def _check_exhaustive(adapters: Mapping[OwnerType, object], kind: MediaKind) -> None:
    expected = owner_types_for(kind)
    registered = frozenset(adapters)
    if registered != expected:
        missing = sorted(t.value for t in expected - registered)
        extra = sorted(t.value for t in registered - expected)
        raise RuntimeError(
            f"{kind.value} owner registry mismatch: missing={missing} extra={extra}",
        )


class OwnerRegistry:
    """Resolves owner-type tags to their image or video adapter."""

    def __init__(
        self,
        image_adapters: Mapping[OwnerType, ImageOwnerAdapter],
        video_adapters: Mapping[OwnerType, VideoOwnerAdapter],
    ):
        _check_exhaustive(image_adapters, MediaKind.IMAGE)
        _check_exhaustive(video_adapters, MediaKind.VIDEO)
        self._image = dict(image_adapters)
        self._video = dict(video_adapters)

    def image_adapter(self, owner_type: OwnerType | str) -> ImageOwnerAdapter:
        adapter = self._image.get(_parse_owner_type(owner_type, MediaKind.IMAGE))
        if adapter is None:
            raise UnknownOwnerTypeError(_tag(owner_type), MediaKind.IMAGE.value)
        return adapter

    def video_adapter(self, owner_type: OwnerType | str) -> VideoOwnerAdapter:
        adapter = self._video.get(_parse_owner_type(owner_type, MediaKind.VIDEO))
        if adapter is None:
            raise UnknownOwnerTypeError(_tag(owner_type), MediaKind.VIDEO.value)
        return adapter

    def owner_tags(self) -> dict[str, list[str]]:
        """Registered owner-type tags per media kind."""
        return {
            MediaKind.IMAGE.value: sorted(t.value for t in self._image),
            MediaKind.VIDEO.value: sorted(t.value for t in self._video),
        }


def _tag(owner_type: OwnerType | str) -> str:
    return owner_type.value if isinstance(owner_type, OwnerType) else owner_type


def _parse_owner_type(owner_type: OwnerType | str, kind: MediaKind) -> OwnerType:
    if isinstance(owner_type, OwnerType):
        return owner_type
    try:
        return OwnerType(owner_type)
    except ValueError:
        raise UnknownOwnerTypeError(str(owner_type), kind.value) from None


@lru_cache
def get_owner_registry() -> OwnerRegistry:
    return OwnerRegistry(build_image_adapters(), build_video_adapters())
