"""Domain Types — owner tags, media kinds, visibility scopes and batch field selectors.

Invariants:
    - Every OwnerType declares exactly one MediaKind in OWNER_MEDIA_KINDS
    - MAX_UPLOADED_IMAGES (5) is the single source of truth for the per-owner limit
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - str Enums: owner type tags arrive as path parameters and serialize without custom encoders
    - NewType over dataclass wrappers for identifiers: zero runtime cost
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

OwnerId = NewType("OwnerId", str)
MediaServiceId = NewType("MediaServiceId", str)


# ─── Limits ──────────────────────────────────────────────────────

MAX_UPLOADED_IMAGES: int = 5


# ─── Enums ───────────────────────────────────────────────────────

class MediaKind(str, Enum):
    """Kind of media an owner can hold."""
    IMAGE = "image"
    VIDEO = "video"


class OwnerType(str, Enum):
    """Catalog entity kinds capable of holding media."""
    COURSE = "course"
    SEMINAR = "seminar"
    TRAINING_SESSION = "training_session"
    PHYSICAL_GOOD = "physical_good"
    COURSE_PART = "course_part"


OWNER_MEDIA_KINDS: dict[OwnerType, MediaKind] = {
    OwnerType.COURSE: MediaKind.IMAGE,
    OwnerType.SEMINAR: MediaKind.IMAGE,
    OwnerType.TRAINING_SESSION: MediaKind.IMAGE,
    OwnerType.PHYSICAL_GOOD: MediaKind.IMAGE,
    OwnerType.COURSE_PART: MediaKind.VIDEO,
}


def owner_types_for(kind: MediaKind) -> frozenset[OwnerType]:
    """All owner types that hold the given media kind."""
    return frozenset(t for t, k in OWNER_MEDIA_KINDS.items() if k is kind)


class VisibilityScope(str, Enum):
    """Read scopes derived from (published, deleted_at).

    PUBLIC, UNPUBLISHED and DELETED are disjoint. WITH_UNPUBLISHED is the
    union of PUBLIC and UNPUBLISHED, used by media operations.
    """
    PUBLIC = "public"
    UNPUBLISHED = "unpublished"
    DELETED = "deleted"
    WITH_UNPUBLISHED = "with_unpublished"


class BatchField(str, Enum):
    """Columns a batch field update can target."""
    NAME = "name"
    SHORT_DESCRIPTION = "short_description"
    UPLOADED_IMAGE_AMOUNT = "uploaded_image_amount"
