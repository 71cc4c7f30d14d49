"""Image Limits — pure eligibility rules for attaching images to owners.

Invariants:
    - An owner is eligible while uploaded_image_amount < MAX_UPLOADED_IMAGES
    - Owners already associated with the asset are never eligible
    - Functions are PURE: they partition, they never raise for ineligible owners
"""

from catalog_media.core.domain_types import MAX_UPLOADED_IMAGES, OwnerId
from catalog_media.core.repository_protocols import ImageOwner


def has_capacity(owner: ImageOwner, limit: int = MAX_UPLOADED_IMAGES) -> bool:
    return owner.uploaded_image_amount < limit


def eligible_for_upload(
    owners: list[ImageOwner],
    already_associated: set[OwnerId] | frozenset[OwnerId] = frozenset(),
    limit: int = MAX_UPLOADED_IMAGES,
) -> list[ImageOwner]:
    """Owners that can take one more image, preserving input order."""
    return [
        o for o in owners
        if has_capacity(o, limit) and o.id not in already_associated
    ]


def skipped_owner_ids(
    owners: list[ImageOwner], eligible: list[ImageOwner],
) -> list[OwnerId]:
    """Ids excluded by the eligibility filter (for logging)."""
    kept = {o.id for o in eligible}
    return [o.id for o in owners if o.id not in kept]
