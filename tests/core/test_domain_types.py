"""Domain Types — verifies owner tags, media kinds and selector enums.

Tests:
    - Every owner type declares exactly one media kind
    - Image owners and video owners partition the owner types
    - Enums carry the wire values used in paths and batch selectors
"""

from catalog_media.core.domain_types import (
    BatchField, MAX_UPLOADED_IMAGES, MediaKind, OWNER_MEDIA_KINDS,
    OwnerId, OwnerType, VisibilityScope, owner_types_for,
)


def test_identity_types_wrap_str():
    assert OwnerId("abc") == "abc"


def test_image_limit_is_five():
    assert MAX_UPLOADED_IMAGES == 5


def test_every_owner_type_declares_a_media_kind():
    assert set(OWNER_MEDIA_KINDS) == set(OwnerType)


def test_image_owner_types():
    assert owner_types_for(MediaKind.IMAGE) == {
        OwnerType.COURSE,
        OwnerType.SEMINAR,
        OwnerType.TRAINING_SESSION,
        OwnerType.PHYSICAL_GOOD,
    }


def test_video_owner_types():
    assert owner_types_for(MediaKind.VIDEO) == {OwnerType.COURSE_PART}


def test_media_kinds_partition_owner_types():
    images = owner_types_for(MediaKind.IMAGE)
    videos = owner_types_for(MediaKind.VIDEO)
    assert images.isdisjoint(videos)
    assert images | videos == set(OwnerType)


def test_owner_type_wire_values():
    assert OwnerType("training_session") is OwnerType.TRAINING_SESSION
    assert OwnerType("physical_good") is OwnerType.PHYSICAL_GOOD
    assert OwnerType("course_part") is OwnerType.COURSE_PART


def test_batch_field_values_match_columns():
    assert {f.value for f in BatchField} == {
        "name", "short_description", "uploaded_image_amount",
    }


def test_visibility_scope_has_four_members():
    assert len(VisibilityScope) == 4
