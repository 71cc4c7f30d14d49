"""Image Write Consistency — verifies concurrent adds and all-or-nothing writes.

Invariants:
    - Two adds attaching the same new asset to different owners both succeed
      and leave exactly one Image row
    - A storage failure inside the write stage surfaces as InternalError with no
      driver text, and leaves no association, no Image row and no counter change
"""

import asyncio

import pytest
from sqlalchemy.exc import OperationalError

from catalog_media.core.domain_types import OwnerType
from catalog_media.core.errors import InternalError
from catalog_media.core.validate_media import MediaAsset
from catalog_media.repositories.catalog_repository import CatalogRepository
from catalog_media.repositories.image_associations import ImageAssociationRepository
from tests.services.catalog_seed import asset_payload, new_id

DRIVER_TEXT = "disk I/O error at page 4711"


def _asset() -> MediaAsset:
    return MediaAsset(**asset_payload())


async def _failing(*args, **kwargs):
    raise OperationalError("UPDATE courses", {}, Exception(DRIVER_TEXT))


# ─── Concurrent Adds ─────────────────────────────────────────────

async def test_concurrent_adds_of_new_asset_to_different_owners(image_service, seed):
    for _ in range(5):
        course = await seed.course()
        seminar = await seed.seminar()
        asset = _asset()

        await asyncio.gather(
            image_service.add_image("course", course.id, asset),
            image_service.add_image("seminar", seminar.id, asset),
        )

        assert await seed.image_rows(asset.media_service_id) == 1
        assert await seed.has_image(OwnerType.COURSE, course.id, asset.media_service_id)
        assert await seed.has_image(
            OwnerType.SEMINAR, seminar.id, asset.media_service_id,
        )
        assert await seed.image_count(OwnerType.COURSE, course.id) == 1
        assert await seed.image_count(OwnerType.SEMINAR, seminar.id) == 1


async def test_batch_and_single_add_share_new_asset(image_service, seed):
    a = await seed.course()
    b = await seed.course()
    seminar = await seed.seminar()
    asset = _asset()

    affected, _ = await asyncio.gather(
        image_service.add_image_batch("course", [a.id, b.id], asset),
        image_service.add_image("seminar", seminar.id, asset),
    )

    assert affected == 2
    assert await seed.image_rows(asset.media_service_id) == 1
    assert await seed.image_count(OwnerType.SEMINAR, seminar.id) == 1


async def test_add_reuses_existing_image_row(image_service, seed):
    image = new_id()
    await seed.seminar(images=[image])
    course = await seed.course()

    await image_service.add_image("course", course.id, MediaAsset(**asset_payload(image)))

    assert await seed.image_rows(image) == 1
    assert await seed.image_count(OwnerType.COURSE, course.id) == 1


# ─── Rollback ────────────────────────────────────────────────────

async def test_batch_add_counter_failure_rolls_back_everything(
    image_service, seed, monkeypatch,
):
    a = await seed.course(images=[new_id()])
    b = await seed.course()
    asset = _asset()
    monkeypatch.setattr(CatalogRepository, "batch_update", _failing)

    with pytest.raises(InternalError) as exc_info:
        await image_service.add_image_batch("course", [a.id, b.id], asset)

    assert DRIVER_TEXT not in str(exc_info.value)
    assert DRIVER_TEXT not in str(exc_info.value.to_response())
    assert await seed.image_rows(asset.media_service_id) == 0
    assert not await seed.has_image(OwnerType.COURSE, a.id, asset.media_service_id)
    assert not await seed.has_image(OwnerType.COURSE, b.id, asset.media_service_id)
    assert await seed.image_count(OwnerType.COURSE, a.id) == 1
    assert await seed.image_count(OwnerType.COURSE, b.id) == 0


async def test_single_add_association_failure_rolls_back(
    image_service, seed, monkeypatch,
):
    course = await seed.course()
    asset = _asset()
    monkeypatch.setattr(ImageAssociationRepository, "append_batch", _failing)

    with pytest.raises(InternalError):
        await image_service.add_image("course", course.id, asset)

    assert await seed.image_rows(asset.media_service_id) == 0
    assert await seed.association_count(OwnerType.COURSE, course.id) == 0
    assert await seed.image_count(OwnerType.COURSE, course.id) == 0


async def test_batch_delete_failure_keeps_associations(
    image_service, seed, monkeypatch,
):
    image = new_id()
    a = await seed.course(images=[image])
    b = await seed.course(images=[image])
    monkeypatch.setattr(CatalogRepository, "decrement_image_count", _failing)

    with pytest.raises(InternalError):
        await image_service.delete_image_batch("course", [a.id, b.id], image)

    assert await seed.has_image(OwnerType.COURSE, a.id, image)
    assert await seed.has_image(OwnerType.COURSE, b.id, image)
    assert await seed.image_count(OwnerType.COURSE, a.id) == 1
    assert await seed.image_count(OwnerType.COURSE, b.id) == 1


async def test_storage_failure_maps_to_internal_over_http(client, seed, monkeypatch):
    course = await seed.course()
    monkeypatch.setattr(CatalogRepository, "batch_update", _failing)

    res = await client.post(
        f"/api/v1/images/course/{course.id}", json=asset_payload(),
    )

    assert res.status_code == 500
    assert res.json()["error"]["code"] == "INTERNAL"
    assert DRIVER_TEXT not in res.text
