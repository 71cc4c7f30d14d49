"""Image & Video Routes — verifies HTTP status mapping and response bodies.

Invariants:
    - Single add → 201; single delete → 204; batch → 200 {owners_affected}
    - Domain errors surface as the structured error envelope with their status
    - Malformed bodies → 400 VALIDATION_ERROR
"""

import catalog_media.infrastructure.database as db_module
from catalog_media.core.domain_types import OwnerType
from tests.services.catalog_seed import asset_payload, new_id


async def test_add_image_returns_201(client, seed):
    owner = await seed.course()
    payload = asset_payload()

    res = await client.post(f"/api/v1/images/course/{owner.id}", json=payload)

    assert res.status_code == 201
    assert res.json()["media_service_id"] == payload["media_service_id"]
    assert await seed.image_count(OwnerType.COURSE, owner.id) == 1


async def test_add_image_at_limit_returns_400(client, seed):
    owner = await seed.course(images=[new_id() for _ in range(5)])

    res = await client.post(f"/api/v1/images/course/{owner.id}", json=asset_payload())

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "IMAGE_LIMIT_EXCEEDED"
    assert error["context"]["owner_id"] == owner.id


async def test_add_duplicate_image_returns_409(client, seed):
    image = new_id()
    owner = await seed.course(images=[image])
    res = await client.post(
        f"/api/v1/images/course/{owner.id}", json=asset_payload(image),
    )
    assert res.status_code == 409


async def test_unknown_owner_type_returns_400(client):
    res = await client.post(f"/api/v1/images/boat/{new_id()}", json=asset_payload())
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "UNKNOWN_OWNER_TYPE"


async def test_unknown_owner_returns_404(client):
    res = await client.post(f"/api/v1/images/course/{new_id()}", json=asset_payload())
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "OWNER_NOT_FOUND"


async def test_malformed_body_returns_validation_error(client, seed):
    owner = await seed.course()
    res = await client.post(
        f"/api/v1/images/course/{owner.id}", json={"url": "http://x.example"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_delete_image_returns_204(client, seed):
    image = new_id()
    owner = await seed.seminar(images=[image])

    res = await client.delete(f"/api/v1/images/seminar/{owner.id}/{image}")

    assert res.status_code == 204
    assert await seed.image_count(OwnerType.SEMINAR, owner.id) == 0


async def test_delete_missing_image_returns_404(client, seed):
    owner = await seed.seminar(images=[new_id()])
    res = await client.delete(f"/api/v1/images/seminar/{owner.id}/{new_id()}")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "IMAGE_NOT_FOUND_ON_OWNER"


async def test_batch_add_route(client, seed):
    a = await seed.course(images=[new_id() for _ in range(4)])
    b = await seed.course(images=[new_id() for _ in range(5)])

    res = await client.post(
        "/api/v1/images/course/batch",
        json={"owner_ids": [a.id, b.id], "asset": asset_payload()},
    )

    assert res.status_code == 200
    assert res.json() == {"owners_affected": 1}


async def test_batch_add_unknown_owners_returns_404(client):
    res = await client.post(
        "/api/v1/images/course/batch",
        json={"owner_ids": [new_id()], "asset": asset_payload()},
    )
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "OWNERS_NOT_FOUND"


async def test_batch_delete_route(client, seed):
    image = new_id()
    a = await seed.image_owner(OwnerType.PHYSICAL_GOOD, images=[image])
    b = await seed.image_owner(OwnerType.PHYSICAL_GOOD)

    res = await client.post(
        "/api/v1/images/physical_good/batch-delete",
        json={"owner_ids": [a.id, b.id], "media_service_id": image},
    )

    assert res.status_code == 200
    assert res.json() == {"owners_affected": 1}


async def test_batch_delete_without_associations_returns_404(client, seed):
    a = await seed.image_owner(OwnerType.TRAINING_SESSION)
    res = await client.post(
        "/api/v1/images/training_session/batch-delete",
        json={"owner_ids": [a.id], "media_service_id": new_id()},
    )
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "ASSOCIATIONS_NOT_FOUND"


async def test_video_attach_and_detach(client, seed):
    course = await seed.course()
    part = await seed.course_part(course.id)
    video = new_id()

    res = await client.post(
        f"/api/v1/videos/course_part/{part.id}", json={"media_service_id": video},
    )
    assert res.status_code == 201

    res = await client.post(
        f"/api/v1/videos/course_part/{part.id}", json={"media_service_id": video},
    )
    assert res.status_code == 409

    res = await client.delete(f"/api/v1/videos/course_part/{part.id}/{video}")
    assert res.status_code == 204


async def test_health_ready(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_add_image_echoes_canonical_ids(client, seed):
    owner = await seed.course()
    payload = asset_payload()
    payload["media_service_id"] = payload["media_service_id"].upper()

    res = await client.post(
        f"/api/v1/images/course/{owner.id.upper()}", json=payload,
    )

    assert res.status_code == 201
    body = res.json()
    assert body["owner_id"] == owner.id
    assert body["media_service_id"] == payload["media_service_id"].lower()
    assert await seed.has_image(OwnerType.COURSE, owner.id, body["media_service_id"])


async def test_health_ready_lists_owner_types(client):
    res = await client.get("/api/v1/health/ready")
    assert res.json()["owner_types"] == {
        "image": ["course", "physical_good", "seminar", "training_session"],
        "video": ["course_part"],
    }


async def test_health_ready_without_database(client):
    db_module.db_manager = None
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_liveness_reports_image_limit(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["max_images_per_owner"] == 5
