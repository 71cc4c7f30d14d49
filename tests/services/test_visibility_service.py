"""Visibility Lifecycle — verifies scope membership across publish / delete / restore.

Invariants:
    - A new seminar is only in the unpublished scope
    - publish moves it exclusively to the public scope
    - soft_delete removes it from public and unpublished, restore brings back its
      pre-delete published value
    - publish/unpublish/soft_delete on a soft-deleted row report EntityNotFound
    - Course parts publish only under a public course
"""

import pytest

from catalog_media.core.domain_types import OwnerType, VisibilityScope
from catalog_media.core.errors import (
    EntityNotFoundError, InvalidArgumentError, ParentNotPublishedError,
)
from catalog_media.models import CoursePart, Seminar
from tests.services.catalog_seed import new_id

DISJOINT = (VisibilityScope.PUBLIC, VisibilityScope.UNPUBLISHED, VisibilityScope.DELETED)


async def _scopes_of(service, entity_id: str) -> set[VisibilityScope]:
    found = set()
    for scope in DISJOINT:
        try:
            await service.get(entity_id, scope)
        except EntityNotFoundError:
            continue
        found.add(scope)
    return found


async def test_new_seminar_is_draft(seminar_service, seed):
    seminar = await seed.seminar()
    assert await _scopes_of(seminar_service, seminar.id) == {VisibilityScope.UNPUBLISHED}


async def test_publish_moves_to_public_only(seminar_service, seed):
    seminar = await seed.seminar()
    await seminar_service.publish(seminar.id)
    assert await _scopes_of(seminar_service, seminar.id) == {VisibilityScope.PUBLIC}


async def test_unpublish_returns_to_draft(seminar_service, seed):
    seminar = await seed.seminar(published=True)
    await seminar_service.unpublish(seminar.id)
    assert await _scopes_of(seminar_service, seminar.id) == {VisibilityScope.UNPUBLISHED}


async def test_soft_delete_keeps_published_flag(seminar_service, seed):
    seminar = await seed.seminar(published=True)

    await seminar_service.soft_delete(seminar.id)

    assert await _scopes_of(seminar_service, seminar.id) == {VisibilityScope.DELETED}
    assert (await seed.fetch(Seminar, seminar.id)).published is True


@pytest.mark.parametrize("published,expected", [
    (True, VisibilityScope.PUBLIC),
    (False, VisibilityScope.UNPUBLISHED),
])
async def test_restore_returns_to_previous_scope(
    seminar_service, seed, published, expected,
):
    seminar = await seed.seminar(published=published)
    await seminar_service.soft_delete(seminar.id)

    await seminar_service.restore(seminar.id)

    assert await _scopes_of(seminar_service, seminar.id) == {expected}


async def test_publish_on_deleted_row_is_blocked(seminar_service, seed):
    seminar = await seed.soft_deleted(OwnerType.SEMINAR)
    with pytest.raises(EntityNotFoundError):
        await seminar_service.publish(seminar.id)
    with pytest.raises(EntityNotFoundError):
        await seminar_service.unpublish(seminar.id)
    assert (await seed.fetch(Seminar, seminar.id)).published is False


async def test_soft_delete_twice_is_not_found(seminar_service, seed):
    seminar = await seed.seminar()
    await seminar_service.soft_delete(seminar.id)
    with pytest.raises(EntityNotFoundError):
        await seminar_service.soft_delete(seminar.id)


async def test_restore_live_row_is_not_found(seminar_service, seed):
    seminar = await seed.seminar()
    with pytest.raises(EntityNotFoundError):
        await seminar_service.restore(seminar.id)


async def test_delete_permanent_purges_associations(seminar_service, seed):
    image = new_id()
    seminar = await seed.seminar(images=[image], published=True)

    await seminar_service.delete_permanent(seminar.id)

    assert await seed.fetch(Seminar, seminar.id) is None
    assert await seed.association_count(OwnerType.SEMINAR, seminar.id) == 0
    assert await seed.image_rows(image) == 1


async def test_delete_permanent_works_on_deleted_rows(seminar_service, seed):
    seminar = await seed.soft_deleted(OwnerType.SEMINAR)
    await seminar_service.delete_permanent(seminar.id)
    assert await seed.fetch(Seminar, seminar.id) is None


async def test_delete_permanent_unknown(seminar_service):
    with pytest.raises(EntityNotFoundError):
        await seminar_service.delete_permanent(new_id())


async def test_invalid_id_rejected(seminar_service):
    with pytest.raises(InvalidArgumentError):
        await seminar_service.publish("nope")


async def test_list_by_scope_with_total(seminar_service, seed):
    public = [await seed.seminar(published=True) for _ in range(3)]
    await seed.seminar()
    await seed.soft_deleted(OwnerType.SEMINAR, published=True)

    items, total = await seminar_service.list_in_scope(VisibilityScope.PUBLIC, limit=2)

    assert total == 3
    assert len(items) == 2
    assert {s.id for s in items} <= {s.id for s in public}


async def test_list_deleted_scope(seminar_service, seed):
    deleted = await seed.soft_deleted(OwnerType.SEMINAR)
    await seed.seminar()
    items, total = await seminar_service.list_in_scope(VisibilityScope.DELETED)
    assert total == 1
    assert [s.id for s in items] == [deleted.id]


# ─── Course parts ────────────────────────────────────────────────

async def test_course_part_publish_requires_published_course(course_part_service, seed):
    course = await seed.course(published=False)
    part = await seed.course_part(course.id)

    with pytest.raises(ParentNotPublishedError):
        await course_part_service.publish(part.id)

    assert (await seed.fetch(CoursePart, part.id)).published is False


async def test_course_part_publish_under_deleted_course(course_part_service, seed):
    course = await seed.soft_deleted(OwnerType.COURSE, published=True)
    part = await seed.course_part(course.id)
    with pytest.raises(ParentNotPublishedError):
        await course_part_service.publish(part.id)


async def test_course_part_publish_under_public_course(course_part_service, seed):
    course = await seed.course(published=True)
    part = await seed.course_part(course.id)

    await course_part_service.publish(part.id)

    assert (await seed.fetch(CoursePart, part.id)).published is True


async def test_course_part_unpublish_ignores_parent(course_part_service, seed):
    course = await seed.course(published=False)
    part = await seed.course_part(course.id, published=True)
    await course_part_service.unpublish(part.id)
    assert (await seed.fetch(CoursePart, part.id)).published is False


async def test_course_part_list_scoped_to_course(course_part_service, seed):
    course = await seed.course(published=True)
    other = await seed.course(published=True)
    mine = await seed.course_part(course.id, published=True)
    await seed.course_part(other.id, published=True)

    items, total = await course_part_service.list_for_course(
        course.id, VisibilityScope.PUBLIC,
    )

    assert total == 1
    assert [p.id for p in items] == [mine.id]
