"""Visibility Service — publish / unpublish / soft delete / restore / permanent delete.

Invariants:
    - publish, unpublish and soft_delete match only non-deleted rows; a soft-deleted
      row reports EntityNotFound for them
    - restore matches only soft-deleted rows and keeps the published value it had
    - delete_permanent matches any row and purges image associations first
    - A course part is published only while its course is public (published, not deleted)
    - Every mutation is one transaction; reads use a plain session

Design Decisions:
    - One service class parametrized by repository instead of per-entity copies;
      CoursePartVisibilityService only adds the parent check and the course_id filter
"""

import logging

from catalog_media.core.domain_types import OwnerType, VisibilityScope
from catalog_media.core.errors import EntityNotFoundError, ParentNotPublishedError
from catalog_media.core.validate_media import validate_uuid
from catalog_media.core.visibility import in_scope
from catalog_media.infrastructure.database import DatabaseSessionManager
from catalog_media.models import Course, CoursePart, Seminar, seminar_images
from catalog_media.repositories.catalog_repository import CatalogRepository
from catalog_media.repositories.image_associations import ImageAssociationRepository

logger = logging.getLogger(__name__)


class VisibilityService:
    """Visibility lifecycle for one catalog entity."""

    def __init__(
        self,
        db_manager: DatabaseSessionManager,
        entity_type: OwnerType,
        entities: CatalogRepository,
        associations: ImageAssociationRepository | None = None,
    ):
        self._db_manager = db_manager
        self.entity_type = entity_type
        self._entities = entities
        self._associations = associations

    def _not_found(self, entity_id: str) -> EntityNotFoundError:
        return EntityNotFoundError(self.entity_type.value, entity_id)

    # ─── Reads ───────────────────────────────────────────────────

    async def get(self, entity_id: str, scope: VisibilityScope):
        entity_id = validate_uuid(entity_id, "id")
        async with self._db_manager.session() as db:
            entity = await self._entities.with_session(db).get(entity_id, scope)
        if entity is None:
            raise self._not_found(entity_id)
        return entity

    async def list_in_scope(
        self, scope: VisibilityScope, limit: int = 20, offset: int = 0,
    ) -> tuple[list, int]:
        return await self._list(scope, limit, offset)

    async def _list(
        self, scope: VisibilityScope, limit: int, offset: int,
        filters: dict[str, object] | None = None,
    ) -> tuple[list, int]:
        async with self._db_manager.session() as db:
            entities = self._entities.with_session(db)
            items = await entities.list_in_scope(scope, limit, offset, filters)
            total = await entities.count(scope, filters)
        return items, total

    # ─── Mutations ───────────────────────────────────────────────

    async def publish(self, entity_id: str) -> None:
        entity_id = validate_uuid(entity_id, "id")
        async with self._db_manager.transaction() as db:
            if not await self._entities.with_session(db).set_published(entity_id, True):
                raise self._not_found(entity_id)
        self._log("published", entity_id)

    async def unpublish(self, entity_id: str) -> None:
        entity_id = validate_uuid(entity_id, "id")
        async with self._db_manager.transaction() as db:
            if not await self._entities.with_session(db).set_published(entity_id, False):
                raise self._not_found(entity_id)
        self._log("unpublished", entity_id)

    async def soft_delete(self, entity_id: str) -> None:
        entity_id = validate_uuid(entity_id, "id")
        async with self._db_manager.transaction() as db:
            if not await self._entities.with_session(db).soft_delete(entity_id):
                raise self._not_found(entity_id)
        self._log("soft-deleted", entity_id)

    async def restore(self, entity_id: str) -> None:
        entity_id = validate_uuid(entity_id, "id")
        async with self._db_manager.transaction() as db:
            if not await self._entities.with_session(db).restore(entity_id):
                raise self._not_found(entity_id)
        self._log("restored", entity_id)

    async def delete_permanent(self, entity_id: str) -> None:
        entity_id = validate_uuid(entity_id, "id")
        async with self._db_manager.transaction() as db:
            if self._associations is not None:
                await self._associations.with_session(db).purge_owner(entity_id)
            if not await self._entities.with_session(db).delete_permanent(entity_id):
                raise self._not_found(entity_id)
        self._log("permanently deleted", entity_id)

    def _log(self, action: str, entity_id: str) -> None:
        logger.info(
            f"{self.entity_type.value} {entity_id} {action}",
            extra={"owner_type": self.entity_type.value, "owner_id": entity_id},
        )


class CoursePartVisibilityService(VisibilityService):
    """Course parts: lists scoped to a course, publish requires a public course."""

    def __init__(self, db_manager: DatabaseSessionManager):
        super().__init__(db_manager, OwnerType.COURSE_PART, CatalogRepository(CoursePart))
        self._courses = CatalogRepository(Course)

    async def list_for_course(
        self, course_id: str, scope: VisibilityScope, limit: int = 20, offset: int = 0,
    ) -> tuple[list, int]:
        course_id = validate_uuid(course_id, "course_id")
        return await self._list(scope, limit, offset, {"course_id": course_id})

    async def publish(self, entity_id: str) -> None:
        entity_id = validate_uuid(entity_id, "id")
        async with self._db_manager.transaction() as db:
            part = await self._entities.with_session(db).get(
                entity_id, VisibilityScope.WITH_UNPUBLISHED, lock=True,
            )
            if part is None:
                raise self._not_found(entity_id)
            course = await self._courses.with_session(db).get_any(
                part.course_id, lock=True,
            )
            if course is None or not in_scope(
                course.published, course.deleted_at, VisibilityScope.PUBLIC,
            ):
                raise ParentNotPublishedError(OwnerType.COURSE.value, part.course_id)
            await self._entities.with_session(db).set_published(entity_id, True)
        self._log("published", entity_id)


def seminar_visibility_service(db_manager: DatabaseSessionManager) -> VisibilityService:
    return VisibilityService(
        db_manager, OwnerType.SEMINAR,
        CatalogRepository(Seminar), ImageAssociationRepository(seminar_images),
    )


def course_part_visibility_service(
    db_manager: DatabaseSessionManager,
) -> CoursePartVisibilityService:
    return CoursePartVisibilityService(db_manager)
