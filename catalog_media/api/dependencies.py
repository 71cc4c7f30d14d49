"""API Dependencies — FastAPI providers wiring services to the database manager.

Invariants:
    - Services are built per request; the owner registry is process-wide (lru_cache)
    - Tests swap storage by replacing infrastructure.database.db_manager or via
      app.dependency_overrides on get_db_manager
"""

from fastapi import Depends

from catalog_media.infrastructure.database import DatabaseSessionManager, get_db_manager
from catalog_media.services.image_service import ImageService
from catalog_media.services.owner_registry import get_owner_registry
from catalog_media.services.video_manager import VideoManager
from catalog_media.services.visibility_service import (
    CoursePartVisibilityService, VisibilityService,
    course_part_visibility_service, seminar_visibility_service,
)


def get_image_service(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
) -> ImageService:
    return ImageService(db_manager, get_owner_registry())


def get_video_manager(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
) -> VideoManager:
    return VideoManager(db_manager, get_owner_registry())


def get_seminar_service(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
) -> VisibilityService:
    return seminar_visibility_service(db_manager)


def get_course_part_service(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
) -> CoursePartVisibilityService:
    return course_part_visibility_service(db_manager)
