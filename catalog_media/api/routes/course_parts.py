"""Course Part Routes — per-course listing plus the shared visibility lifecycle.

Invariants:
    - Listing always requires course_id
    - POST /{id}/publish returns 400 PARENT_NOT_PUBLISHED while the course is not public
"""

from fastapi import Depends, Query

from catalog_media.api.dependencies import get_course_part_service
from catalog_media.api.routes.visibility import build_visibility_router
from catalog_media.core.domain_types import VisibilityScope
from catalog_media.schemas.catalog import CoursePartListResponse, CoursePartResponse
from catalog_media.services.visibility_service import CoursePartVisibilityService

router = build_visibility_router(
    "/api/v1/course-parts", "course-parts", get_course_part_service, CoursePartResponse,
)


@router.get("", response_model=CoursePartListResponse)
async def list_course_parts(
    course_id: str = Query(...),
    scope: VisibilityScope = Query(VisibilityScope.PUBLIC),
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    service: CoursePartVisibilityService = Depends(get_course_part_service),
):
    items, total = await service.list_for_course(course_id, scope, limit, offset)
    return CoursePartListResponse(
        items=[CoursePartResponse.model_validate(p) for p in items],
        total=total, limit=limit, offset=offset,
    )
