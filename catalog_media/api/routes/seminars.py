"""Seminar Routes — scoped listing plus the shared visibility lifecycle."""

from fastapi import Depends, Query

from catalog_media.api.dependencies import get_seminar_service
from catalog_media.api.routes.visibility import build_visibility_router
from catalog_media.core.domain_types import VisibilityScope
from catalog_media.schemas.catalog import SeminarListResponse, SeminarResponse
from catalog_media.services.visibility_service import VisibilityService

router = build_visibility_router(
    "/api/v1/seminars", "seminars", get_seminar_service, SeminarResponse,
)


@router.get("", response_model=SeminarListResponse)
async def list_seminars(
    scope: VisibilityScope = Query(VisibilityScope.PUBLIC),
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    service: VisibilityService = Depends(get_seminar_service),
):
    """List seminars in one visibility scope, newest first."""
    items, total = await service.list_in_scope(scope, limit, offset)
    return SeminarListResponse(
        items=[SeminarResponse.model_validate(s) for s in items],
        total=total, limit=limit, offset=offset,
    )
