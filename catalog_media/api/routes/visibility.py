"""Visibility Routes — shared get/publish/unpublish/delete/restore endpoints.

Invariants:
    - Every visibility-managed entity exposes the same route shape under its own prefix
    - Mutations return 204; a row outside the matching scope returns 404 ENTITY_NOT_FOUND
    - DELETE /{id} is a soft delete; DELETE /{id}/permanent removes the row

Design Decisions:
    - Router factory instead of duplicated modules: entity routers only add their list route
"""

from typing import Callable

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel

from catalog_media.core.domain_types import VisibilityScope
from catalog_media.services.visibility_service import VisibilityService


def build_visibility_router(
    prefix: str,
    tag: str,
    service_dependency: Callable[..., VisibilityService],
    item_schema: type[BaseModel],
) -> APIRouter:
    """Router with the lifecycle endpoints for one entity."""
    router = APIRouter(prefix=prefix, tags=[tag])

    @router.get("/{entity_id}", response_model=item_schema)
    async def get_entity(
        entity_id: str,
        scope: VisibilityScope = Query(VisibilityScope.PUBLIC),
        service: VisibilityService = Depends(service_dependency),
    ):
        entity = await service.get(entity_id, scope)
        return item_schema.model_validate(entity)

    @router.post("/{entity_id}/publish", status_code=status.HTTP_204_NO_CONTENT)
    async def publish_entity(
        entity_id: str, service: VisibilityService = Depends(service_dependency),
    ):
        await service.publish(entity_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.post("/{entity_id}/unpublish", status_code=status.HTTP_204_NO_CONTENT)
    async def unpublish_entity(
        entity_id: str, service: VisibilityService = Depends(service_dependency),
    ):
        await service.unpublish(entity_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.post("/{entity_id}/restore", status_code=status.HTTP_204_NO_CONTENT)
    async def restore_entity(
        entity_id: str, service: VisibilityService = Depends(service_dependency),
    ):
        await service.restore(entity_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.delete("/{entity_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def soft_delete_entity(
        entity_id: str, service: VisibilityService = Depends(service_dependency),
    ):
        await service.soft_delete(entity_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.delete("/{entity_id}/permanent", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_entity_permanently(
        entity_id: str, service: VisibilityService = Depends(service_dependency),
    ):
        await service.delete_permanent(entity_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
