"""Image Routes — HTTP surface for AddImage, DeleteImage and their batch forms.

Invariants:
    - Batch routes are declared before /{owner_type}/{owner_id} so "batch" and
      "batch-delete" never bind as an owner id
    - Routes only translate HTTP ↔ ImageService; errors surface through global handlers
"""

from fastapi import APIRouter, Depends, Response, status

from catalog_media.api.dependencies import get_image_service
from catalog_media.core.validate_media import validate_uuid
from catalog_media.schemas.image import (
    BatchImageAddRequest, BatchImageDeleteRequest, ImageAssetIn, OwnersAffectedResponse,
)
from catalog_media.services.image_service import ImageService

router = APIRouter(prefix="/api/v1/images", tags=["images"])


@router.post("/{owner_type}/batch", response_model=OwnersAffectedResponse)
async def add_image_batch(
    owner_type: str,
    body: BatchImageAddRequest,
    service: ImageService = Depends(get_image_service),
):
    """Attach one image to every eligible owner in the list."""
    affected = await service.add_image_batch(
        owner_type, body.owner_ids, body.asset.to_asset(),
    )
    return OwnersAffectedResponse(owners_affected=affected)


@router.post("/{owner_type}/batch-delete", response_model=OwnersAffectedResponse)
async def delete_image_batch(
    owner_type: str,
    body: BatchImageDeleteRequest,
    service: ImageService = Depends(get_image_service),
):
    """Detach one image from every listed owner that holds it."""
    affected = await service.delete_image_batch(
        owner_type, body.owner_ids, body.media_service_id,
    )
    return OwnersAffectedResponse(owners_affected=affected)


@router.post("/{owner_type}/{owner_id}", status_code=status.HTTP_201_CREATED)
async def add_image(
    owner_type: str,
    owner_id: str,
    body: ImageAssetIn,
    service: ImageService = Depends(get_image_service),
):
    await service.add_image(owner_type, owner_id, body.to_asset())
    # canonical ids, as stored
    return {
        "owner_type": owner_type,
        "owner_id": validate_uuid(owner_id, "owner_id"),
        "media_service_id": validate_uuid(body.media_service_id, "media_service_id"),
    }


@router.delete(
    "/{owner_type}/{owner_id}/{media_service_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_image(
    owner_type: str,
    owner_id: str,
    media_service_id: str,
    service: ImageService = Depends(get_image_service),
):
    await service.delete_image(owner_type, owner_id, media_service_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
