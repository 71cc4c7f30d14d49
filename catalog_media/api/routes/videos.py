"""Video Routes — HTTP surface for AddVideo and RemoveVideo."""

from fastapi import APIRouter, Depends, Response, status

from catalog_media.api.dependencies import get_video_manager
from catalog_media.schemas.video import VideoAttachRequest
from catalog_media.services.video_manager import VideoManager

router = APIRouter(prefix="/api/v1/videos", tags=["videos"])


@router.post("/{owner_type}/{owner_id}", status_code=status.HTTP_201_CREATED)
async def add_video(
    owner_type: str,
    owner_id: str,
    body: VideoAttachRequest,
    manager: VideoManager = Depends(get_video_manager),
):
    await manager.add_video(owner_type, owner_id, body.media_service_id)
    return {
        "owner_type": owner_type,
        "owner_id": owner_id,
        "media_service_id": body.media_service_id,
    }


@router.delete(
    "/{owner_type}/{owner_id}/{media_service_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def remove_video(
    owner_type: str,
    owner_id: str,
    media_service_id: str,
    manager: VideoManager = Depends(get_video_manager),
):
    await manager.remove_video(owner_type, owner_id, media_service_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
