"""Video Schemas — request body for attaching a video."""

from pydantic import BaseModel, Field


class VideoAttachRequest(BaseModel):
    media_service_id: str = Field(min_length=1, max_length=64)
