"""Image Schemas — request bodies for single and batch image operations.

Invariants:
    - Batch owner_ids: 1-500 entries
    - String fields are stripped; blank values rejected before reaching the services
"""

from pydantic import BaseModel, Field, field_validator

from catalog_media.core.validate_media import MediaAsset


class ImageAssetIn(BaseModel):
    """Reference returned by the media service after upload."""
    media_service_id: str = Field(min_length=1, max_length=64)
    url: str = Field(min_length=1, max_length=2000)
    secure_url: str = Field(min_length=1, max_length=2000)
    public_id: str = Field(min_length=1, max_length=255)

    @field_validator("media_service_id", "url", "secure_url", "public_id")
    @classmethod
    def strip_value(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("value cannot be empty or whitespace")
        return v

    def to_asset(self) -> MediaAsset:
        return MediaAsset(
            media_service_id=self.media_service_id,
            url=self.url,
            secure_url=self.secure_url,
            public_id=self.public_id,
        )


class BatchImageAddRequest(BaseModel):
    owner_ids: list[str] = Field(min_length=1, max_length=500)
    asset: ImageAssetIn


class BatchImageDeleteRequest(BaseModel):
    owner_ids: list[str] = Field(min_length=1, max_length=500)
    media_service_id: str = Field(min_length=1, max_length=64)


class OwnersAffectedResponse(BaseModel):
    owners_affected: int
