"""Catalog Schemas — visibility-aware responses for seminars and course parts.

Invariants:
    - visibility is derived from (published, deleted_at), never stored
    - Built from ORM rows via from_attributes
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, computed_field

from catalog_media.core.domain_types import VisibilityScope
from catalog_media.core.visibility import scope_of


class CatalogEntityResponse(BaseModel):
    """Fields shared by every visibility-managed entity."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    short_description: str | None = None
    published: bool
    deleted_at: datetime | None = None
    created_at: datetime

    @computed_field
    @property
    def visibility(self) -> VisibilityScope:
        return scope_of(self.published, self.deleted_at)


class SeminarResponse(CatalogEntityResponse):
    place: str | None = None
    date: datetime | None = None
    uploaded_image_amount: int


class CoursePartResponse(CatalogEntityResponse):
    course_id: str
    number: int
    video_id: str | None = None


class SeminarListResponse(BaseModel):
    items: list[SeminarResponse]
    total: int
    limit: int
    offset: int


class CoursePartListResponse(BaseModel):
    items: list[CoursePartResponse]
    total: int
    limit: int
    offset: int
