"""Image ORM — immutable media-service asset references and per-owner association tables.

Invariants:
    - Image is keyed by media_service_id; rows are never updated after insert
    - One association table per image-owner kind, composite primary key on
      (owner_id, image_media_service_id): an owner holds an image at most once
    - Association rows cascade away with either side

Design Decisions:
    - Association tables are Core Table objects: the repositories write them with
      bulk insert/delete statements instead of ORM collection appends
"""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, String, Table
from sqlalchemy.orm import Mapped, mapped_column

from catalog_media.db.base import Base


class Image(Base):
    """Reference to an image stored by the external media service."""
    __tablename__ = "images"

    media_service_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    url: Mapped[str] = mapped_column(String(2000), nullable=False)
    secure_url: Mapped[str] = mapped_column(String(2000), nullable=False)
    public_id: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )


def image_association_table(name: str, owner_table: str) -> Table:
    """Build the join table linking one owner kind to images."""
    return Table(
        name,
        Base.metadata,
        Column(
            "owner_id", String(36),
            ForeignKey(f"{owner_table}.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        Column(
            "image_media_service_id", String(36),
            ForeignKey("images.media_service_id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )


course_images = image_association_table("course_images", "courses")
seminar_images = image_association_table("seminar_images", "seminars")
training_session_images = image_association_table(
    "training_session_images", "training_sessions",
)
physical_good_images = image_association_table(
    "physical_good_images", "physical_goods",
)
