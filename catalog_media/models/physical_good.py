"""Physical Good ORM — image owner.

Invariants:
    - uploaded_image_amount mirrors the row count in physical_good_images (0..5)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from catalog_media.db.base import Base


class PhysicalGood(Base):
    """Physical good entity — image owner."""
    __tablename__ = "physical_goods"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    short_description: Mapped[str | None] = mapped_column(String(255), nullable=True)
    long_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    amount: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    shipping_required: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    uploaded_image_amount: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True,
    )
