"""Initial schema — catalog entities, images and per-owner image associations.

Revision ID: 0001_initial_catalog_media
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001_initial_catalog_media"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

IMAGE_OWNER_TABLES = {
    "course_images": "courses",
    "seminar_images": "seminars",
    "training_session_images": "training_sessions",
    "physical_good_images": "physical_goods",
}


def _visibility_columns() -> list[sa.Column]:
    return [
        sa.Column("published", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "images",
        sa.Column("media_service_id", sa.String(36), primary_key=True),
        sa.Column("url", sa.String(2000), nullable=False),
        sa.Column("secure_url", sa.String(2000), nullable=False),
        sa.Column("public_id", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "courses",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("topic", sa.String(255), nullable=True),
        sa.Column("short_description", sa.String(255), nullable=True),
        sa.Column("long_description", sa.Text, nullable=True),
        sa.Column("access_duration", sa.Integer, nullable=False, server_default="0"),
        sa.Column("uploaded_image_amount", sa.Integer, nullable=False, server_default="0"),
        *_visibility_columns(),
    )

    op.create_table(
        "seminars",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("short_description", sa.String(255), nullable=True),
        sa.Column("details", sa.Text, nullable=True),
        sa.Column("place", sa.String(255), nullable=True),
        sa.Column("date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("uploaded_image_amount", sa.Integer, nullable=False, server_default="0"),
        *_visibility_columns(),
    )

    op.create_table(
        "training_sessions",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("short_description", sa.String(255), nullable=True),
        sa.Column("long_description", sa.Text, nullable=True),
        sa.Column("duration_minutes", sa.Integer, nullable=False, server_default="60"),
        sa.Column("format", sa.String(50), nullable=True),
        sa.Column("uploaded_image_amount", sa.Integer, nullable=False, server_default="0"),
        *_visibility_columns(),
    )

    op.create_table(
        "physical_goods",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("short_description", sa.String(255), nullable=True),
        sa.Column("long_description", sa.Text, nullable=True),
        sa.Column("amount", sa.Integer, nullable=False, server_default="0"),
        sa.Column("shipping_required", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("uploaded_image_amount", sa.Integer, nullable=False, server_default="0"),
        *_visibility_columns(),
    )

    op.create_table(
        "course_parts",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column(
            "course_id", sa.String(36),
            sa.ForeignKey("courses.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("number", sa.Integer, nullable=False, server_default="1"),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("short_description", sa.String(255), nullable=True),
        sa.Column("long_description", sa.Text, nullable=True),
        sa.Column("video_id", sa.String(36), nullable=True),
        *_visibility_columns(),
    )
    op.create_index("ix_course_parts_course_id", "course_parts", ["course_id"])
    op.create_index("ix_course_parts_video_id", "course_parts", ["video_id"])

    for table in ("courses", "seminars", "training_sessions", "physical_goods", "course_parts"):
        op.create_index(f"ix_{table}_deleted_at", table, ["deleted_at"])

    for join_table, owner_table in IMAGE_OWNER_TABLES.items():
        op.create_table(
            join_table,
            sa.Column(
                "owner_id", sa.String(36),
                sa.ForeignKey(f"{owner_table}.id", ondelete="CASCADE"),
                primary_key=True,
            ),
            sa.Column(
                "image_media_service_id", sa.String(36),
                sa.ForeignKey("images.media_service_id", ondelete="CASCADE"),
                primary_key=True,
            ),
        )


def downgrade() -> None:
    for join_table in IMAGE_OWNER_TABLES:
        op.drop_table(join_table)
    op.drop_table("course_parts")
    op.drop_table("physical_goods")
    op.drop_table("training_sessions")
    op.drop_table("seminars")
    op.drop_table("courses")
    op.drop_table("images")
