"""ORM Models — SQLAlchemy declarative models for catalog entities and their media.

Invariants:
    - All models inherit from Base (db/base.py)
    - Image owners (Course, Seminar, TrainingSession, PhysicalGood) carry
      uploaded_image_amount plus one association table each
    - CoursePart is the only video owner

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references and Base.metadata holds every table before create_all/autogenerate
"""

from catalog_media.models.image import (  # noqa: F401
    Image,
    course_images,
    physical_good_images,
    seminar_images,
    training_session_images,
)
from catalog_media.models.course import Course  # noqa: F401
from catalog_media.models.course_part import CoursePart  # noqa: F401
from catalog_media.models.seminar import Seminar  # noqa: F401
from catalog_media.models.training_session import TrainingSession  # noqa: F401
from catalog_media.models.physical_good import PhysicalGood  # noqa: F401
