"""Service test fixtures — file-backed async SQLite + FastAPI test client.

Invariants:
    - Every test gets a fresh SQLite database file under tmp_path
    - db_manager swapped for one bound to the test engine (routes and services share it)
    - Seeding and assertions use their own short-lived sessions, never the
      session a service is writing through

Design Decisions:
    - File database instead of :memory:: each session gets its own connection, so
      the two-phase batch add and row-lock paths run as they do in production
    - SQLite ignores FOR UPDATE; lock semantics are not asserted here
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from catalog_media.db.base import Base
from catalog_media.infrastructure.database import DatabaseSessionManager
import catalog_media.infrastructure.database as db_module
import catalog_media.models  # noqa: F401
from catalog_media.main import app
from catalog_media.services.image_service import ImageService
from catalog_media.services.owner_registry import get_owner_registry
from catalog_media.services.video_manager import VideoManager
from catalog_media.services.visibility_service import (
    course_part_visibility_service, seminar_visibility_service,
)
from tests.services.catalog_seed import CatalogSeed


@pytest.fixture
async def test_engine(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
def test_db_manager(test_engine, test_session_factory):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
def seed(test_session_factory):
    return CatalogSeed(test_session_factory)


@pytest.fixture
def image_service(test_db_manager):
    return ImageService(test_db_manager, get_owner_registry())


@pytest.fixture
def video_manager(test_db_manager):
    return VideoManager(test_db_manager, get_owner_registry())


@pytest.fixture
def seminar_service(test_db_manager):
    return seminar_visibility_service(test_db_manager)


@pytest.fixture
def course_part_service(test_db_manager):
    return course_part_visibility_service(test_db_manager)


@pytest.fixture
async def client(test_db_manager):
    """FastAPI test client with db_manager pointed at the test database."""
    original_manager = db_module.db_manager
    db_module.db_manager = test_db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
