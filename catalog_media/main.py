"""Catalog Media API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CatalogMediaError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database and owner registry initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Owner registry built in lifespan: an owner kind without an adapter fails boot
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog_media.api.error_handlers import register_error_handlers
from catalog_media.infrastructure import database
from catalog_media.infrastructure.observability import setup_logging
from catalog_media.config import get_settings
from catalog_media.services.owner_registry import get_owner_registry
from catalog_media.api.routes import (
    course_parts, health, images, seminars, videos,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    get_owner_registry()
    logger.info("Catalog Media API started")
    yield
    if database.db_manager:
        await database.db_manager.engine.dispose()
    logger.info("Catalog Media API shutting down")


app = FastAPI(
    title="Catalog Media API", version="1.0.0", lifespan=lifespan,
)

# CORS: origins come from settings
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(images.router)
app.include_router(videos.router)
app.include_router(seminars.router)
app.include_router(course_parts.router)

register_error_handlers(app)
