"""Health & Readiness — liveness plus database and owner-registry readiness.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the database is unreachable (readiness)
    - Readiness lists the owner-type tags each media kind accepts

Design Decisions:
    - db_manager read through the module at call time so it reflects init_db()
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from catalog_media.core.domain_types import MAX_UPLOADED_IMAGES
from catalog_media.infrastructure import database
from catalog_media.services.owner_registry import get_owner_registry

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "catalog-media-api",
        "max_images_per_owner": MAX_UPLOADED_IMAGES,
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe: database connectivity and registered owner types."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        logger.warning("Readiness check failed: database unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {
        "status": "ready",
        "checks": {"database": "healthy"},
        "owner_types": get_owner_registry().owner_tags(),
    }
