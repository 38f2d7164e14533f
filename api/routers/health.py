"""
Health check router.

This router provides health check endpoints for monitoring and load balancers.
"""

import logging

from fastapi import APIRouter, Depends

from api.deps import get_catalog, get_settings
from backend.core.catalog import ExerciseCatalog
from backend.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Health"],
)


# =============================================================================
# Health Check Endpoints
# =============================================================================


@router.get("/health")
def health():
    """
    Simple liveness endpoint.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok"}


@router.get("/health/ready")
def readiness(
    settings: Settings = Depends(get_settings),
    catalog: ExerciseCatalog = Depends(get_catalog),
):
    """
    Readiness endpoint: the catalog is loaded and a storage backend is chosen.

    Returns:
        dict: Status plus the catalog size and storage backend name
    """
    return {
        "status": "ok",
        "catalog_entries": len(catalog),
        "storage_backend": settings.storage_backend,
    }
