"""
Router package for the GymBuddy API.

This package contains all API routers organized by domain:
- health: Health check endpoints
- catalog: Catalog lookup, autocomplete and name matching
- plans: Stored plan, enrichment and matching statistics
- logs: Per-exercise training history
- progression: Weight statistics and chart series
"""

from api.routers.health import router as health_router
from api.routers.catalog import router as catalog_router
from api.routers.plans import router as plans_router
from api.routers.logs import router as logs_router
from api.routers.progression import router as progression_router

__all__ = [
    "health_router",
    "catalog_router",
    "plans_router",
    "logs_router",
    "progression_router",
]
