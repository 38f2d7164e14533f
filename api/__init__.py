"""
API package for the GymBuddy API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
- schemas/: Request/response models shared by routers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_key_value_store,
    get_scope,
    get_language,
    get_log_repo,
    get_plan_repo,
    get_catalog,
    get_matcher,
    get_plan_enricher,
    get_training_log_service,
    get_import_plan_use_case,
)

__all__ = [
    # Settings
    "get_settings",
    # Storage
    "get_supabase_client",
    "get_supabase_client_required",
    "get_key_value_store",
    "get_scope",
    "get_language",
    # Repositories
    "get_log_repo",
    "get_plan_repo",
    # Catalog / matching
    "get_catalog",
    "get_matcher",
    "get_plan_enricher",
    # Services
    "get_training_log_service",
    "get_import_plan_use_case",
]
