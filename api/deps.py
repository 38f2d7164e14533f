"""
FastAPI Dependency Providers for the GymBuddy API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings, Supabase client, key-value store and catalog are cached per-process
- Repository and service providers create new instances per-request
- The storage scope comes from the X-Storage-Scope header (guest if absent)

Usage in routers:
    from api.deps import get_log_repo, get_scope
    from application.ports import LogRepository

    @router.get("/logs")
    async def list_logs(
        scope: str = Depends(get_scope),
        log_repo: LogRepository = Depends(get_log_repo),
    ):
        return await log_repo.load(scope)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_log_repo] = lambda: FakeLogRepository()
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from fastapi import Depends, Header, HTTPException, Query
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import KeyValueStore, LogRepository, PlanRepository
from application.use_cases import ImportPlanUseCase

# Concrete implementations
from infrastructure import (
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    KeyValueLogRepository,
    KeyValuePlanRepository,
    SupabaseKeyValueStore,
)

from backend.core.catalog import ExerciseCatalog, get_catalog as _get_catalog
from backend.core.exercise_matcher import ExerciseNameMatcher
from backend.core.plan_enricher import PlanEnricher
from backend.core.training_log_service import TrainingLogService
from backend.settings import Settings, get_settings as _get_settings
from domain.models import Language

logger = logging.getLogger(__name__)


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Key-Value Store Provider
# =============================================================================


@lru_cache
def get_key_value_store() -> KeyValueStore:
    """
    Get the process-wide key-value store for the configured backend.

    The in-memory backend must be shared across requests, so the store is
    cached for the lifetime of the process.

    Returns:
        KeyValueStore: Backing store for plans and logs
    """
    settings = _get_settings()

    if settings.storage_backend == "supabase":
        store = SupabaseKeyValueStore(
            get_supabase_client_required(),
            table=settings.supabase_storage_table,
        )
    elif settings.storage_backend == "file":
        store = JsonFileKeyValueStore(Path(settings.storage_dir))
    else:
        store = InMemoryKeyValueStore()

    logger.info(f"Using '{settings.storage_backend}' storage backend")
    return store


# =============================================================================
# Scope Provider
# =============================================================================


def get_scope(
    x_storage_scope: Optional[str] = Header(None, alias="X-Storage-Scope"),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Resolve the storage scope for the request.

    Returns:
        str: User scope from the X-Storage-Scope header, or the guest scope
    """
    scope = (x_storage_scope or "").strip()
    return scope or settings.guest_scope


def get_language(
    language: Optional[Language] = Query(None, description="Name language (es, en)"),
    settings: Settings = Depends(get_settings),
) -> Language:
    """
    Resolve the name language for the request.

    Returns:
        Language: The `language` query parameter, or the configured default
    """
    return language or Language(settings.default_language)


# =============================================================================
# Repository Providers
# =============================================================================


def get_log_repo(
    store: KeyValueStore = Depends(get_key_value_store),
    settings: Settings = Depends(get_settings),
) -> LogRepository:
    """
    Get log repository instance.

    Returns:
        LogRepository: Implementation of LogRepository protocol
    """
    return KeyValueLogRepository(
        store,
        base_key=settings.logs_storage_key,
        guest_scope=settings.guest_scope,
    )


def get_plan_repo(
    store: KeyValueStore = Depends(get_key_value_store),
    settings: Settings = Depends(get_settings),
) -> PlanRepository:
    """
    Get plan repository instance.

    Returns:
        PlanRepository: Implementation of PlanRepository protocol
    """
    return KeyValuePlanRepository(
        store,
        base_key=settings.plan_storage_key,
        guest_scope=settings.guest_scope,
    )


# =============================================================================
# Catalog / Matching Providers
# =============================================================================


def get_catalog() -> ExerciseCatalog:
    """Get the process-wide exercise catalog."""
    return _get_catalog()


def get_matcher(catalog: ExerciseCatalog = Depends(get_catalog)) -> ExerciseNameMatcher:
    return ExerciseNameMatcher(catalog)


def get_plan_enricher(matcher: ExerciseNameMatcher = Depends(get_matcher)) -> PlanEnricher:
    return PlanEnricher(matcher)


# =============================================================================
# Service / Use Case Providers
# =============================================================================


def get_training_log_service(
    log_repo: LogRepository = Depends(get_log_repo),
) -> TrainingLogService:
    """
    Get training log service instance.

    Returns:
        TrainingLogService: Service bound to the request's log repository
    """
    return TrainingLogService(log_repo)


def get_import_plan_use_case(
    plan_repo: PlanRepository = Depends(get_plan_repo),
    enricher: PlanEnricher = Depends(get_plan_enricher),
) -> ImportPlanUseCase:
    """
    Get ImportPlanUseCase instance.

    Returns:
        ImportPlanUseCase: Use case for importing and storing plans
    """
    return ImportPlanUseCase(plan_repo=plan_repo, enricher=enricher)
