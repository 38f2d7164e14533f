"""
Plans router for storing and enriching training plans.

This router provides endpoints for:
- Reading and replacing the stored plan for a scope
- Enriching a plan document with catalog media ids (without storing it)
- Matching statistics for a plan document

Plan documents use the persisted camelCase shape:
    {"Día 1": {"label": "...", "color": "#e8643a", "exercises": [
        {"id": "...", "name": "...", "sets": "4", "reps": "10", "externalMediaId": "0025"}
    ]}}
"""
import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from pydantic import BaseModel

from api.deps import (
    get_import_plan_use_case,
    get_language,
    get_plan_enricher,
    get_plan_repo,
    get_scope,
)
from application.exceptions import StorageWriteError
from application.ports import PlanRepository
from application.use_cases import ImportPlanUseCase
from backend.core.plan_enricher import MatchingStats, PlanEnricher, matching_stats
from domain.converters import normalize_plan
from domain.models import Language

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/plans",
    tags=["Plans"],
)


# =============================================================================
# Response Models
# =============================================================================


class MatchingStatsResponse(BaseModel):
    """How many plan exercises carry a media id."""
    total: int
    matched: int
    unmatched: int
    match_rate: float

    @classmethod
    def from_stats(cls, stats: MatchingStats) -> "MatchingStatsResponse":
        return cls(
            total=stats.total,
            matched=stats.matched,
            unmatched=stats.unmatched,
            match_rate=stats.match_rate,
        )


class PlanResponse(BaseModel):
    """A plan document plus its matching statistics."""
    plan: Dict[str, Any]
    stats: MatchingStatsResponse


# =============================================================================
# Stored Plan Endpoints
# =============================================================================


@router.get("", response_model=Dict[str, Any])
async def get_plan(
    scope: str = Depends(get_scope),
    plan_repo: PlanRepository = Depends(get_plan_repo),
) -> Dict[str, Any]:
    """
    Get the stored plan for the scope.

    Returns an empty document when no plan has been stored yet.
    """
    plan = await plan_repo.load(scope)
    return plan.to_document()


@router.put("", response_model=PlanResponse)
async def put_plan(
    document: Dict[str, Any] = Body(..., description="Plan document keyed by day"),
    enrich: bool = Query(True, description="Attach catalog media ids before storing"),
    scope: str = Depends(get_scope),
    language: Language = Depends(get_language),
    use_case: ImportPlanUseCase = Depends(get_import_plan_use_case),
) -> PlanResponse:
    """
    Replace the stored plan for the scope.

    The document is normalized (missing ids and names are filled in, legacy
    media id fields are accepted) and, unless enrich=false, matched against
    the catalog before it is stored.

    Returns 507 if the plan could not be persisted.
    """
    try:
        result = await use_case.execute(document, scope, language, enrich=enrich)
    except StorageWriteError as e:
        logger.error(f"Failed to store plan for scope={scope}: {e}")
        raise HTTPException(status_code=507, detail=f"Could not save changes: {e.message}")

    return PlanResponse(
        plan=result.plan.to_document(),
        stats=MatchingStatsResponse.from_stats(result.stats),
    )


# =============================================================================
# Stateless Endpoints
# =============================================================================


@router.post("/enrich", response_model=PlanResponse)
def enrich_plan(
    document: Dict[str, Any] = Body(..., description="Plan document keyed by day"),
    language: Language = Depends(get_language),
    enricher: PlanEnricher = Depends(get_plan_enricher),
) -> PlanResponse:
    """
    Enrich a plan document with catalog media ids without storing it.

    Exercises that already have a media id are left untouched.
    """
    plan = enricher.enrich_plan(normalize_plan(document), language)
    return PlanResponse(
        plan=plan.to_document(),
        stats=MatchingStatsResponse.from_stats(matching_stats(plan)),
    )


@router.post("/stats", response_model=MatchingStatsResponse)
def plan_stats(
    document: Dict[str, Any] = Body(..., description="Plan document keyed by day"),
) -> MatchingStatsResponse:
    """Matching statistics for a plan document as-is."""
    return MatchingStatsResponse.from_stats(matching_stats(normalize_plan(document)))
