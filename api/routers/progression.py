"""
Progression router for exercise weight history.

This router provides the chart data for one exercise:
- current / max / min weight (null until a numeric weight is logged)
- one chart point per log entry, labelled dd/mm
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Path
from pydantic import BaseModel, Field

from api.deps import get_scope, get_training_log_service
from backend.core.progression_service import ProgressionSummary
from backend.core.training_log_service import TrainingLogService

router = APIRouter(
    prefix="/progression",
    tags=["Progression"],
)


# =============================================================================
# Response Models
# =============================================================================


class WeightStatsResponse(BaseModel):
    current: float
    max: float
    min: float


class SeriesPointResponse(BaseModel):
    date: str = Field(..., description="Day/month label, e.g. '05/03'")
    weight: float


class ProgressionResponse(BaseModel):
    """Response model for an exercise's progression."""
    exercise_id: str
    stats: Optional[WeightStatsResponse] = None
    series: List[SeriesPointResponse] = Field(default_factory=list)
    total_entries: int = 0

    @classmethod
    def from_summary(cls, summary: ProgressionSummary) -> "ProgressionResponse":
        """Convert ProgressionSummary to response model."""
        stats = None
        if summary.stats is not None:
            stats = WeightStatsResponse(
                current=summary.stats.current,
                max=summary.stats.max,
                min=summary.stats.min,
            )
        return cls(
            exercise_id=summary.exercise_id,
            stats=stats,
            series=[SeriesPointResponse(date=p.date, weight=p.weight) for p in summary.series],
            total_entries=summary.total_entries,
        )


# =============================================================================
# Progression Endpoints
# =============================================================================


@router.get("/{exercise_id}", response_model=ProgressionResponse)
async def get_progression(
    exercise_id: str = Path(..., description="Plan exercise id"),
    scope: str = Depends(get_scope),
    service: TrainingLogService = Depends(get_training_log_service),
) -> ProgressionResponse:
    """
    Weight statistics and chart series for one exercise.

    Series points follow log order; blank or non-numeric weights chart as 0
    but are left out of the statistics.
    """
    summary = await service.progression(scope, exercise_id)
    return ProgressionResponse.from_summary(summary)
