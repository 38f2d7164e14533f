"""
Logs router for per-exercise training history.

This router provides endpoints for:
- Reading all logs, or one exercise's history
- Appending a log entry
- Deleting a log entry by position

Write failures (quota exceeded, backend unavailable) are reported as 507 so
the client can tell the user the entry was not saved.
"""
import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path
from fastapi.responses import Response
from pydantic import BaseModel, Field

from api.deps import get_scope, get_training_log_service
from application.exceptions import LogEntryNotFoundError, StorageWriteError
from backend.core.training_log_service import TrainingLogService
from domain.models import LogEntry

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/logs",
    tags=["Logs"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class LogEntryRequest(BaseModel):
    """Request model for appending a log entry."""
    weight: str = Field("", description="Free-text weight, e.g. '62.5'")
    reps: str = Field("", description="Free-text reps, e.g. '10'")
    notes: str = ""


class HistoryResponse(BaseModel):
    """Response model for one exercise's history."""
    exercise_id: str
    entries: List[LogEntry]
    last_entry: Optional[LogEntry] = None


# =============================================================================
# Read Endpoints
# =============================================================================


@router.get("", response_model=Dict[str, List[LogEntry]])
async def list_logs(
    scope: str = Depends(get_scope),
    service: TrainingLogService = Depends(get_training_log_service),
) -> Dict[str, List[LogEntry]]:
    """All logs for the scope, keyed by exercise id."""
    return await service.all_logs(scope)


@router.get("/{exercise_id}", response_model=HistoryResponse)
async def get_history(
    exercise_id: str = Path(..., description="Plan exercise id"),
    scope: str = Depends(get_scope),
    service: TrainingLogService = Depends(get_training_log_service),
) -> HistoryResponse:
    """One exercise's history in insertion order (empty if never logged)."""
    entries = await service.history(scope, exercise_id)
    return HistoryResponse(
        exercise_id=exercise_id,
        entries=entries,
        last_entry=entries[-1] if entries else None,
    )


# =============================================================================
# Write Endpoints
# =============================================================================


@router.post("/{exercise_id}", response_model=LogEntry, status_code=201)
async def add_log_entry(
    request: LogEntryRequest,
    exercise_id: str = Path(..., description="Plan exercise id"),
    scope: str = Depends(get_scope),
    service: TrainingLogService = Depends(get_training_log_service),
):
    """
    Append a log entry for an exercise.

    An entry with neither weight nor reps is ignored and answered with 204.
    """
    try:
        entry = await service.add_entry(
            scope,
            exercise_id,
            weight=request.weight.strip(),
            reps=request.reps.strip(),
            notes=request.notes,
        )
    except StorageWriteError as e:
        logger.error(f"Failed to store log entry for '{exercise_id}' (scope={scope}): {e}")
        raise HTTPException(status_code=507, detail=f"Could not save changes: {e.message}")

    if entry is None:
        return Response(status_code=204)
    return entry


@router.delete("/{exercise_id}/{index}", response_model=LogEntry)
async def delete_log_entry(
    exercise_id: str = Path(..., description="Plan exercise id"),
    index: int = Path(..., ge=0, description="Position of the entry in the history"),
    scope: str = Depends(get_scope),
    service: TrainingLogService = Depends(get_training_log_service),
) -> LogEntry:
    """Delete the entry at `index` and return it."""
    try:
        return await service.delete_entry(scope, exercise_id, index)
    except LogEntryNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageWriteError as e:
        logger.error(f"Failed to delete log entry for '{exercise_id}' (scope={scope}): {e}")
        raise HTTPException(status_code=507, detail=f"Could not save changes: {e.message}")
