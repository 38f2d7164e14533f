"""
Progression statistics for logged exercise history.

This module provides pure functions turning a log history into:
- Summary weight stats (current, max, min)
- A plotting-ready series of (date, weight) points

Histories are taken in insertion order, which is assumed chronological.
Nothing here re-sorts by the `date` field, so "current" always means the
last logged weight, not the most recent calendar date.
"""
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Sequence

from domain.models import LogCollection, LogEntry


# =============================================================================
# Parsing helpers
# =============================================================================

# Leading decimal number, the way a browser's parseFloat reads "62.5kg" as 62.5
_LEADING_NUMBER = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

SERIES_DATE_FORMAT = "%d/%m"


def parse_weight(value: str) -> Optional[float]:
    """
    Parse the leading numeric prefix of a free-text weight.

    Returns:
        The parsed number, or None if the text has no numeric prefix
    """
    if not value:
        return None
    match = _LEADING_NUMBER.match(value)
    if not match:
        return None
    return float(match.group(0))


def format_log_date(iso: str) -> str:
    """
    Format an ISO-8601 timestamp as dd/mm for chart labels.

    The timestamp is shown in its own offset (UTC for a trailing "Z").
    Unparsable input is returned unchanged.
    """
    value = iso
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(value).strftime(SERIES_DATE_FORMAT)
    except ValueError:
        return iso


# =============================================================================
# Response DTOs
# =============================================================================


@dataclass(frozen=True)
class WeightStats:
    """Summary of the logged weights for one exercise."""
    current: float
    max: float
    min: float


@dataclass(frozen=True)
class SeriesPoint:
    """One chart point."""
    date: str
    weight: float


@dataclass
class ProgressionSummary:
    """Stats plus chart series for one exercise."""
    exercise_id: str
    stats: Optional[WeightStats]
    series: List[SeriesPoint] = field(default_factory=list)
    total_entries: int = 0


# =============================================================================
# Progression functions
# =============================================================================


def compute_stats(entries: Sequence[LogEntry]) -> Optional[WeightStats]:
    """
    Compute current/max/min weight for a history.

    Only entries with a non-empty, numeric weight count. `current` is the last
    such weight in insertion order.

    Returns:
        WeightStats, or None when no usable weight sample exists
    """
    weights = [
        w for w in (parse_weight(e.weight) for e in entries if e.weight)
        if w is not None
    ]
    if not weights:
        return None

    return WeightStats(
        current=weights[-1],
        max=max(weights),
        min=min(weights),
    )


def build_series(entries: Sequence[LogEntry]) -> List[SeriesPoint]:
    """
    Map every entry to a chart point, in input order.

    Blank or unparsable weights become 0. No sorting or deduplication.
    """
    return [
        SeriesPoint(
            date=format_log_date(e.date),
            weight=parse_weight(e.weight) or 0.0,
        )
        for e in entries
    ]


def last_entry(collection: LogCollection, exercise_id: str) -> Optional[LogEntry]:
    """Most recently appended entry for an exercise, or None."""
    entries = collection.get(exercise_id) or []
    return entries[-1] if entries else None


def summarize(exercise_id: str, entries: Sequence[LogEntry]) -> ProgressionSummary:
    """Stats and series for one exercise history."""
    return ProgressionSummary(
        exercise_id=exercise_id,
        stats=compute_stats(entries),
        series=build_series(entries),
        total_entries=len(entries),
    )
