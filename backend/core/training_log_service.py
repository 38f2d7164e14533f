"""
Training log service.

Business logic on top of LogRepository for recording and reviewing
per-exercise weight/rep history:
- Appending and deleting entries
- Reading one exercise's history
- Progression summaries (stats + chart series)

Every mutation loads the current collection, applies the change and saves the
whole collection back. Callers await each mutation before issuing the next
one for the same scope; concurrent writers resolve as last-write-wins.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional

from application.exceptions import LogEntryNotFoundError
from application.ports import LogRepository
from backend.core.progression_service import ProgressionSummary, last_entry, summarize
from domain.models import LogCollection, LogEntry

logger = logging.getLogger(__name__)


def format_timestamp(moment: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a trailing "Z" (e.g. 2024-03-05T10:30:00.000Z)."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class TrainingLogService:
    """Records and reads per-exercise training logs for a scope."""

    def __init__(self, log_repo: LogRepository):
        """
        Initialize the service.

        Args:
            log_repo: Repository for scoped log persistence
        """
        self._log_repo = log_repo

    async def all_logs(self, scope: str) -> LogCollection:
        return await self._log_repo.load(scope)

    async def history(self, scope: str, exercise_id: str) -> List[LogEntry]:
        """Entries for one exercise in insertion order (empty if none)."""
        logs = await self._log_repo.load(scope)
        return list(logs.get(exercise_id, []))

    async def last_entry(self, scope: str, exercise_id: str) -> Optional[LogEntry]:
        logs = await self._log_repo.load(scope)
        return last_entry(logs, exercise_id)

    async def add_entry(
        self,
        scope: str,
        exercise_id: str,
        *,
        weight: str = "",
        reps: str = "",
        notes: str = "",
        now: Optional[datetime] = None,
    ) -> Optional[LogEntry]:
        """
        Append a log entry for an exercise.

        An entry with neither weight nor reps is ignored.

        Args:
            scope: User scope or the guest sentinel
            exercise_id: Plan exercise id the entry belongs to
            weight: Free-text weight (e.g. "62.5")
            reps: Free-text reps (e.g. "10")
            notes: Optional notes
            now: Timestamp override (defaults to current UTC time)

        Returns:
            The stored entry, or None if nothing was recorded

        Raises:
            StorageWriteError: The entry could not be persisted
        """
        if not weight and not reps:
            logger.debug(f"Ignoring empty log entry for '{exercise_id}'")
            return None

        timestamp = format_timestamp(now or datetime.now(timezone.utc))
        entry = LogEntry(date=timestamp, weight=weight, reps=reps, notes=notes)

        logs = await self._log_repo.load(scope)
        next_logs = dict(logs)
        next_logs[exercise_id] = [*logs.get(exercise_id, []), entry]

        await self._log_repo.save(next_logs, scope)
        logger.info(f"Logged entry for '{exercise_id}' (scope={scope})")
        return entry

    async def delete_entry(self, scope: str, exercise_id: str, index: int) -> LogEntry:
        """
        Remove the entry at `index` from an exercise's history.

        Returns:
            The removed entry

        Raises:
            LogEntryNotFoundError: No entry exists at that index
            StorageWriteError: The change could not be persisted
        """
        logs = await self._log_repo.load(scope)
        entries = list(logs.get(exercise_id, []))
        if index < 0 or index >= len(entries):
            raise LogEntryNotFoundError(exercise_id, index)

        removed = entries.pop(index)
        next_logs = dict(logs)
        next_logs[exercise_id] = entries

        await self._log_repo.save(next_logs, scope)
        logger.info(f"Deleted log entry {index} for '{exercise_id}' (scope={scope})")
        return removed

    async def progression(self, scope: str, exercise_id: str) -> ProgressionSummary:
        """Stats and chart series for one exercise's history."""
        return summarize(exercise_id, await self.history(scope, exercise_id))
