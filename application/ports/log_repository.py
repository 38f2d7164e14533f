"""
Log Repository Interface (Port).

This module defines the abstract interface for per-scope training log
persistence. A scope identifies the owning user, or the guest sentinel for
unauthenticated/local use; two scopes never share persisted state.

Error contract (deliberately asymmetric):
- load() recovers: a missing document reads as an empty collection, and a
  corrupted or mis-shaped document is logged and also reads as empty.
- save() raises: any rejected write surfaces as StorageWriteError so the
  caller can tell the user their entry was not saved.

The contract is async so that a networked store can be swapped in without
changing callers. There is no internal locking: callers await each mutation
before issuing the next for the same scope. Concurrent writers to one scope
resolve as last-write-wins.
"""
from typing import Protocol

from domain.models import LogCollection


class LogRepository(Protocol):
    """
    Abstract interface for scoped training log persistence.

    Documents are stored as a single JSON object per scope mapping exercise
    id to its ordered list of log entries.
    """

    async def load(self, scope: str) -> LogCollection:
        """
        Load every exercise history for a scope.

        Args:
            scope: User scope or the guest sentinel

        Returns:
            Mapping of exercise id -> log entries (empty if none or corrupt)
        """
        ...

    async def save(self, collection: LogCollection, scope: str) -> None:
        """
        Replace the persisted collection for a scope.

        Args:
            collection: Full mapping of exercise id -> log entries
            scope: User scope or the guest sentinel

        Raises:
            StorageWriteError: The backing store rejected the write
        """
        ...
