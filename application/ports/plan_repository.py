"""
Plan Repository Interface (Port).

Per-scope persistence of the user's training plan. Same scoping scheme and
error contract as LogRepository: load() recovers to an empty plan, save()
raises StorageWriteError.
"""
from typing import Protocol

from domain.models import Plan


class PlanRepository(Protocol):
    """Abstract interface for scoped training plan persistence."""

    async def load(self, scope: str) -> Plan:
        """
        Load the plan stored for a scope.

        Args:
            scope: User scope or the guest sentinel

        Returns:
            The normalized plan (empty if none or corrupt)
        """
        ...

    async def save(self, plan: Plan, scope: str) -> None:
        """
        Replace the persisted plan for a scope.

        Raises:
            StorageWriteError: The backing store rejected the write
        """
        ...
