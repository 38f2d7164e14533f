"""
Repository Interfaces (Ports) for the GymBuddy API.

This package defines abstract interfaces that decouple domain logic from
infrastructure (storage backends, external services). Implementations are
provided in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import LogRepository

    class TrainingLogService:
        def __init__(self, log_repo: LogRepository):
            self.log_repo = log_repo

        async def history(self, scope, exercise_id):
            logs = await self.log_repo.load(scope)
            return logs.get(exercise_id, [])
"""

# Raw backing store
from application.ports.key_value_store import KeyValueStore

# Scoped documents
from application.ports.log_repository import LogRepository
from application.ports.plan_repository import PlanRepository

__all__ = [
    "KeyValueStore",
    "LogRepository",
    "PlanRepository",
]
