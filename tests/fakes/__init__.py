"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of storage interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Write failure injection for error-path tests
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeLogRepository, create_log_repo

    # Direct instantiation
    repo = FakeLogRepository()
    repo.seed("guest", {"ex_1": [{"date": "2024-03-05T10:00:00Z", "weight": "60"}]})

    # Factory function with pre-populated data
    repo = create_log_repo(exercise_id="ex_1", weights=["60", "70"])
"""
from typing import List, Optional

from tests.fakes.key_value_store import FakeKeyValueStore
from tests.fakes.log_repository import FakeLogRepository
from tests.fakes.plan_repository import FakePlanRepository


# =============================================================================
# Factory Functions
# =============================================================================


def create_log_repo(
    *,
    scope: str = "guest",
    exercise_id: str = "ex_1",
    weights: Optional[List[str]] = None,
) -> FakeLogRepository:
    """
    Create a FakeLogRepository with one exercise history.

    Entries are dated one day apart starting 2024-03-01, in the given order.

    Args:
        scope: Scope to seed
        exercise_id: Exercise id to seed
        weights: Weight strings, one entry each

    Returns:
        FakeLogRepository with the seeded history
    """
    repo = FakeLogRepository()
    if weights:
        repo.seed(scope, {
            exercise_id: [
                {"date": f"2024-03-{i + 1:02d}T10:00:00.000Z", "weight": w, "reps": "10"}
                for i, w in enumerate(weights)
            ]
        })
    return repo


__all__ = [
    # Fakes
    "FakeKeyValueStore",
    "FakeLogRepository",
    "FakePlanRepository",
    # Factory functions
    "create_log_repo",
]
