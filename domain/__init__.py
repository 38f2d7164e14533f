"""
Domain layer for the GymBuddy API.

This package contains pure domain models that are independent of
infrastructure concerns (storage backends, API, external services).
"""

from domain.models import (
    CatalogEntry,
    ExerciseCategory,
    Language,
    LogEntry,
    Plan,
    PlanExercise,
    TrainingDay,
)

__all__ = [
    "CatalogEntry",
    "ExerciseCategory",
    "Language",
    "LogEntry",
    "Plan",
    "PlanExercise",
    "TrainingDay",
]
