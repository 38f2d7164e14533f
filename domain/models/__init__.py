"""
Domain models for the GymBuddy API.

This package contains pure domain models that are independent of
infrastructure concerns (storage backends, API, external services).

These models represent the core business concepts:
- CatalogEntry: A curated exercise with bilingual names and a media id
- Plan: Ordered training days, each holding ordered PlanExercise values
- LogEntry: One logged set in an exercise's history

Usage:
    >>> from domain.models import Plan, TrainingDay, PlanExercise

    >>> plan = Plan({
    ...     "Día 1": TrainingDay(
    ...         label="Pecho",
    ...         color="#e8643a",
    ...         exercises=[
    ...             PlanExercise(id="ex_1", name="Press Banco Plano con Barra", sets="4", reps="10"),
    ...         ],
    ...     )
    ... })

    >>> # Serialize to the persisted document shape
    >>> document = plan.to_document()
"""

from domain.models.catalog import CatalogEntry, ExerciseCategory, Language
from domain.models.log import LogCollection, LogEntry, dump_collection
from domain.models.plan import Plan, PlanExercise, TrainingDay

__all__ = [
    # Catalog
    "CatalogEntry",
    "ExerciseCategory",
    "Language",
    # Plans
    "Plan",
    "PlanExercise",
    "TrainingDay",
    # Logs
    "LogEntry",
    "LogCollection",
    "dump_collection",
]
