"""
Domain converters for turning external plan documents into domain models.

All converters are pure functions with no side effects beyond id generation.

Examples:
    >>> from domain.converters import normalize_plan

    >>> plan = normalize_plan({"Día 1": {"label": "Pierna", "exercises": [{"name": "Hack Squat"}]}})
    >>> [ex.name for ex in plan.exercises()]
    ['Hack Squat']
"""

from domain.converters.plan_normalizer import (
    DEFAULT_DAY_COLORS,
    make_exercise_id,
    normalize_exercise,
    normalize_plan,
)

__all__ = [
    "DEFAULT_DAY_COLORS",
    "make_exercise_id",
    "normalize_exercise",
    "normalize_plan",
]
