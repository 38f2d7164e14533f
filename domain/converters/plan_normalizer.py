"""
Converters: loosely-shaped plan documents -> domain Plan.

Plans arrive from storage, file imports and AI generators with missing or
mistyped fields. These converters coerce them into Plan values without
raising: non-string fields fall back to defaults, missing exercise ids are
generated and missing day colours cycle through the default palette.

Legacy documents that carry ``exerciseDbId`` instead of ``externalMediaId``
are accepted. Keys the models do not declare are passed through untouched.
"""

import random
import string
import time
from typing import Any, Dict, FrozenSet, List, Optional, Type

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from domain.models import Plan, PlanExercise, TrainingDay


DEFAULT_DAY_COLORS: List[str] = ["#e8643a", "#3ab8e8", "#7de83a"]

LEGACY_MEDIA_ID_KEYS = ("externalMediaId", "external_media_id", "exerciseDbId")


def _string(value: Any, fallback: str = "") -> str:
    return value if isinstance(value, str) else fallback


def _optional_string(value: Any) -> Optional[str]:
    """Strings pass through; blanks and non-strings become None."""
    if isinstance(value, str) and value:
        return value
    return None


def _declared_keys(model: Type[BaseModel]) -> FrozenSet[str]:
    """Field names plus their aliases (camelCase on the wire)."""
    keys = set(model.model_fields)
    keys.update(to_camel(name) for name in model.model_fields)
    keys.update(f.alias for f in model.model_fields.values() if f.alias)
    return frozenset(keys)


_EXERCISE_KEYS = _declared_keys(PlanExercise) | set(LEGACY_MEDIA_ID_KEYS)
_DAY_KEYS = _declared_keys(TrainingDay)


def _extras(data: Dict[str, Any], declared: FrozenSet[str]) -> Dict[str, Any]:
    return {str(k): v for k, v in data.items() if k not in declared}


def make_exercise_id() -> str:
    """Generate a unique exercise id (``ex_<millis>_<random6>``)."""
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=6))
    return f"ex_{int(time.time() * 1000)}_{suffix}"


def normalize_exercise(raw: Any, index: int) -> PlanExercise:
    """
    Coerce one raw exercise into a PlanExercise.

    Args:
        raw: Anything; non-dicts are treated as an empty exercise
        index: Position within the day (used for generated ids and names)

    Returns:
        PlanExercise with every required field populated
    """
    data: Dict[str, Any] = raw if isinstance(raw, dict) else {}

    media_id = None
    for key in LEGACY_MEDIA_ID_KEYS:
        media_id = _optional_string(data.get(key))
        if media_id:
            break

    exercise_id = _optional_string(data.get("exerciseId"))
    note_source = data.get("noteSource")
    if isinstance(note_source, str):
        note_source = "catalog" if note_source == "catalog" else "custom"
    else:
        note_source = None

    return PlanExercise(
        id=_string(data.get("id"), f"{make_exercise_id()}_{index}"),
        name=_string(data.get("name"), f"Ejercicio {index + 1}"),
        sets=_string(data.get("sets")),
        reps=_string(data.get("reps")),
        rest=_optional_string(data.get("rest")),
        external_media_id=media_id,
        note=_optional_string(data.get("note")),
        exercise_id=exercise_id,
        note_source=note_source,
        note_catalog_id=_optional_string(data.get("noteCatalogId")) or exercise_id,
        **_extras(data, _EXERCISE_KEYS),
    )


def normalize_plan(raw: Any) -> Plan:
    """
    Coerce a raw plan document into a Plan, keeping day order.

    Non-dict input yields an empty plan.
    """
    source: Dict[str, Any] = raw if isinstance(raw, dict) else {}

    days: Dict[str, TrainingDay] = {}
    for day_index, (day_key, raw_day) in enumerate(source.items()):
        day: Dict[str, Any] = raw_day if isinstance(raw_day, dict) else {}
        raw_exercises = day.get("exercises")
        if not isinstance(raw_exercises, list):
            raw_exercises = []
        default_color = DEFAULT_DAY_COLORS[day_index % len(DEFAULT_DAY_COLORS)]

        days[str(day_key)] = TrainingDay(
            label=_string(day.get("label")),
            color=_string(day.get("color"), default_color),
            exercises=[
                normalize_exercise(exercise, ex_index)
                for ex_index, exercise in enumerate(raw_exercises)
            ],
            **_extras(day, _DAY_KEYS),
        )

    return Plan(days)
