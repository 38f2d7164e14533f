"""
Training plan models.

A plan is an ordered mapping from day key to a training day; each day holds
an ordered list of exercises. Both orders are display order and are kept
as-is through every transformation.

Persisted and wire documents use camelCase keys (``externalMediaId``); Python
code uses snake_case attributes. Fields outside the models (set by other
clients) are kept as extras and written back unchanged.
"""

from typing import Dict, Iterator, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, RootModel
from pydantic.alias_generators import to_camel


class PlanExercise(BaseModel):
    """
    An exercise prescribed within a training day.

    `external_media_id` is sticky: once assigned (by import, by the user or by
    a previous enrichment pass) it is never overwritten by enrichment.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    id: str
    name: str
    sets: str = ""
    reps: str = ""
    rest: Optional[str] = None
    external_media_id: Optional[str] = None
    note: Optional[str] = None
    # Library exercise the row was created from, and where its note came from
    exercise_id: Optional[str] = None
    note_source: Optional[Literal["catalog", "custom"]] = None
    note_catalog_id: Optional[str] = None

    @property
    def has_media(self) -> bool:
        """True if a media id has been assigned."""
        return bool(self.external_media_id)


class TrainingDay(BaseModel):
    """A labelled day of the plan with its ordered exercises."""

    model_config = ConfigDict(frozen=True, extra="allow")

    label: str = ""
    color: str = ""
    exercises: List[PlanExercise] = Field(default_factory=list)


class Plan(RootModel[Dict[str, TrainingDay]]):
    """
    Ordered mapping of day key -> TrainingDay.

    Examples:
        >>> plan = Plan({"Día 1": TrainingDay(label="Pierna", color="#e8643a")})
        >>> list(plan.day_keys())
        ['Día 1']
    """

    root: Dict[str, TrainingDay] = Field(default_factory=dict)

    def day_keys(self) -> Iterator[str]:
        return iter(self.root.keys())

    def days(self) -> Iterator[Tuple[str, TrainingDay]]:
        return iter(self.root.items())

    def exercises(self) -> Iterator[PlanExercise]:
        """Iterate every exercise across all days, in display order."""
        for day in self.root.values():
            yield from day.exercises

    def __len__(self) -> int:
        return len(self.root)

    def to_document(self) -> Dict[str, dict]:
        """Serialize to the persisted camelCase document shape."""
        return self.model_dump(by_alias=True, exclude_none=True)
