"""
Catalog value objects for the curated exercise library.

Each entry carries bilingual display names and an opaque external media
identifier used by the media lookup collaborator to fetch reference images.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Language(str, Enum):
    """Languages the catalog carries display names for."""

    ES = "es"
    EN = "en"


class ExerciseCategory(str, Enum):
    """Primary muscle group tag of a catalog entry."""

    QUADRICEPS = "quadriceps"
    HAMSTRINGS = "hamstrings"
    GLUTES = "glutes"
    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    CALVES = "calves"
    CORE = "core"


class CatalogEntry(BaseModel):
    """
    A single curated exercise definition.

    `external_media_id` is opaque: it is not guaranteed to be numeric or
    unique, since variants of the same movement may share one media id.

    Examples:
        >>> entry = CatalogEntry(
        ...     id="hack_squat",
        ...     name_es="Sentadilla Hack",
        ...     name_en="Hack Squat",
        ...     external_media_id="1420",
        ...     category=ExerciseCategory.QUADRICEPS,
        ...     default_sets="4",
        ...     default_reps="12",
        ...     default_rest="90s",
        ... )
        >>> entry.display_name(Language.EN)
        'Hack Squat'
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(..., min_length=1, description="Stable catalog identifier")
    name_es: str = Field(..., min_length=1, description="Spanish display name")
    name_en: str = Field(..., min_length=1, description="English display name")
    external_media_id: str = Field(..., description="Opaque media lookup key")
    category: ExerciseCategory
    equipment: Optional[str] = None
    default_sets: str
    default_reps: str
    default_rest: str
    default_note: Optional[str] = None

    @field_validator("name_es", "name_en")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        """Display names must contain something other than whitespace."""
        if not v.strip():
            raise ValueError("display name must not be blank")
        return v

    def display_name(self, language: Language) -> str:
        """Return the display name for the given language."""
        return self.name_en if Language(language) == Language.EN else self.name_es
