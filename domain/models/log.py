"""
Training log models.

A history for one exercise is an insertion-ordered list of LogEntry values,
assumed chronological. Nothing in the system re-sorts entries by date.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, TypeAdapter, field_validator


class LogEntry(BaseModel):
    """A single logged set: ISO timestamp plus free-text weight/reps/notes."""

    model_config = ConfigDict(frozen=True)

    date: str
    weight: str = ""
    reps: str = ""
    notes: str = ""

    @field_validator("weight", "reps", "notes", mode="before")
    @classmethod
    def coerce_free_text(cls, v: Any) -> Any:
        """Accept numbers and null as written by older clients."""
        if v is None:
            return ""
        if isinstance(v, bool):
            return v
        if isinstance(v, float) and v.is_integer():
            return str(int(v))
        if isinstance(v, (int, float)):
            return str(v)
        return v


LogCollection = Dict[str, List[LogEntry]]

LOG_COLLECTION_ADAPTER: TypeAdapter[LogCollection] = TypeAdapter(LogCollection)


def dump_collection(collection: LogCollection) -> Dict[str, List[dict]]:
    """Convert a LogCollection into plain JSON-ready data."""
    return LOG_COLLECTION_ADAPTER.dump_python(collection, mode="json")
