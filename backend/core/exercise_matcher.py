"""
Exercise name matching against the static catalog.

Resolves free-text exercise names (hand-typed, imported or AI-generated) to a
catalog entry in one language using a deterministic two-pass approach:
1. Exact name match (case-insensitive, trimmed)
2. Partial match: catalog name contains the input, or the input contains it

Both passes scan the catalog in declared order and the first hit wins, so the
same input against the same catalog always yields the same entry, and an exact
match always beats a partial one regardless of catalog position.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from backend.core.catalog import ExerciseCatalog
from domain.models import CatalogEntry, Language

logger = logging.getLogger(__name__)


class MatchMethod(str, Enum):
    """How the match was determined."""
    EXACT = "exact"
    PARTIAL = "partial"
    NONE = "none"


@dataclass(frozen=True)
class ExerciseMatch:
    """Result of a matching attempt."""
    entry: Optional[CatalogEntry]
    method: MatchMethod

    @property
    def matched(self) -> bool:
        return self.entry is not None


NO_MATCH = ExerciseMatch(entry=None, method=MatchMethod.NONE)


def normalize_name(name: str) -> str:
    """Normalize for comparison: lowercase and trim."""
    return name.lower().strip()


class ExerciseNameMatcher:
    """
    Matches free-text exercise names to catalog entries.

    A miss is a normal outcome (the catalog is a curated subset) and is
    reported as None, never as an error.
    """

    def __init__(self, catalog: ExerciseCatalog):
        """
        Initialize the matcher.

        Args:
            catalog: Catalog to resolve names against
        """
        self._catalog = catalog

    def match(self, name: str, language: Language) -> Optional[CatalogEntry]:
        """
        Resolve a name to a catalog entry.

        Args:
            name: Exercise name as written in the plan
            language: Language the name is written in

        Returns:
            The matching CatalogEntry, or None
        """
        return self.match_detailed(name, language).entry

    def match_detailed(self, name: str, language: Language) -> ExerciseMatch:
        """Like match(), but also reports which pass produced the result."""
        if not name or not name.strip():
            return NO_MATCH

        query = normalize_name(name)
        language = Language(language)

        for entry in self._catalog:
            if normalize_name(entry.display_name(language)) == query:
                logger.debug(f"Exact match: '{name}' -> '{entry.id}'")
                return ExerciseMatch(entry=entry, method=MatchMethod.EXACT)

        for entry in self._catalog:
            candidate = normalize_name(entry.display_name(language))
            if query in candidate or candidate in query:
                logger.debug(f"Partial match: '{name}' -> '{entry.id}'")
                return ExerciseMatch(entry=entry, method=MatchMethod.PARTIAL)

        logger.debug(f"No catalog match for '{name}' ({language.value})")
        return NO_MATCH
