"""
Static exercise catalog.

The catalog is a curated, read-only table of CatalogEntry values loaded once
from ``shared/dictionaries/exercise_catalog.yaml``. Entry order is significant:
name matching uses it as the tie-break, so it is preserved exactly as declared.
"""
import logging
import pathlib
from functools import lru_cache
from typing import Iterable, List, Optional, Tuple

import yaml
from pydantic import ValidationError
from rapidfuzz import fuzz

from domain.models import CatalogEntry, ExerciseCategory, Language

logger = logging.getLogger(__name__)

ROOT = pathlib.Path(__file__).resolve().parents[2]

CATALOG_PATH = ROOT / "shared/dictionaries/exercise_catalog.yaml"

# Autocomplete near-miss threshold (0-1 scale)
SUGGEST_SCORE_CUTOFF = 0.6


class CatalogError(Exception):
    """Raised when catalog data is malformed or violates its invariants."""


class ExerciseCatalog:
    """
    Immutable, ordered collection of catalog entries.

    Lookups never raise for unknown input; they return None or an empty list.
    """

    def __init__(self, entries: Iterable[CatalogEntry]):
        self._entries: Tuple[CatalogEntry, ...] = tuple(entries)
        self._by_id = {}
        for entry in self._entries:
            if entry.id in self._by_id:
                raise CatalogError(f"Duplicate catalog id: {entry.id}")
            self._by_id[entry.id] = entry

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> "ExerciseCatalog":
        """Build a catalog from raw dicts (YAML rows, fixtures)."""
        entries = []
        for position, record in enumerate(records):
            try:
                entries.append(CatalogEntry.model_validate(record))
            except ValidationError as e:
                raise CatalogError(f"Invalid catalog entry at position {position}: {e}") from e
        return cls(entries)

    @classmethod
    def from_yaml(cls, path: pathlib.Path) -> "ExerciseCatalog":
        records = yaml.safe_load(path.read_text(encoding="utf-8")) or []
        if not isinstance(records, list):
            raise CatalogError(f"Catalog file {path} must contain a list of entries")
        catalog = cls.from_records(records)
        logger.info(f"Loaded {len(catalog)} catalog entries from {path.name}")
        return catalog

    @property
    def entries(self) -> Tuple[CatalogEntry, ...]:
        """All entries in declared order."""
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def by_category(self, category: ExerciseCategory) -> List[CatalogEntry]:
        """Entries tagged with the given muscle group, in catalog order."""
        category = ExerciseCategory(category)
        return [e for e in self._entries if e.category == category]

    def get_by_id(self, entry_id: str) -> Optional[CatalogEntry]:
        """Fetch an entry by id; None if unknown."""
        return self._by_id.get(entry_id)

    @staticmethod
    def display_name(entry: CatalogEntry, language: Language) -> str:
        return entry.display_name(language)

    def all_names(self, language: Language) -> List[str]:
        """Every display name in one language, in catalog order."""
        return [e.display_name(language) for e in self._entries]

    def search(self, query: str, language: Language, limit: int = 15) -> List[CatalogEntry]:
        """
        Case-insensitive substring search over display names.

        Args:
            query: Text to look for
            language: Which display name to search
            limit: Maximum number of entries to return

        Returns:
            Matching entries in catalog order
        """
        q = (query or "").lower().strip()
        if not q:
            return []

        results: List[CatalogEntry] = []
        for entry in self._entries:
            if q in entry.display_name(language).lower():
                results.append(entry)
                if len(results) >= limit:
                    break
        return results

    def suggest(self, query: str, language: Language, limit: int = 8) -> List[str]:
        """
        Autocomplete suggestions for a partially typed name.

        Substring hits come first in catalog order; remaining slots are filled
        with typo-tolerant near misses ranked by rapidfuzz score.
        """
        q = (query or "").lower().strip()
        if not q:
            return []

        hits = [e.display_name(language) for e in self.search(q, language, limit=limit)]
        if len(hits) >= limit:
            return hits

        scored: List[Tuple[str, float]] = []
        for name in self.all_names(language):
            if name in hits:
                continue
            score = fuzz.token_set_ratio(q, name.lower()) / 100.0
            if score >= SUGGEST_SCORE_CUTOFF:
                scored.append((name, score))

        # sort by score desc; stable sort keeps catalog order for ties
        scored.sort(key=lambda x: x[1], reverse=True)
        return hits + [name for name, _ in scored[: limit - len(hits)]]


@lru_cache
def get_catalog() -> ExerciseCatalog:
    """
    Get the process-wide catalog (loaded once).

    For testing, clear the cache with get_catalog.cache_clear().
    """
    return ExerciseCatalog.from_yaml(CATALOG_PATH)


def lookup(entry_id: str) -> Optional[CatalogEntry]:
    """Fetch an entry from the default catalog by id."""
    return get_catalog().get_by_id(entry_id)
