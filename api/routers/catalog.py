"""
Catalog router for exercise lookup and name matching.

This router provides endpoints for:
- Listing catalog entries (optionally by category)
- Display names and autocomplete suggestions for the exercise picker
- Matching a free-text exercise name to a catalog entry
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from api.deps import get_catalog, get_language, get_matcher
from backend.core.catalog import ExerciseCatalog
from backend.core.exercise_matcher import ExerciseMatch, ExerciseNameMatcher
from domain.models import CatalogEntry, ExerciseCategory, Language

router = APIRouter(
    prefix="/catalog",
    tags=["Catalog"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class MatchRequest(BaseModel):
    """Request model for matching a single exercise name."""
    name: str = Field(..., description="Exercise name as typed or imported")
    language: Optional[Language] = Field(None, description="Language of the name (es, en)")


class MatchResponse(BaseModel):
    """Response model for a name match (camelCase, like the nested entry)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    matched: bool
    method: str = Field(..., description="exact, partial or none")
    entry: Optional[CatalogEntry] = None
    external_media_id: Optional[str] = None

    @classmethod
    def from_match(cls, match: ExerciseMatch) -> "MatchResponse":
        """Convert ExerciseMatch to response model."""
        return cls(
            matched=match.matched,
            method=match.method.value,
            entry=match.entry,
            external_media_id=match.entry.external_media_id if match.entry else None,
        )


class CatalogListResponse(BaseModel):
    """Response model for a list of catalog entries."""
    entries: List[CatalogEntry]
    count: int


class NamesResponse(BaseModel):
    language: Language
    names: List[str]


# =============================================================================
# Lookup Endpoints
# =============================================================================


@router.get("", response_model=CatalogListResponse)
def list_catalog(
    category: Optional[ExerciseCategory] = Query(None, description="Filter by muscle group"),
    catalog: ExerciseCatalog = Depends(get_catalog),
) -> CatalogListResponse:
    """List catalog entries in catalog order, optionally filtered by category."""
    entries = catalog.by_category(category) if category else list(catalog.entries)
    return CatalogListResponse(entries=entries, count=len(entries))


@router.get("/names", response_model=NamesResponse)
def list_names(
    language: Language = Depends(get_language),
    catalog: ExerciseCatalog = Depends(get_catalog),
) -> NamesResponse:
    """Every display name in one language, in catalog order."""
    return NamesResponse(language=language, names=catalog.all_names(language))


@router.get("/search", response_model=CatalogListResponse)
def search_catalog(
    q: str = Query(..., min_length=1, description="Text to look for in display names"),
    limit: int = Query(15, ge=1, le=50),
    language: Language = Depends(get_language),
    catalog: ExerciseCatalog = Depends(get_catalog),
) -> CatalogListResponse:
    """Case-insensitive substring search over display names."""
    entries = catalog.search(q, language, limit=limit)
    return CatalogListResponse(entries=entries, count=len(entries))


@router.get("/suggest", response_model=List[str])
def suggest_names(
    q: str = Query("", description="Partially typed exercise name"),
    limit: int = Query(8, ge=1, le=20),
    language: Language = Depends(get_language),
    catalog: ExerciseCatalog = Depends(get_catalog),
) -> List[str]:
    """
    Autocomplete suggestions for the exercise picker.

    Substring hits come first; near misses fill the remaining slots.
    An empty query returns no suggestions.
    """
    return catalog.suggest(q, language, limit=limit)


@router.get("/{entry_id}", response_model=CatalogEntry)
def get_entry(
    entry_id: str = Path(..., description="Catalog entry id"),
    catalog: ExerciseCatalog = Depends(get_catalog),
) -> CatalogEntry:
    """Fetch a single catalog entry by id."""
    entry = catalog.get_by_id(entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"Catalog entry not found: {entry_id}")
    return entry


# =============================================================================
# Matching Endpoints
# =============================================================================


@router.post("/match", response_model=MatchResponse)
def match_name(
    request: MatchRequest,
    default_language: Language = Depends(get_language),
    matcher: ExerciseNameMatcher = Depends(get_matcher),
) -> MatchResponse:
    """
    Match a free-text exercise name to a catalog entry.

    Exact (case-insensitive) display-name equality wins over substring
    containment; a name with no match returns matched=false.
    """
    language = request.language or default_language
    return MatchResponse.from_match(matcher.match_detailed(request.name, language))
