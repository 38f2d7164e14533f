"""
Unit tests for backend/core/exercise_matcher.py

Tests cover:
- Exact and partial matching in both languages
- Exact matches winning over earlier partial candidates
- Misses and empty input
- Round trip: every catalog display name resolves to its own entry
"""
import pytest

from backend.core.catalog import ExerciseCatalog, get_catalog
from backend.core.exercise_matcher import (
    ExerciseNameMatcher,
    MatchMethod,
    NO_MATCH,
    normalize_name,
)
from domain.models import Language


@pytest.fixture
def matcher():
    return ExerciseNameMatcher(get_catalog())


@pytest.fixture
def small_catalog():
    def record(entry_id, name_es, name_en, media_id):
        return {
            "id": entry_id,
            "name_es": name_es,
            "name_en": name_en,
            "external_media_id": media_id,
            "category": "chest",
            "default_sets": "4",
            "default_reps": "10",
            "default_rest": "90s",
        }

    return ExerciseCatalog.from_records([
        record("bench", "Press Banco Plano con Barra", "Barbell Bench Press", "0025"),
        record("press", "Press", "Press", "9999"),
    ])


@pytest.mark.unit
class TestNormalizeName:

    def test_lowercases_and_trims(self):
        assert normalize_name("  Hack Squat ") == "hack squat"


@pytest.mark.unit
class TestExactMatch:
    """Tests for the exact-name pass."""

    def test_exact_spanish(self, matcher):
        entry = matcher.match("Sentadilla Hack", Language.ES)
        assert entry is not None
        assert entry.id == "hack_squat"
        assert entry.external_media_id == "1420"

    def test_exact_is_case_and_whitespace_insensitive(self, matcher):
        entry = matcher.match("  sentadilla HACK ", Language.ES)
        assert entry.id == "hack_squat"

    def test_exact_reports_method(self, matcher):
        result = matcher.match_detailed("Hack Squat", Language.EN)
        assert result.method == MatchMethod.EXACT
        assert result.matched is True

    def test_exact_beats_earlier_partial(self, small_catalog):
        """'Press' is contained in an earlier name but equals a later one."""
        matcher = ExerciseNameMatcher(small_catalog)
        result = matcher.match_detailed("press", Language.ES)
        assert result.entry.id == "press"
        assert result.method == MatchMethod.EXACT

    def test_language_selects_display_name(self, matcher):
        """A Spanish name does not match when searching English names."""
        assert matcher.match("Press Banco Plano con Barra", Language.ES).id == "barbell_bench_press"
        assert matcher.match("Press Banco Plano con Barra", Language.EN) is None

    def test_accepts_language_string(self, matcher):
        assert matcher.match("Hip Thrust", "en").id == "hip_thrust"


@pytest.mark.unit
class TestPartialMatch:
    """Tests for the containment pass."""

    def test_input_contained_in_catalog_name(self, matcher):
        result = matcher.match_detailed("Hack", Language.EN)
        assert result.entry.id == "hack_squat"
        assert result.method == MatchMethod.PARTIAL

    def test_catalog_name_contained_in_input(self, matcher):
        entry = matcher.match("Hammer Curl (alternado)", Language.EN)
        assert entry.id == "hammer_curl"

    def test_first_partial_in_catalog_order_wins(self, matcher):
        """Several squats contain 'squat'; the first declared one wins."""
        assert matcher.match("squat", Language.EN).id == "hack_squat"


@pytest.mark.unit
class TestNoMatch:
    """Tests for misses."""

    def test_unknown_name(self, matcher):
        assert matcher.match("Custom Exercise", Language.ES) is None

    def test_unknown_name_detailed(self, matcher):
        result = matcher.match_detailed("Custom Exercise", Language.ES)
        assert result is NO_MATCH
        assert result.matched is False
        assert result.method == MatchMethod.NONE

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_input(self, matcher, name):
        assert matcher.match(name, Language.EN) is None

    def test_empty_catalog(self):
        matcher = ExerciseNameMatcher(ExerciseCatalog([]))
        assert matcher.match("Hack Squat", Language.EN) is None


@pytest.mark.unit
class TestRoundTrip:
    """Every display name resolves to the entry that carries it."""

    @pytest.mark.parametrize("language", [Language.ES, Language.EN])
    def test_display_names_resolve_to_their_entry(self, matcher, language):
        for entry in get_catalog():
            result = matcher.match(entry.display_name(language), language)
            assert result is not None
            assert result.id == entry.id

    def test_matching_is_deterministic(self, matcher):
        first = matcher.match("curl", Language.EN)
        for _ in range(5):
            assert matcher.match("curl", Language.EN) is first
