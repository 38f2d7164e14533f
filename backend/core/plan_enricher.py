"""
Plan enrichment: attach catalog media ids to plan exercises by name.

Enrichment is best-effort and idempotent:
- an exercise that already has an external media id is returned unchanged
  (whether the id came from an import, the user or an earlier pass)
- a matched exercise gets a copy with the entry's external media id
- an unmatched exercise is returned unchanged (custom exercise)

Plans are never mutated; every function returns new values. Fields the
enricher does not touch (including unknown ones) are copied as-is.
"""
import logging
from dataclasses import dataclass
from typing import Set

from backend.core.exercise_matcher import ExerciseNameMatcher
from domain.models import Language, Plan, PlanExercise

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchingStats:
    """How many plan exercises carry a media id."""
    total: int
    matched: int
    unmatched: int
    match_rate: float


class PlanEnricher:
    """Applies an ExerciseNameMatcher across plan structures."""

    def __init__(self, matcher: ExerciseNameMatcher):
        self._matcher = matcher

    def enrich_exercise(self, exercise: PlanExercise, language: Language) -> PlanExercise:
        """
        Attach a media id to one exercise if it has none and its name matches.

        Args:
            exercise: Plan exercise to enrich
            language: Language the exercise name is written in

        Returns:
            The same exercise, or an updated copy on a catalog hit
        """
        if exercise.external_media_id:
            return exercise

        entry = self._matcher.match(exercise.name, language)
        if entry is None:
            return exercise

        return exercise.model_copy(update={"external_media_id": entry.external_media_id})

    def enrich_plan(self, plan: Plan, language: Language) -> Plan:
        """Enrich every exercise of every day, keeping day and exercise order."""
        enriched = {
            day_key: day.model_copy(update={
                "exercises": [self.enrich_exercise(ex, language) for ex in day.exercises],
            })
            for day_key, day in plan.days()
        }
        result = Plan(enriched)

        stats = matching_stats(result)
        logger.info(
            f"Enriched plan ({Language(language).value}): "
            f"{stats.matched}/{stats.total} exercises matched"
        )
        return result


def matching_stats(plan: Plan) -> MatchingStats:
    """
    Count matched vs unmatched exercises across all days.

    match_rate is 0 for an empty plan.
    """
    total = 0
    matched = 0
    for exercise in plan.exercises():
        total += 1
        if exercise.external_media_id:
            matched += 1

    return MatchingStats(
        total=total,
        matched=matched,
        unmatched=total - matched,
        match_rate=matched / total if total > 0 else 0.0,
    )


def collect_media_ids(plan: Plan) -> Set[str]:
    """Unique external media ids across all exercises that have one."""
    return {ex.external_media_id for ex in plan.exercises() if ex.external_media_id}
