"""
ImportPlan Use Case.

Orchestrates plan import: normalize a loosely-shaped plan document,
optionally enrich it with catalog media ids, and persist it for a scope.
"""

import logging
from dataclasses import dataclass
from typing import Any

from application.ports import PlanRepository
from backend.core.plan_enricher import MatchingStats, PlanEnricher, matching_stats
from domain.converters import normalize_plan
from domain.models import Language, Plan

logger = logging.getLogger(__name__)


@dataclass
class ImportPlanResult:
    """Result of the ImportPlan use case execution."""

    plan: Plan
    stats: MatchingStats
    enriched: bool


class ImportPlanUseCase:
    """
    Use case for importing a plan document.

    Orchestrates the following workflow:
    1. Normalize the raw document into a Plan
    2. Enrich exercises with catalog media ids (unless disabled)
    3. Persist via repository
    4. Return the stored plan with matching statistics

    Storage failures are not caught: a plan that could not be saved must be
    reported to the caller.

    Usage:
        >>> use_case = ImportPlanUseCase(plan_repo=plan_repo, enricher=enricher)
        >>> result = await use_case.execute(document, scope="guest", language=Language.ES)
        >>> result.stats.match_rate
        0.5
    """

    def __init__(
        self,
        plan_repo: PlanRepository,
        enricher: PlanEnricher,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            plan_repo: Repository for persisting plans
            enricher: Plan enricher bound to the catalog
        """
        self._plan_repo = plan_repo
        self._enricher = enricher

    async def execute(
        self,
        document: Any,
        scope: str,
        language: Language,
        *,
        enrich: bool = True,
    ) -> ImportPlanResult:
        """
        Execute the import workflow.

        Args:
            document: Raw plan document (dict of day key -> day)
            scope: User scope or the guest sentinel
            language: Language the exercise names are written in
            enrich: Whether to attach catalog media ids

        Returns:
            ImportPlanResult with the stored plan and its matching stats
        """
        plan = normalize_plan(document)
        if enrich:
            plan = self._enricher.enrich_plan(plan, language)

        await self._plan_repo.save(plan, scope)

        stats = matching_stats(plan)
        logger.info(
            f"Imported plan with {len(plan)} days for scope={scope} "
            f"(match rate {stats.match_rate:.0%})"
        )
        return ImportPlanResult(plan=plan, stats=stats, enriched=enrich)
