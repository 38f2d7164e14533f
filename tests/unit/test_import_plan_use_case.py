"""
Unit tests for application/use_cases/import_plan.py

Uses FakePlanRepository and the bundled catalog.
"""
import pytest

from application.exceptions import StorageWriteError
from application.use_cases import ImportPlanResult, ImportPlanUseCase
from backend.core.catalog import get_catalog
from backend.core.exercise_matcher import ExerciseNameMatcher
from backend.core.plan_enricher import PlanEnricher
from domain.models import Language
from tests.fakes import FakePlanRepository

pytestmark = pytest.mark.unit


DOCUMENT = {
    "Día 1": {
        "label": "Pecho",
        "exercises": [
            {"id": "ex_1", "name": "Press Banco Plano con Barra", "sets": "4", "reps": "10"},
            {"id": "ex_2", "name": "Custom Exercise", "sets": "3", "reps": "12"},
        ],
    },
}


@pytest.fixture
def repo():
    return FakePlanRepository()


@pytest.fixture
def use_case(repo):
    enricher = PlanEnricher(ExerciseNameMatcher(get_catalog()))
    return ImportPlanUseCase(plan_repo=repo, enricher=enricher)


class TestImportPlan:

    @pytest.mark.asyncio
    async def test_enriches_and_stores(self, use_case, repo):
        result = await use_case.execute(DOCUMENT, "guest", Language.ES)

        assert isinstance(result, ImportPlanResult)
        assert result.enriched is True
        assert result.stats.matched == 1
        assert result.stats.match_rate == 0.5

        stored = await repo.load("guest")
        assert stored.to_document() == result.plan.to_document()
        assert stored.root["Día 1"].exercises[0].external_media_id == "0025"

    @pytest.mark.asyncio
    async def test_skip_enrichment(self, use_case, repo):
        result = await use_case.execute(DOCUMENT, "guest", Language.ES, enrich=False)
        assert result.stats.matched == 0
        assert result.enriched is False

    @pytest.mark.asyncio
    async def test_normalizes_document(self, use_case):
        result = await use_case.execute(DOCUMENT, "guest", Language.ES)
        day = result.plan.root["Día 1"]
        assert day.color == "#e8643a"

    @pytest.mark.asyncio
    async def test_stores_under_scope(self, use_case, repo):
        await use_case.execute(DOCUMENT, "user-1", Language.ES)
        assert len(await repo.load("user-1")) == 1
        assert len(await repo.load("guest")) == 0

    @pytest.mark.asyncio
    async def test_write_failure_propagates(self, use_case, repo):
        repo.fail_writes = True
        with pytest.raises(StorageWriteError):
            await use_case.execute(DOCUMENT, "guest", Language.ES)
