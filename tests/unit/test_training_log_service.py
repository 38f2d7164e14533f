"""
Unit tests for backend/core/training_log_service.py

Uses FakeLogRepository; no storage backend required.
"""
import json
import re
from datetime import datetime, timedelta, timezone

import pytest

from application.exceptions import LogEntryNotFoundError, StorageWriteError
from backend.core.progression_service import format_log_date
from backend.core.training_log_service import TrainingLogService, format_timestamp
from infrastructure.storage import KeyValueLogRepository
from tests.fakes import FakeKeyValueStore, FakeLogRepository, create_log_repo

# All tests in this module are pure logic tests (no TestClient) - mark as unit
pytestmark = pytest.mark.unit

NOW = datetime(2024, 3, 5, 10, 30, tzinfo=timezone.utc)


@pytest.fixture
def repo():
    return FakeLogRepository()


@pytest.fixture
def service(repo):
    return TrainingLogService(repo)


class TestAddEntry:
    """Tests for add_entry()."""

    @pytest.mark.asyncio
    async def test_appends_entry(self, service):
        entry = await service.add_entry("guest", "ex_1", weight="60", reps="10", now=NOW)
        assert entry.weight == "60"
        assert entry.reps == "10"
        assert entry.date == "2024-03-05T10:30:00.000Z"
        assert await service.history("guest", "ex_1") == [entry]

    @pytest.mark.asyncio
    async def test_appends_in_order(self, service):
        await service.add_entry("guest", "ex_1", weight="60", now=NOW)
        await service.add_entry("guest", "ex_1", weight="70", now=NOW)
        history = await service.history("guest", "ex_1")
        assert [e.weight for e in history] == ["60", "70"]

    @pytest.mark.asyncio
    async def test_reps_only_entry_is_kept(self, service):
        entry = await service.add_entry("guest", "ex_1", reps="15", now=NOW)
        assert entry is not None
        assert entry.weight == ""

    @pytest.mark.asyncio
    async def test_empty_entry_is_ignored(self, service, repo):
        result = await service.add_entry("guest", "ex_1", notes="felt good", now=NOW)
        assert result is None
        assert repo.save_count == 0

    @pytest.mark.asyncio
    async def test_other_exercises_untouched(self, service):
        await service.add_entry("guest", "ex_1", weight="60", now=NOW)
        await service.add_entry("guest", "ex_2", weight="20", now=NOW)
        logs = await service.all_logs("guest")
        assert set(logs) == {"ex_1", "ex_2"}
        assert len(logs["ex_1"]) == 1

    @pytest.mark.asyncio
    async def test_malformed_stored_entry_does_not_erase_history(self):
        store = FakeKeyValueStore()
        store.seed({"gymbuddy_logs": json.dumps({
            "squat": [{"date": "2024-03-01T10:00:00.000Z", "weight": "100", "reps": "5", "notes": ""}],
            "bench": [{"date": "2024-03-01T10:00:00.000Z", "weight": 70, "reps": "8", "notes": None}],
        })})
        service = TrainingLogService(KeyValueLogRepository(store))

        await service.add_entry("guest", "curl", weight="12", reps="10", now=NOW)

        stored = json.loads(store.raw("gymbuddy_logs"))
        assert list(stored) == ["squat", "bench", "curl"]
        assert stored["squat"][0]["weight"] == "100"
        assert stored["bench"][0]["weight"] == "70"

    @pytest.mark.asyncio
    async def test_scopes_are_isolated(self, service):
        await service.add_entry("user-1", "ex_1", weight="60", now=NOW)
        assert await service.history("guest", "ex_1") == []

    @pytest.mark.asyncio
    async def test_write_failure_propagates(self, repo, service):
        repo.fail_writes = True
        with pytest.raises(StorageWriteError):
            await service.add_entry("guest", "ex_1", weight="60", now=NOW)

    @pytest.mark.asyncio
    async def test_default_timestamp_is_utc(self, service):
        entry = await service.add_entry("guest", "ex_1", weight="60")
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", entry.date)


class TestFormatTimestamp:
    """Tests for format_timestamp()."""

    def test_millisecond_precision_with_z_suffix(self):
        moment = datetime(2026, 10, 17, 23, 12, 50, 792052, tzinfo=timezone.utc)
        assert format_timestamp(moment) == "2026-10-17T23:12:50.792Z"

    def test_converted_to_utc(self):
        madrid = timezone(timedelta(hours=2))
        moment = datetime(2024, 3, 5, 12, 30, tzinfo=madrid)
        assert format_timestamp(moment) == "2024-03-05T10:30:00.000Z"

    def test_matches_stored_format(self):
        assert format_log_date(format_timestamp(NOW)) == "05/03"


class TestDeleteEntry:
    """Tests for delete_entry()."""

    @pytest.mark.asyncio
    async def test_deletes_by_index(self):
        service = TrainingLogService(create_log_repo(weights=["60", "65", "70"]))
        removed = await service.delete_entry("guest", "ex_1", 1)
        assert removed.weight == "65"
        history = await service.history("guest", "ex_1")
        assert [e.weight for e in history] == ["60", "70"]

    @pytest.mark.asyncio
    async def test_index_out_of_range(self):
        service = TrainingLogService(create_log_repo(weights=["60"]))
        with pytest.raises(LogEntryNotFoundError):
            await service.delete_entry("guest", "ex_1", 1)

    @pytest.mark.asyncio
    async def test_unknown_exercise(self, service):
        with pytest.raises(LogEntryNotFoundError):
            await service.delete_entry("guest", "missing", 0)


class TestReads:
    """Tests for history(), last_entry() and progression()."""

    @pytest.mark.asyncio
    async def test_history_unknown_exercise(self, service):
        assert await service.history("guest", "missing") == []

    @pytest.mark.asyncio
    async def test_last_entry(self):
        service = TrainingLogService(create_log_repo(weights=["60", "70"]))
        last = await service.last_entry("guest", "ex_1")
        assert last.weight == "70"

    @pytest.mark.asyncio
    async def test_progression(self):
        service = TrainingLogService(create_log_repo(weights=["60", "70"]))
        summary = await service.progression("guest", "ex_1")
        assert summary.stats.current == 70.0
        assert summary.stats.max == 70.0
        assert summary.stats.min == 60.0
        assert [(p.date, p.weight) for p in summary.series] == [("01/03", 60.0), ("02/03", 70.0)]

    @pytest.mark.asyncio
    async def test_progression_without_history(self, service):
        summary = await service.progression("guest", "ex_1")
        assert summary.stats is None
        assert summary.series == []
