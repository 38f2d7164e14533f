"""
Integration tests for Logs and Progression API endpoints.

The real log repository runs against FakeKeyValueStore, so these tests also
check the persisted document and storage keys.

Tests cover:
- Appending, reading and deleting log entries per scope
- Ignoring empty entries
- Corrupt stored data reading as empty history
- Write failures surfacing as 507
- Progression stats and chart series
"""
import json

import pytest
from fastapi.testclient import TestClient

from api.deps import get_key_value_store, get_training_log_service
from backend.main import create_app
from backend.settings import Settings
from backend.core.training_log_service import TrainingLogService
from tests.fakes import FakeKeyValueStore, create_log_repo
from tests.fakes.conftest import override_dependency

pytestmark = pytest.mark.integration


# =============================================================================
# Test Fixtures
# =============================================================================


@pytest.fixture
def store():
    return FakeKeyValueStore()


@pytest.fixture
def app(store):
    app = create_app(settings=Settings(environment="test", _env_file=None))
    override_dependency(app, get_key_value_store, store)
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)


# =============================================================================
# Log Tests
# =============================================================================


class TestAddLogEntry:

    def test_add_entry(self, client, store):
        response = client.post("/logs/ex_1", json={"weight": "60", "reps": "10"})
        assert response.status_code == 201
        data = response.json()
        assert data["weight"] == "60"
        assert data["reps"] == "10"
        assert data["date"]

        stored = json.loads(store.raw("gymbuddy_logs"))
        assert stored["ex_1"][0]["weight"] == "60"

    def test_empty_entry_ignored(self, client, store):
        response = client.post("/logs/ex_1", json={"weight": " ", "reps": "", "notes": "x"})
        assert response.status_code == 204
        assert store.writes == []

    def test_entries_appended_in_order(self, client):
        client.post("/logs/ex_1", json={"weight": "60", "reps": "10"})
        client.post("/logs/ex_1", json={"weight": "70", "reps": "8"})

        data = client.get("/logs/ex_1").json()
        assert [e["weight"] for e in data["entries"]] == ["60", "70"]
        assert data["last_entry"]["weight"] == "70"

    def test_scoped_storage(self, client, store):
        client.post("/logs/ex_1", json={"weight": "60"}, headers={"X-Storage-Scope": "user-123"})
        assert store.writes == ["gymbuddy_logs:user-123"]
        assert client.get("/logs").json() == {}
        assert "ex_1" in client.get("/logs", headers={"X-Storage-Scope": "user-123"}).json()

    def test_write_failure_returns_507(self, client, store):
        store.fail_writes = True
        response = client.post("/logs/ex_1", json={"weight": "60"})
        assert response.status_code == 507
        assert "Could not save" in response.json()["detail"]


class TestReadLogs:

    def test_history_unknown_exercise(self, client):
        data = client.get("/logs/missing").json()
        assert data == {"exercise_id": "missing", "entries": [], "last_entry": None}

    def test_list_all(self, client):
        client.post("/logs/ex_1", json={"weight": "60"})
        client.post("/logs/ex_2", json={"reps": "15"})
        data = client.get("/logs").json()
        assert set(data) == {"ex_1", "ex_2"}

    def test_corrupt_storage_reads_empty(self, client, store):
        store.seed({"gymbuddy_logs": "not json"})
        response = client.get("/logs")
        assert response.status_code == 200
        assert response.json() == {}


class TestDeleteLogEntry:

    def test_delete(self, client):
        client.post("/logs/ex_1", json={"weight": "60"})
        client.post("/logs/ex_1", json={"weight": "70"})

        response = client.delete("/logs/ex_1/0")
        assert response.status_code == 200
        assert response.json()["weight"] == "60"
        assert [e["weight"] for e in client.get("/logs/ex_1").json()["entries"]] == ["70"]

    def test_delete_missing_index(self, client):
        assert client.delete("/logs/ex_1/0").status_code == 404

    def test_delete_negative_index(self, client):
        assert client.delete("/logs/ex_1/-1").status_code == 422


# =============================================================================
# Progression Tests
# =============================================================================


class TestProgression:

    def test_stats_and_series(self, app, client):
        repo = create_log_repo(exercise_id="ex_1", weights=["60", "70"])
        override_dependency(app, get_training_log_service, TrainingLogService(repo))

        response = client.get("/progression/ex_1")
        assert response.status_code == 200
        data = response.json()
        assert data["stats"] == {"current": 70.0, "max": 70.0, "min": 60.0}
        assert data["series"] == [
            {"date": "01/03", "weight": 60.0},
            {"date": "02/03", "weight": 70.0},
        ]
        assert data["total_entries"] == 2

    def test_no_history(self, client):
        data = client.get("/progression/ex_1").json()
        assert data["stats"] is None
        assert data["series"] == []

    def test_reps_only_history(self, client):
        client.post("/logs/plank", json={"reps": "60s"})
        data = client.get("/progression/plank").json()
        assert data["stats"] is None
        assert data["series"][0]["weight"] == 0.0

    def test_logged_entries_feed_progression(self, client):
        client.post("/logs/ex_1", json={"weight": "80"})
        client.post("/logs/ex_1", json={"weight": "62.5kg"})
        data = client.get("/progression/ex_1").json()
        assert data["stats"] == {"current": 62.5, "max": 80.0, "min": 62.5}
