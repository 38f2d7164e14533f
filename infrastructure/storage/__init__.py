"""
Scoped document storage.

Usage:
    from infrastructure.storage import (
        InMemoryKeyValueStore,
        JsonFileKeyValueStore,
        KeyValueLogRepository,
        KeyValuePlanRepository,
    )

    store = JsonFileKeyValueStore(Path("./data"))
    log_repo = KeyValueLogRepository(store)
    plan_repo = KeyValuePlanRepository(store)
"""

from infrastructure.storage.file_store import JsonFileKeyValueStore
from infrastructure.storage.log_repository import DEFAULT_LOGS_KEY, KeyValueLogRepository
from infrastructure.storage.memory_store import InMemoryKeyValueStore
from infrastructure.storage.plan_repository import DEFAULT_PLAN_KEY, KeyValuePlanRepository
from infrastructure.storage.scoped_documents import GUEST_SCOPE, ScopedJsonDocuments, storage_key

__all__ = [
    "JsonFileKeyValueStore",
    "InMemoryKeyValueStore",
    "KeyValueLogRepository",
    "KeyValuePlanRepository",
    "ScopedJsonDocuments",
    "storage_key",
    "DEFAULT_LOGS_KEY",
    "DEFAULT_PLAN_KEY",
    "GUEST_SCOPE",
]
