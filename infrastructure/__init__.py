"""
Infrastructure Layer for the GymBuddy API.

This package contains concrete implementations of the storage interfaces:
- storage/: Key-value backends (memory, file) and scoped document repositories
- db/: Supabase-backed key-value store
"""

from infrastructure.db import SupabaseKeyValueStore
from infrastructure.storage import (
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    KeyValueLogRepository,
    KeyValuePlanRepository,
)

__all__ = [
    "SupabaseKeyValueStore",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "KeyValueLogRepository",
    "KeyValuePlanRepository",
]
