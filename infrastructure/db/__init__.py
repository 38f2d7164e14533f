"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the storage
interfaces defined in application.ports.

Usage:
    from supabase import create_client
    from infrastructure.db import SupabaseKeyValueStore

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate the store with injected client
    store = SupabaseKeyValueStore(client, table="app_storage")
"""

from infrastructure.db.supabase_store import SupabaseKeyValueStore

__all__ = [
    "SupabaseKeyValueStore",
]
