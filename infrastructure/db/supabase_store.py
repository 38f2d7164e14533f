"""
Supabase implementation of KeyValueStore.

Stores each scoped document as one row of a two-column table:

    create table app_storage (
        key   text primary key,
        value text not null,
        updated_at timestamptz default now()
    );

Errors are not swallowed here: the scoped repositories decide whether a
failure is recoverable (reads) or must reach the caller (writes).
"""
import logging
from typing import Optional

from supabase import Client

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "app_storage"


class SupabaseKeyValueStore:
    """
    Supabase implementation of KeyValueStore protocol.

    Values are written with upsert on the primary key, so a write replaces
    the previous document (last write wins).
    """

    def __init__(self, client: Client, table: str = DEFAULT_TABLE):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
            table: Table holding key/value rows
        """
        self._client = client
        self._table = table

    def get_item(self, key: str) -> Optional[str]:
        result = self._client.table(self._table) \
            .select("value") \
            .eq("key", key) \
            .limit(1) \
            .execute()

        if result.data and len(result.data) > 0:
            return result.data[0].get("value")
        return None

    def set_item(self, key: str, value: str) -> None:
        result = self._client.table(self._table).upsert({
            "key": key,
            "value": value,
        }, on_conflict="key").execute()

        if not result.data:
            logger.error(f"Upsert into {self._table} returned no rows for key '{key}'")
            raise RuntimeError(f"Write to {self._table} was not acknowledged")
