"""
Scoped JSON documents on top of a KeyValueStore.

Key derivation is the sole isolation mechanism between users and must stay
byte-for-byte compatible with existing persisted data:

    scope == guest scope  ->  "<base_key>"
    any other scope       ->  "<base_key>:<scope>"

Reads recover (missing or corrupt documents read as None and are logged);
writes raise StorageWriteError.
"""
import json
import logging
from typing import Any, Optional

from application.exceptions import StorageWriteError
from application.ports import KeyValueStore

logger = logging.getLogger(__name__)

GUEST_SCOPE = "guest"


def storage_key(base_key: str, scope: str = GUEST_SCOPE, guest_scope: str = GUEST_SCOPE) -> str:
    """Derive the storage key for a scope."""
    return base_key if scope == guest_scope else f"{base_key}:{scope}"


class ScopedJsonDocuments:
    """Reads and writes one JSON document per scope under a base key."""

    def __init__(
        self,
        store: KeyValueStore,
        base_key: str,
        *,
        guest_scope: str = GUEST_SCOPE,
    ):
        """
        Initialize with an injected backing store.

        Args:
            store: Raw key-value backend
            base_key: Key used for the guest scope and as prefix for others
            guest_scope: Sentinel scope for unauthenticated/local users
        """
        self._store = store
        self._base_key = base_key
        self._guest_scope = guest_scope

    def key_for(self, scope: str) -> str:
        return storage_key(self._base_key, scope, self._guest_scope)

    def read(self, scope: str) -> Optional[Any]:
        """
        Read and decode the document for a scope.

        Returns:
            Decoded JSON, or None if absent, unreadable or not valid JSON
        """
        key = self.key_for(scope)
        try:
            raw = self._store.get_item(key)
        except Exception:
            logger.exception(f"Failed to read '{key}' from storage")
            return None

        if raw is None:
            return None

        try:
            return json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.error(f"Discarding corrupted document at '{key}': {e}")
            return None

    def write(self, document: Any, scope: str) -> None:
        """
        Encode and write the document for a scope.

        Raises:
            StorageWriteError: Serialization failed or the store rejected the write
        """
        key = self.key_for(scope)
        try:
            raw = json.dumps(document, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to serialize document for '{key}': {e}")
            raise StorageWriteError(key, f"serialization failed: {e}") from e

        try:
            self._store.set_item(key, raw)
        except Exception as e:
            logger.error(f"Failed to persist '{key}': {e}")
            raise StorageWriteError(key, str(e)) from e
