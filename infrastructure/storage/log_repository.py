"""
KeyValueStore-backed implementation of LogRepository.

The persisted document shape per scope is:

    { "<exerciseId>": [ {"date": ..., "weight": ..., "reps": ..., "notes": ...}, ... ] }
"""
import logging
from typing import Any, List

from pydantic import ValidationError

from application.ports import KeyValueStore
from domain.models import LogCollection, LogEntry, dump_collection
from infrastructure.storage.scoped_documents import GUEST_SCOPE, ScopedJsonDocuments

logger = logging.getLogger(__name__)

DEFAULT_LOGS_KEY = "gymbuddy_logs"


class KeyValueLogRepository:
    """
    LogRepository over any KeyValueStore.

    load() never raises. An absent, corrupt or non-object document reads as an
    empty collection; inside a valid document only the malformed entries (or
    non-list histories) are dropped, every other history is kept.
    save() raises StorageWriteError on any failure.
    """

    def __init__(
        self,
        store: KeyValueStore,
        *,
        base_key: str = DEFAULT_LOGS_KEY,
        guest_scope: str = GUEST_SCOPE,
    ):
        self._documents = ScopedJsonDocuments(store, base_key, guest_scope=guest_scope)

    def key_for(self, scope: str) -> str:
        return self._documents.key_for(scope)

    async def load(self, scope: str) -> LogCollection:
        document = self._documents.read(scope)
        if document is None:
            return {}

        key = self.key_for(scope)
        if not isinstance(document, dict):
            logger.error(f"Discarding log document at '{key}': expected an object")
            return {}

        collection: LogCollection = {}
        for exercise_id, raw_entries in document.items():
            if not isinstance(raw_entries, list):
                logger.warning(f"Skipping history '{exercise_id}' at '{key}': expected a list")
                continue
            collection[str(exercise_id)] = self._parse_entries(raw_entries, exercise_id, key)
        return collection

    @staticmethod
    def _parse_entries(raw_entries: List[Any], exercise_id: str, key: str) -> List[LogEntry]:
        entries: List[LogEntry] = []
        for position, raw in enumerate(raw_entries):
            try:
                entries.append(LogEntry.model_validate(raw))
            except ValidationError as e:
                logger.warning(
                    f"Dropping malformed entry {position} of '{exercise_id}' "
                    f"at '{key}': {e.error_count()} errors"
                )
        return entries

    async def save(self, collection: LogCollection, scope: str) -> None:
        self._documents.write(dump_collection(collection), scope)
