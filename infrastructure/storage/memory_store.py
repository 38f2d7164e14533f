"""
In-memory implementation of KeyValueStore.

Used as the default backend in development and test environments. State
lives only for the lifetime of the process.
"""
from threading import Lock
from typing import Dict, Optional


class InMemoryKeyValueStore:
    """
    Process-local KeyValueStore backed by a dict.

    Optionally enforces a total size quota (in characters) to emulate a
    browser's storage limit; a write that would exceed it raises.
    """

    def __init__(self, quota_chars: Optional[int] = None):
        self._items: Dict[str, str] = {}
        self._quota_chars = quota_chars
        self._lock = Lock()

    def get_item(self, key: str) -> Optional[str]:
        with self._lock:
            return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            if self._quota_chars is not None:
                used = sum(len(v) for k, v in self._items.items() if k != key)
                if used + len(value) > self._quota_chars:
                    raise MemoryError(
                        f"Storage quota of {self._quota_chars} characters exceeded"
                    )
            self._items[key] = value

    def keys(self):
        with self._lock:
            return list(self._items.keys())

    def clear(self) -> None:
        with self._lock:
            self._items.clear()
