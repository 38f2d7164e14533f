"""
Key-Value Store Interface (Port).

This module defines the minimal string key-value contract that scoped
document repositories are built on. It mirrors a browser's localStorage:
values are opaque strings, a missing key reads as None.
"""
from typing import Optional, Protocol


class KeyValueStore(Protocol):
    """
    Abstract interface for a string key-value backing store.

    Implementations may raise any exception from set_item when a write is
    rejected; callers decide how to surface it.
    """

    def get_item(self, key: str) -> Optional[str]:
        """
        Read the raw value stored under a key.

        Args:
            key: Storage key

        Returns:
            The stored string, or None if the key is absent
        """
        ...

    def set_item(self, key: str, value: str) -> None:
        """
        Store a raw value under a key, replacing any previous value.

        Args:
            key: Storage key
            value: Serialized document

        Raises:
            Exception: Backend-specific failure (quota, I/O, network)
        """
        ...
