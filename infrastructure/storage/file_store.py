"""
File-system implementation of KeyValueStore.

Each key is stored as one UTF-8 file under a base directory. Keys are
percent-encoded into file names, so scoped keys such as
``gymbuddy_logs:user-123`` are safe on every platform.

Writes go to a temporary file in the same directory and are moved into place
with os.replace, so a crash mid-write never leaves a truncated document.
"""
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional
from urllib.parse import quote, unquote

logger = logging.getLogger(__name__)

FILE_SUFFIX = ".json"


class JsonFileKeyValueStore:
    """KeyValueStore persisting one file per key."""

    def __init__(self, directory: Path):
        """
        Initialize the store.

        Args:
            directory: Base directory; created on first write if missing
        """
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, key: str) -> Path:
        """File path a key is stored at."""
        return self._directory / f"{quote(key, safe='')}{FILE_SUFFIX}"

    def get_item(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        self._directory.mkdir(parents=True, exist_ok=True)
        target = self.path_for(key)

        fd, tmp_name = tempfile.mkstemp(dir=self._directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, target)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        logger.debug(f"Wrote {len(value)} chars to {target.name}")

    def keys(self):
        """Keys currently stored, decoded from file names."""
        if not self._directory.exists():
            return []
        return [
            unquote(p.name[: -len(FILE_SUFFIX)])
            for p in self._directory.glob(f"*{FILE_SUFFIX}")
        ]
