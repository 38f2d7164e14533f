"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
"""


class StorageWriteError(Exception):
    """Error persisting a scoped document.

    Raised when the backing store rejects a write (capacity exceeded,
    I/O failure, remote error) or the document cannot be serialized.
    This is the one storage failure that must reach the user, since a
    silently dropped log entry is unacceptable.
    """

    def __init__(self, key: str, message: str):
        super().__init__(f"Failed to persist '{key}': {message}")
        self.key = key
        self.message = message


class LogEntryNotFoundError(Exception):
    """Raised when deleting a log entry at an index that does not exist."""

    def __init__(self, exercise_id: str, index: int):
        super().__init__(f"No log entry {index} for exercise '{exercise_id}'")
        self.exercise_id = exercise_id
        self.index = index
