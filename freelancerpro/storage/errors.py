"""Storage exception hierarchy."""

from typing import Optional


class StorageError(Exception):
    """Base class for persistence failures.

    Attributes:
        key: Storage key involved, when known
    """

    def __init__(self, message: str, key: Optional[str] = None):
        self.message = message
        self.key = key
        super().__init__(message)


class StorageReadError(StorageError):
    """The storage medium could not be read."""


class DataCorruptionError(StorageReadError):
    """A stored document exists but cannot be parsed."""


class StorageWriteError(StorageError):
    """The storage medium rejected a write (full disk, permissions, ...)."""
