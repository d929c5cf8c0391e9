"""
Storage backends for the FreelancerPro data store.

This package provides:
- StoragePort: the key/value interface the data store depends on
- JsonFileStorage: one JSON file per key with atomic writes
- InMemoryStorage: dictionary backed fake for tests
- The storage exception hierarchy
"""

from .errors import (
    DataCorruptionError,
    StorageError,
    StorageReadError,
    StorageWriteError,
)
from .interface import StoragePort
from .json_file_storage import JsonFileStorage
from .memory_storage import InMemoryStorage


def create_storage(config) -> StoragePort:
    """Build the file storage configured by ``config.data_dir``."""
    return JsonFileStorage(config.data_dir)


__all__ = [
    "StoragePort",
    "JsonFileStorage",
    "InMemoryStorage",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "DataCorruptionError",
    "create_storage",
]
