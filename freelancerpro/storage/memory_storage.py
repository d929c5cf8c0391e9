"""In-memory storage used by tests and throwaway sessions."""

from typing import Dict, Optional

from freelancerpro.storage.errors import StorageWriteError
from freelancerpro.storage.interface import StoragePort


class InMemoryStorage(StoragePort):
    """Dictionary backed storage.

    ``fail_writes`` makes every ``set`` raise, which lets tests exercise
    the write-failure path (the equivalent of a full browser quota).
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None, fail_writes: bool = False):
        self._values: Dict[str, str] = dict(initial or {})
        self.fail_writes = fail_writes
        self.write_count = 0

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise StorageWriteError(f"Storage quota exceeded writing '{key}'", key=key)
        self._values[key] = value
        self.write_count += 1

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def keys(self):
        return list(self._values)
