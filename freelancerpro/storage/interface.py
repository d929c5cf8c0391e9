"""
Abstract key/value storage port.

The data store never touches files directly; it reads and writes opaque
strings through this interface so that tests can substitute an in-memory
implementation.
"""

from abc import ABC, abstractmethod
from typing import Optional


class StoragePort(ABC):
    """
    Key/value persistence for serialized documents.

    Implementations raise ``StorageReadError`` / ``StorageWriteError``
    (see ``freelancerpro.storage.errors``) rather than backend specific
    exceptions.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Read the value stored under ``key``.

        Returns:
            The stored text, or None when the key is absent

        Raises:
            StorageReadError: If the medium cannot be read
        """

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Store ``value`` under ``key``, replacing any previous value.

        Raises:
            StorageWriteError: If the value could not be persisted
        """

    @abstractmethod
    def remove(self, key: str) -> None:
        """
        Delete ``key``. Removing an absent key is not an error.

        Raises:
            StorageWriteError: If the key exists but could not be removed
        """

    def contains(self, key: str) -> bool:
        """Return True if a value is stored under ``key``."""
        return self.get(key) is not None
