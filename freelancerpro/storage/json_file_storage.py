"""
File backed storage: one JSON file per key inside a data directory.

Writes go to a temporary file that is renamed over the target, so a
crash mid-write never leaves a truncated document behind.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from freelancerpro.storage.errors import StorageReadError, StorageWriteError
from freelancerpro.storage.interface import StoragePort

logger = logging.getLogger(__name__)


class JsonFileStorage(StoragePort):
    """
    Store each key as ``<data_dir>/<key>.json``.

    Example:
        >>> storage = JsonFileStorage("/tmp/freelancerpro")
        >>> storage.set("current_user", '{"id": "u1"}')
        >>> storage.get("current_user")
        '{"id": "u1"}'
    """

    SUFFIX = ".json"

    def __init__(self, data_dir: Union[str, Path]):
        self.data_dir = Path(data_dir)
        logger.debug(f"JsonFileStorage initialized (data_dir={self.data_dir})")

    def path_for(self, key: str) -> Path:
        """Return the file path backing ``key``."""
        return self.data_dir / f"{key}{self.SUFFIX}"

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            logger.debug(f"No stored value for '{key}' ({path})")
            return None

        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageReadError(f"Failed to read {path}: {e}", key=key) from e

    def set(self, key: str, value: str) -> None:
        path = self.path_for(key)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            temp_fd, temp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
        except OSError as e:
            raise StorageWriteError(f"Failed to prepare write to {path}: {e}", key=key) from e

        try:
            temp_file = os.fdopen(temp_fd, "w", encoding="utf-8")
        except OSError as e:
            os.close(temp_fd)
            self._discard(temp_path)
            raise StorageWriteError(f"Failed to write {path}: {e}", key=key) from e

        try:
            with temp_file as f:
                f.write(value)
            os.replace(temp_path, path)
        except OSError as e:
            self._discard(temp_path)
            raise StorageWriteError(f"Failed to write {path}: {e}", key=key) from e

        logger.debug(f"Wrote {len(value)} characters to {path}")

    @staticmethod
    def _discard(temp_path: str) -> None:
        try:
            os.unlink(temp_path)
        except OSError:
            # Temp file may already be gone
            pass

    def remove(self, key: str) -> None:
        path = self.path_for(key)
        try:
            path.unlink()
        except FileNotFoundError:
            return
        except OSError as e:
            raise StorageWriteError(f"Failed to remove {path}: {e}", key=key) from e
        logger.debug(f"Removed {path}")
