"""Unit tests for the file backed storage."""

import os
from unittest.mock import patch

import pytest

from freelancerpro.storage import (
    JsonFileStorage,
    StorageReadError,
    StorageWriteError,
    create_storage,
)


@pytest.fixture
def storage(tmp_path):
    return JsonFileStorage(tmp_path / "data")


class TestJsonFileStorage:
    """Test suite for JsonFileStorage."""

    def test_missing_key_returns_none(self, storage):
        assert storage.get("freelancer_app_data") is None
        assert not storage.contains("freelancer_app_data")

    def test_set_then_get(self, storage):
        storage.set("current_user", '{"id": "u1"}')
        assert storage.get("current_user") == '{"id": "u1"}'
        assert storage.contains("current_user")

    def test_set_creates_data_dir(self, storage):
        assert not storage.data_dir.exists()
        storage.set("k", "v")
        assert storage.path_for("k").exists()
        assert storage.path_for("k").name == "k.json"

    def test_set_replaces_previous_value(self, storage):
        storage.set("k", "first")
        storage.set("k", "second")
        assert storage.get("k") == "second"

    def test_set_leaves_no_temp_files(self, storage):
        storage.set("k", "value")
        assert [p.name for p in storage.data_dir.iterdir()] == ["k.json"]

    def test_remove(self, storage):
        storage.set("k", "v")
        storage.remove("k")
        assert storage.get("k") is None

    def test_remove_missing_key_is_noop(self, storage):
        storage.remove("never-written")

    def test_failed_replace_raises_write_error_and_keeps_old_value(self, storage):
        storage.set("k", "old")
        with patch("freelancerpro.storage.json_file_storage.os.replace",
                   side_effect=OSError("disk full")):
            with pytest.raises(StorageWriteError) as exc_info:
                storage.set("k", "new")

        assert exc_info.value.key == "k"
        assert storage.get("k") == "old"
        assert [p.name for p in storage.data_dir.iterdir()] == ["k.json"]

    def test_failed_open_closes_descriptor_and_discards_temp_file(self, storage):
        storage.set("k", "old")
        with patch("freelancerpro.storage.json_file_storage.os.fdopen",
                   side_effect=OSError("too many open files")), \
                patch("freelancerpro.storage.json_file_storage.os.close",
                      wraps=os.close) as close:
            with pytest.raises(StorageWriteError):
                storage.set("k", "new")

        close.assert_called_once()
        with pytest.raises(OSError):
            os.fstat(close.call_args[0][0])
        assert storage.get("k") == "old"
        assert [p.name for p in storage.data_dir.iterdir()] == ["k.json"]

    def test_unwritable_directory_raises_write_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        storage = JsonFileStorage(blocker / "data")
        with pytest.raises(StorageWriteError):
            storage.set("k", "v")

    def test_undecodable_file_raises_read_error(self, storage):
        storage.data_dir.mkdir(parents=True)
        storage.path_for("k").write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(StorageReadError) as exc_info:
            storage.get("k")
        assert exc_info.value.key == "k"

    def test_create_storage_uses_config_data_dir(self, test_config):
        storage = create_storage(test_config)
        assert isinstance(storage, JsonFileStorage)
        assert storage.data_dir == test_config.data_dir
        assert os.fspath(storage.path_for(test_config.data_key)) == os.fspath(
            test_config.data_file_path()
        )
