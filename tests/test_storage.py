import json
from pathlib import Path

import pytest

from adapters.storage import JsonFileStorage, MemoryStorage
from core.domain.errors import StorageError
from core.domain.models import ErrorKind
from core.interfaces.storage import KeyValueStorage


def test_backends_satisfy_protocol(tmp_path: Path) -> None:
    assert isinstance(MemoryStorage(), KeyValueStorage)
    assert isinstance(JsonFileStorage(tmp_path / "s.json"), KeyValueStorage)


def test_missing_file_reads_as_empty(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path / "absent.json")
    assert storage.get("figmaToken") is None
    storage.delete("figmaToken")
    assert not (tmp_path / "absent.json").exists()


def test_set_preserves_other_keys(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")

    storage = JsonFileStorage(path)
    storage.set("figmaToken", "abc123")

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == {"figmaToken": "abc123", "theme": "dark"}
    assert not path.with_name("storage.json.tmp").exists()


def test_delete_removes_only_that_key(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    storage = JsonFileStorage(path)
    storage.set("figmaToken", "abc123")
    storage.set("theme", "dark")

    storage.delete("figmaToken")

    assert storage.get("figmaToken") is None
    assert storage.get("theme") == "dark"


def test_non_string_values_are_ignored(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    path.write_text(json.dumps({"figmaToken": 42}), encoding="utf-8")
    assert JsonFileStorage(path).get("figmaToken") is None


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_corrupt_file_raises_storage_error(tmp_path: Path, content: str) -> None:
    path = tmp_path / "storage.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(StorageError) as excinfo:
        JsonFileStorage(path).get("figmaToken")
    assert excinfo.value.kind == ErrorKind.STORAGE


def test_unwritable_location_raises_storage_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    storage = JsonFileStorage(blocker / "storage.json")

    with pytest.raises(StorageError):
        storage.set("figmaToken", "abc123")


def test_memory_storage_initial_values_are_copied() -> None:
    initial = {"figmaToken": "abc"}
    storage = MemoryStorage(initial)
    storage.delete("figmaToken")
    assert initial == {"figmaToken": "abc"}
