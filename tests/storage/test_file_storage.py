from __future__ import annotations

import pytest

from src.school_admin.school_admin.core.exceptions import StorageError
from src.school_admin.school_admin.storage.factory import build_storage
from src.school_admin.school_admin.storage.file_storage import JsonFileStorage
from src.school_admin.school_admin.storage.memory_storage import InMemoryStorage
from src.school_admin.school_admin.store.store import SchoolStore


def test_missing_key_reads_as_none(tmp_path):
    assert JsonFileStorage(tmp_path / "data").get("cc_students") is None


def test_put_many_writes_one_file_per_key(tmp_path):
    storage = JsonFileStorage(tmp_path / "data")

    storage.put_many({"cc_students": "[]", "cc_school_logo": "logo"})

    assert (tmp_path / "data" / "cc_students.json").read_text(encoding="utf-8") == "[]"
    assert storage.get("cc_school_logo") == "logo"
    assert sorted(p.name for p in (tmp_path / "data").iterdir()) == ["cc_school_logo.json", "cc_students.json"]


def test_store_survives_restart_on_file_storage(tmp_path, clock):
    first = SchoolStore(JsonFileStorage(tmp_path), clock=clock)
    first.replace(school_logo="abc")

    second = SchoolStore(JsonFileStorage(tmp_path), clock=clock)

    assert second.state.school_logo == "abc"
    assert second.state.students == first.state.students


def test_unwritable_directory_raises_storage_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(StorageError):
        JsonFileStorage(blocker / "data").put_many({"k": "v"})


def test_factory_backends(tmp_path):
    assert isinstance(build_storage("memory"), InMemoryStorage)
    assert isinstance(build_storage("FILE", storage_dir=tmp_path), JsonFileStorage)
    with pytest.raises(ValueError):
        build_storage("redis")
