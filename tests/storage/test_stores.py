"""Tests for koshercheck/storage/base.py"""

import json

import pytest

from koshercheck.storage.base import JsonFileStore, KeyValueStore, MemoryStore


class TestKeyValueStore:
    def test_is_abstract(self):
        with pytest.raises(TypeError):
            KeyValueStore()

    def test_subclass_needs_get_and_set(self):
        class ReadOnlyStore(KeyValueStore):
            def get(self, key):
                return None

        with pytest.raises(TypeError):
            ReadOnlyStore()


class TestMemoryStore:
    def test_get_missing(self):
        assert MemoryStore().get("k") is None

    def test_set_and_get(self):
        store = MemoryStore()
        store.set("k", "v")
        assert store.get("k") == "v"

    def test_initial_data_copied(self):
        initial = {"k": "v"}
        store = MemoryStore(initial)
        store.set("k", "w")
        assert initial == {"k": "v"}


class TestJsonFileStore:
    def test_missing_file_is_empty(self, tmp_path):
        assert JsonFileStore(tmp_path / "store.json").get("k") is None

    def test_persists_between_instances(self, tmp_path):
        path = tmp_path / "nested" / "store.json"
        JsonFileStore(path).set("kosherData", "[]")
        assert JsonFileStore(path).get("kosherData") == "[]"

    def test_writes_unescaped_utf8(self, tmp_path):
        path = tmp_path / "store.json"
        JsonFileStore(path).set("name", "חתם סופר")
        assert "חתם סופר" in path.read_text(encoding="utf-8")

    def test_corrupt_file_treated_as_empty(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("{not json", encoding="utf-8")
        store = JsonFileStore(path)
        assert store.get("k") is None
        store.set("k", "v")
        assert json.loads(path.read_text(encoding="utf-8")) == {"k": "v"}

    def test_non_object_file_treated_as_empty(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert JsonFileStore(path).get("k") is None

