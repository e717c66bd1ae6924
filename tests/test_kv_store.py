# tests/test_kv_store.py

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from homebase.errors import StorageError
from homebase.storage.kv_store import KeyValueStore, scoped_key


def test_set_get_overwrite_delete(tmp_path: Path) -> None:
    store = KeyValueStore(tmp_path / "kv.sqlite3")

    assert store.get("users") is None
    assert store.get("users", []) == []

    store.set("users", [{"id": 1, "email": "a@b.com"}])
    assert store.get("users") == [{"id": 1, "email": "a@b.com"}]

    store.set("users", [])
    assert store.get("users") == []
    assert store.count_keys() == 1

    store.delete("users")
    assert store.get("users", "gone") == "gone"
    assert store.keys() == []


def test_values_survive_reopen(tmp_path: Path) -> None:
    db = tmp_path / "nested" / "kv.sqlite3"
    KeyValueStore(db).set("family_7", ["Alice", "Zoë"])

    reopened = KeyValueStore(db)
    assert reopened.get("family_7") == ["Alice", "Zoë"]
    assert reopened.keys() == ["family_7"]


def test_corrupt_json_raises_instead_of_reading_empty(tmp_path: Path) -> None:
    db = tmp_path / "kv.sqlite3"
    store = KeyValueStore(db)
    store.set("users", [])

    conn = sqlite3.connect(str(db))
    conn.execute("UPDATE kv SET value = '{not json' WHERE key = 'users'")
    conn.commit()
    conn.close()

    with pytest.raises(StorageError):
        store.get("users", [])
    assert store.keys() == ["users"]


def test_scoped_key() -> None:
    assert scoped_key("family", 42) == "family_42"


@pytest.mark.parametrize("user_id", ["42", 4.2, None, True])
def test_scoped_key_rejects_non_int_ids(user_id) -> None:
    with pytest.raises(TypeError):
        scoped_key("family", user_id)


@pytest.mark.parametrize("category", ["", "family_x"])
def test_scoped_key_rejects_bad_category(category: str) -> None:
    with pytest.raises(ValueError):
        scoped_key(category, 1)
