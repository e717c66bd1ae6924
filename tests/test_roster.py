# tests/test_roster.py

from __future__ import annotations

import pytest

from homebase.errors import ConflictError, StorageError, ValidationError
from homebase.family.roster import RosterStore, add_member, remove_member

from .fakes import FakeKeyValueStore


@pytest.mark.parametrize("roster", [[], ["Alice"], ["Alice", "Bob", "Carol"]])
@pytest.mark.parametrize("name", ["Dan", "  Eve  ", "Mary Ann"])
def test_add_then_remove_leaves_no_member(roster: list[str], name: str) -> None:
    added = add_member(roster, name)
    assert added[-1] == name.strip()

    removed = remove_member(added, name.strip())
    assert name.strip() not in removed
    assert removed == roster


def test_add_member_rejects_duplicate_after_trim() -> None:
    roster = add_member([], "Alice")
    with pytest.raises(ConflictError):
        add_member(roster, " Alice ")


def test_add_member_is_case_sensitive() -> None:
    assert add_member(["Alice"], "alice") == ["Alice", "alice"]


@pytest.mark.parametrize("name", ["", "   ", None])
def test_add_member_rejects_blank(name) -> None:
    with pytest.raises(ValidationError):
        add_member(["Alice"], name)


def test_remove_absent_member_is_noop() -> None:
    assert remove_member(["Alice", "Bob"], "Zed") == ["Alice", "Bob"]


def test_add_member_keeps_insertion_order_and_input() -> None:
    roster = ["Bob"]
    out = add_member(roster, "Alice")
    assert out == ["Bob", "Alice"]
    assert roster == ["Bob"]


def test_roster_store_scoped_per_user() -> None:
    kv = FakeKeyValueStore()
    store = RosterStore(kv)

    store.save(1, ["Alice"])
    store.save(2, ["Bob", "Carol"])

    assert store.load(1) == ["Alice"]
    assert store.load(2) == ["Bob", "Carol"]
    assert store.load(3) == []
    assert kv.keys() == ["family_1", "family_2"]


def test_roster_store_refuses_non_list_value() -> None:
    kv = FakeKeyValueStore()
    kv.set("family_1", {"not": "a list"})
    kv.writes.clear()

    with pytest.raises(StorageError):
        RosterStore(kv).load(1)
    assert kv.get("family_1") == {"not": "a list"}
    assert kv.writes == []
