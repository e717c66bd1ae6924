# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from homebase.accounts.account_store import AccountStore
from homebase.core import api
from homebase.core.state import AppState
from homebase.family.roster import RosterStore
from homebase.storage.kv_store import KeyValueStore

from .fakes import FakeKeyValueStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="HomeBase",
        log_level="INFO",
        data_dir=tmp_path / "data",
        db_path=tmp_path / "data" / "homebase.sqlite3",
        min_password_length=6,
    )


@pytest.fixture()
def fake_kv() -> FakeKeyValueStore:
    return FakeKeyValueStore()


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired to a real SQLite store.

    The store's persistence is part of what we want to test.
    """
    kv = KeyValueStore(settings.db_path)
    return AppState(
        settings=settings,
        kv=kv,
        accounts=AccountStore(kv, min_password_length=settings.min_password_length),
        rosters=RosterStore(kv),
    )


@pytest.fixture()
def logged_in(state: AppState) -> AppState:
    """State with a signed-up user and a two-member roster."""
    api.signup(state, "parent@example.com", "secret123")
    api.add_family_member(state, "Alice")
    api.add_family_member(state, "Bob")
    return state
