# src/homebase/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the SQLite key/value store and the stores built on it into AppState.
"""

from __future__ import annotations

import logging

from ..accounts.account_store import AccountStore
from ..config import get_settings
from ..core.state import AppState
from ..family.roster import RosterStore
from ..storage.kv_store import KeyValueStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    kv = KeyValueStore(settings.db_path)
    state = AppState(
        settings=settings,
        kv=kv,
        accounts=AccountStore(kv, min_password_length=settings.min_password_length),
        rosters=RosterStore(kv),
    )
    logger.debug("AppState created db=%s", settings.db_path)
    return state
