# src/homebase/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from ..accounts.account_models import User
from ..accounts.account_store import AccountStore
from ..family.roster import RosterStore
from ..tasks.task_models import Task
from .ports import KeyValueRepo


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: Any

    kv: KeyValueRepo
    accounts: AccountStore
    rosters: RosterStore

    # Session snapshot of the logged-in user (None when logged out).
    user: User | None = None
    tasks: list[Task] = field(default_factory=list)
    roster: list[str] = field(default_factory=list)

    lock: threading.RLock = field(default_factory=threading.RLock)
