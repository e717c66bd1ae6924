# src/homebase/core/api.py

"""
Session-level operations used by connectors.

Each mutation updates the in-memory snapshot on AppState and persists the full
collection (tasks through the account store, roster through the roster store)
before returning. Derived views are computed on demand.
"""

from __future__ import annotations

import logging

from ..accounts.account_models import User
from ..errors import NotLoggedInError
from ..family import roster as roster_ops
from ..tasks import task_ops
from ..tasks.task_models import LeaderboardEntry, Task
from .state import AppState

logger = logging.getLogger(__name__)


def _require_user(state: AppState) -> User:
    if state.user is None:
        raise NotLoggedInError()
    return state.user


def _open_session(state: AppState, user: User) -> None:
    state.user = user
    state.tasks = list(user.tasks)
    state.roster = state.rosters.load(user.id)
    logger.info(
        "Session opened user_id=%s tasks=%d members=%d",
        user.id,
        len(state.tasks),
        len(state.roster),
    )


def _commit_tasks(state: AppState, tasks: list[Task]) -> None:
    user = _require_user(state)
    state.user = state.accounts.update_user_tasks(user.id, tasks)
    state.tasks = list(tasks)


def _commit_roster(state: AppState, roster: list[str]) -> None:
    user = _require_user(state)
    state.rosters.save(user.id, roster)
    state.roster = list(roster)


# ---- accounts ----


def signup(state: AppState, email: str, password: str) -> User:
    """Create an account and log it in."""
    with state.lock:
        user = state.accounts.create_user(email, password)
        _open_session(state, user)
        return user


def login(state: AppState, email: str, password: str) -> User:
    with state.lock:
        user = state.accounts.login(email, password)
        _open_session(state, user)
        return user


def logout(state: AppState) -> None:
    with state.lock:
        if state.user is not None:
            logger.info("Session closed user_id=%s", state.user.id)
        state.user = None
        state.tasks = []
        state.roster = []


# ---- snapshots / derived views ----


def current_tasks(state: AppState) -> list[Task]:
    _require_user(state)
    return list(state.tasks)


def current_roster(state: AppState) -> list[str]:
    _require_user(state)
    return list(state.roster)


def get_partition(state: AppState) -> tuple[list[Task], list[Task]]:
    _require_user(state)
    return task_ops.partition(state.tasks)


def get_leaderboard(state: AppState) -> list[LeaderboardEntry]:
    _require_user(state)
    return task_ops.leaderboard(state.tasks, state.roster)


# ---- tasks ----


def create_task(state: AppState, text: str, points: int, assigned_to: str | None) -> Task:
    with state.lock:
        _require_user(state)
        task_ops.validate_task_input(text, points, assigned_to)
        tasks = task_ops.add_task(
            state.tasks,
            text=text.strip(),
            points=points,
            assigned_to=assigned_to.strip() if assigned_to else None,
        )
        _commit_tasks(state, tasks)
        task = tasks[-1]
        logger.debug("Task created id=%s points=%s", task.id, task.points)
        return task


def complete_task(state: AppState, task_id: int) -> Task | None:
    """Mark done; returns the task, or None when the id is unknown."""
    with state.lock:
        _require_user(state)
        found = task_ops.find_task(state.tasks, task_id)
        if found is None or found.completed:
            return found
        tasks = task_ops.complete_task(state.tasks, task_id)
        _commit_tasks(state, tasks)
        return task_ops.find_task(tasks, task_id)


def delete_task(state: AppState, task_id: int) -> bool:
    with state.lock:
        _require_user(state)
        if task_ops.find_task(state.tasks, task_id) is None:
            return False
        _commit_tasks(state, task_ops.delete_task(state.tasks, task_id))
        return True


def edit_task(
    state: AppState,
    task_id: int,
    text: str,
    points: int,
    assigned_to: str | None,
) -> Task | None:
    with state.lock:
        _require_user(state)
        task_ops.validate_task_input(text, points, assigned_to)
        if task_ops.find_task(state.tasks, task_id) is None:
            return None
        tasks = task_ops.edit_task(
            state.tasks,
            task_id,
            text=text.strip(),
            points=points,
            assigned_to=assigned_to.strip() if assigned_to else None,
        )
        _commit_tasks(state, tasks)
        return task_ops.find_task(tasks, task_id)


# ---- family roster ----


def add_family_member(state: AppState, name: str) -> list[str]:
    with state.lock:
        _require_user(state)
        roster = roster_ops.add_member(state.roster, name)
        _commit_roster(state, roster)
        return list(roster)


def remove_family_member(state: AppState, name: str) -> list[str]:
    with state.lock:
        _require_user(state)
        roster = roster_ops.remove_member(state.roster, name.strip())
        _commit_roster(state, roster)
        return list(roster)
