# src/homebase/tasks/task_ops.py

"""
Pure operations over a task collection.

Every function takes a sequence of Task and returns a new list; inputs are
never mutated. Derived views (partition, leaderboard) are recomputed from the
current snapshot on every call.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from ..core.ids import next_id
from ..errors import ValidationError
from .task_models import LeaderboardEntry, Task

# Presets offered by the task form.
COMMON_TASKS: tuple[str, ...] = (
    "Cook food",
    "Wash dishes",
    "Clean room",
    "Do laundry",
    "Take out trash",
)
QUICK_POINTS: tuple[int, ...] = (5, 10, 15, 20, 25)
DEFAULT_POINTS = 1


def validate_task_input(text: str | None, points: object, assigned_to: str | None) -> None:
    """
    Caller-side checks for create/edit forms.

    The collection functions below trust their input; run this first.
    """
    if not text or not text.strip():
        raise ValidationError("Please enter a task name")
    if not assigned_to or not assigned_to.strip():
        raise ValidationError("Please select a family member")
    if isinstance(points, bool) or not isinstance(points, int) or points <= 0:
        raise ValidationError("Points must be a positive whole number")


def find_task(tasks: Sequence[Task], task_id: int) -> Task | None:
    for t in tasks:
        if t.id == task_id:
            return t
    return None


def add_task(
    tasks: Sequence[Task],
    *,
    text: str,
    points: int,
    assigned_to: str | None,
    now: int | None = None,
) -> list[Task]:
    task = Task(
        id=next_id((t.id for t in tasks), now),
        text=text,
        points=points,
        completed=False,
        assigned_to=assigned_to or None,
    )
    return [*tasks, task]


def complete_task(tasks: Sequence[Task], task_id: int) -> list[Task]:
    """Mark a task done. Unknown ids and already-completed tasks are left as they are."""
    return [replace(t, completed=True) if t.id == task_id and not t.completed else t for t in tasks]


def delete_task(tasks: Sequence[Task], task_id: int) -> list[Task]:
    return [t for t in tasks if t.id != task_id]


def edit_task(
    tasks: Sequence[Task],
    task_id: int,
    *,
    text: str,
    points: int,
    assigned_to: str | None,
) -> list[Task]:
    """Replace text/points/assignee in place; id and completed are kept."""
    return [
        replace(t, text=text, points=points, assigned_to=assigned_to or None)
        if t.id == task_id
        else t
        for t in tasks
    ]


def partition(tasks: Sequence[Task]) -> tuple[list[Task], list[Task]]:
    """Split into (active, completed), each in original order."""
    active: list[Task] = []
    done: list[Task] = []
    for t in tasks:
        (done if t.completed else active).append(t)
    return active, done


def leaderboard(tasks: Sequence[Task], roster: Sequence[str]) -> list[LeaderboardEntry]:
    """
    Completed-task points per roster member, highest first.

    Members appear once each, in roster order before sorting; sorted() is
    stable, so members with equal points keep their roster order.
    """
    entries = [
        LeaderboardEntry(
            member=member,
            points=sum(t.points for t in tasks if t.completed and t.assigned_to == member),
        )
        for member in roster
    ]
    return sorted(entries, key=lambda e: e.points, reverse=True)
