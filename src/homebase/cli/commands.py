# src/homebase/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core import api
from ..core.state import AppState
from ..errors import HomeBaseError, ValidationError
from ..tasks.task_models import Task
from ..tasks.task_ops import COMMON_TASKS, QUICK_POINTS, find_task

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /tasks, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        HomeBaseError raised by a handler becomes the reply text.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                return h3(state, args, emit)
            h2 = cast(CommandHandler2, handler)
            return h2(state, args)
        except HomeBaseError as e:
            logger.debug("/%s rejected: %s", name, e)
            return str(e)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- helpers ----


def _parse_int(raw: str, what: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"{what} must be a whole number, got {raw!r}") from None


def _format_task(t: Task) -> str:
    who = t.assigned_to or "unassigned"
    return f"  #{t.id} {t.text}: {t.points} points ({who})"


def _parse_task_form(args: list[str], usage: str) -> tuple[int, str, str]:
    """<points> <member> <text...>; the member token is resolved by _resolve_member."""
    if len(args) < 3:
        raise ValidationError(usage)
    points = _parse_int(args[0], "Points")
    text = " ".join(args[2:])
    return points, args[1], text


def _resolve_member(state: AppState, token: str) -> str:
    """
    Map a single-word member token to a roster name.

    The literal name wins; otherwise underscores stand for spaces ("Mary_Ann").
    """
    roster = api.current_roster(state)
    for candidate in (token, token.replace("_", " ")):
        if candidate in roster:
            return candidate
    raise ValidationError(f"Unknown family member {token!r}. Use /family add <name> first.")


# ---- handlers ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    app_name = str(getattr(state.settings, "app_name", "HomeBase"))
    if state.user is None:
        return f"{app_name}: not logged in."
    active, done = api.get_partition(state)
    return (
        f"{app_name} status:\n"
        f"  User: {state.user.email}\n"
        f"  Family members: {len(state.roster)}\n"
        f"  Tasks: {len(active)} active, {len(done)} completed"
    )


def cmd_signup(state: AppState, args: list[str]) -> str:
    if len(args) != 2:
        return "Usage: /signup <email> <password>"
    user = api.signup(state, args[0], args[1])
    return f"Account created successfully! Logged in as {user.email}."


def cmd_login(state: AppState, args: list[str]) -> str:
    if len(args) != 2:
        return "Usage: /login <email> <password>"
    user = api.login(state, args[0], args[1])
    return f"Login successful! Welcome back, {user.email}."


def cmd_logout(state: AppState, args: list[str]) -> str:
    if state.user is None:
        return "You are not logged in."
    api.logout(state)
    return "Logged out."


def cmd_tasks(state: AppState, args: list[str]) -> str:
    active, done = api.get_partition(state)
    lines: list[str] = []
    for title, group in (("Active tasks:", active), ("Completed tasks:", done)):
        lines.append(title)
        if not group:
            lines.append("  (none)")
        lines.extend(_format_task(t) for t in group)
    return "\n".join(lines)


def cmd_add(state: AppState, args: list[str]) -> str:
    """/add <points> <member> <text...>"""
    points, token, text = _parse_task_form(args, "Usage: /add <points> <member> <text...>")
    member = _resolve_member(state, token)
    task = api.create_task(state, text, points, member)
    return f"Task created: #{task.id} {task.text} ({task.points} points, {task.assigned_to})"


def cmd_edit(state: AppState, args: list[str]) -> str:
    """/edit <id> <points> <member> <text...>"""
    usage = "Usage: /edit <id> <points> <member> <text...>"
    if not args:
        return usage
    task_id = _parse_int(args[0], "Task id")
    points, token, text = _parse_task_form(args[1:], usage)
    member = _resolve_member(state, token)
    task = api.edit_task(state, task_id, text, points, member)
    if task is None:
        return f"No task #{task_id}."
    return f"Task updated: #{task.id} {task.text} ({task.points} points, {task.assigned_to})"


def cmd_done(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if len(args) != 1:
        return "Usage: /done <id>"
    task_id = _parse_int(args[0], "Task id")
    before = find_task(api.current_tasks(state), task_id)
    if before is not None and before.completed:
        return f"Task #{task_id} is already completed."
    task = api.complete_task(state, task_id)
    if task is None:
        return f"No task #{task_id}."
    if emit is not None:
        emit(f"Nice work! +{task.points} points for {task.assigned_to or 'nobody'}.")
    return f"Task completed: #{task.id} {task.text}"


def cmd_delete(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /delete <id>"
    task_id = _parse_int(args[0], "Task id")
    if not api.delete_task(state, task_id):
        return f"No task #{task_id}."
    return f"Task #{task_id} deleted."


def cmd_family(state: AppState, args: list[str]) -> str:
    """
    /family               -> list members
    /family add <name>    -> add a member
    /family remove <name> -> remove a member (assigned tasks are kept)
    """
    if not args:
        roster = api.current_roster(state)
        if not roster:
            return "No family members yet. Use /family add <name>."
        return "Family members:\n" + "\n".join(f"  - {m}" for m in roster)

    sub = args[0].lower()
    name = " ".join(args[1:])

    if sub == "add":
        api.add_family_member(state, name)
        return f"Added {name.strip()}."
    if sub in ("remove", "rm"):
        if not name.strip():
            return "Usage: /family remove <name>"
        api.remove_family_member(state, name)
        return f"Removed {name.strip()}."

    return "Usage: /family | /family add <name> | /family remove <name>"


def cmd_leaderboard(state: AppState, args: list[str]) -> str:
    entries = api.get_leaderboard(state)
    if not entries:
        return "Leaderboard is empty. Add family members first."
    lines = ["Leaderboard:"]
    for i, e in enumerate(entries, start=1):
        lines.append(f"  {i}. {e.member}: {e.points} points")
    return "\n".join(lines)


def cmd_presets(state: AppState, args: list[str]) -> str:
    return (
        "Common tasks: " + ", ".join(COMMON_TASKS) + "\n"
        "Quick points: " + ", ".join(str(p) for p in QUICK_POINTS)
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show who is logged in and task counts.")
registry.register("signup", cmd_signup, help_text="Create an account: /signup <email> <password>.")
registry.register("login", cmd_login, help_text="Log in: /login <email> <password>.")
registry.register("logout", cmd_logout, help_text="Log out.")
registry.register("tasks", cmd_tasks, help_text="List active and completed tasks.", aliases=["ls"])
registry.register(
    "add", cmd_add, help_text="Create a task: /add <points> <member> <text...> (use _ for spaces in names)."
)
registry.register(
    "edit", cmd_edit, help_text="Edit a task: /edit <id> <points> <member> <text...>."
)
registry.register("done", cmd_done, help_text="Mark a task completed: /done <id>.")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["del"])
registry.register(
    "family", cmd_family, help_text="Family roster: /family | /family add <name> | /family remove <name>."
)
registry.register("leaderboard", cmd_leaderboard, help_text="Show points per family member.", aliases=["lb"])
registry.register("presets", cmd_presets, help_text="Show common tasks and quick point values.")
