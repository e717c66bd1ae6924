# tests/test_commands.py

from __future__ import annotations

from homebase.cli.commands import CommandRegistry, registry
from homebase.core.state import AppState
from homebase.errors import ConflictError


def test_command_registry_routes_2_and_3_params(state: AppState) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}
    emitted: list[str] = []

    def h2(state, args):
        called["h2"] += 1
        return "h2 " + ",".join(args)

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b", aliases=["bee"])

    assert reg.handle(state, "/a x y") == "h2 x,y"
    assert reg.handle(state, "/BEE", emit=emitted.append) == "h3"
    assert called == {"h2": 1, "h3": 1}
    assert emitted == ["note"]


def test_command_registry_unknown_and_non_command(state: AppState) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_command_registry_turns_domain_errors_into_replies(state: AppState) -> None:
    reg = CommandRegistry()

    def boom(state, args):
        raise ConflictError("already there")

    reg.register("boom", boom, "boom")
    assert reg.handle(state, "/boom") == "already there"


def test_household_session_via_commands(state: AppState) -> None:
    def run(line: str) -> str:
        out = registry.handle(state, line)
        assert out is not None
        return out

    assert "log in" in run("/tasks")
    assert "valid email" in run("/signup no-at-sign secret123")
    assert "at least 6" in run("/signup a@b.com abc")
    assert "Account created" in run("/signup a@b.com secret123")

    assert "Added Alice" in run("/family add Alice")
    assert "Added Mary Ann" in run("/family add Mary Ann")
    assert "already exists" in run("/family add Alice")
    assert "Alice" in run("/family") and "Mary Ann" in run("/family")

    assert "Unknown family member" in run("/add 10 Zed Dishes")
    assert "whole number" in run("/add ten Alice Dishes")
    created = run("/add 10 Alice Wash dishes")
    assert created.startswith("Task created: #")
    task_id = created.split("#", 1)[1].split()[0]

    assert "Mary Ann" in run("/add 5 Mary_Ann Take out trash")
    assert "Task completed" in run(f"/done {task_id}")
    assert "already completed" in run(f"/done {task_id}")
    assert "No task #1" in run("/done 1")

    board = run("/leaderboard")
    assert board.splitlines()[1:] == ["  1. Alice: 10 points", "  2. Mary Ann: 0 points"]

    listing = run("/tasks")
    assert listing.index("Take out trash") < listing.index("Completed tasks:")
    assert listing.index("Wash dishes") > listing.index("Completed tasks:")

    assert "Task updated" in run(f"/edit {task_id} 20 Alice Wash all dishes")
    assert "Alice: 20 points" in run("/lb")

    assert f"Task #{task_id} deleted" in run(f"/delete {task_id}")
    assert "Logged out" in run("/logout")
    assert "Login successful" in run("/login a@b.com secret123")


def test_login_failure_message_is_generic(state: AppState) -> None:
    registry.handle(state, "/signup a@b.com secret123")
    registry.handle(state, "/logout")

    assert registry.handle(state, "/login a@b.com wrong-pass") == "Invalid email or password"
    assert registry.handle(state, "/login x@b.com secret123") == "Invalid email or password"


def test_help_and_presets(state: AppState) -> None:
    help_text = registry.handle(state, "/help") or ""
    for name in ("/signup", "/login", "/add", "/done", "/family", "/leaderboard"):
        assert name in help_text

    presets = registry.handle(state, "/presets") or ""
    assert "Wash dishes" in presets
    assert "5, 10, 15, 20, 25" in presets


def test_member_names_with_underscores(state: AppState) -> None:
    registry.handle(state, "/signup a@b.com secret123")
    registry.handle(state, "/family add Jean_Luc")
    registry.handle(state, "/family add Mary Ann")

    assert "(5 points, Jean_Luc)" in (registry.handle(state, "/add 5 Jean_Luc Dishes") or "")
    assert "(5 points, Mary Ann)" in (registry.handle(state, "/add 5 Mary_Ann Trash") or "")
    assert "Unknown family member" in (registry.handle(state, "/add 5 Jean Dishes") or "")
