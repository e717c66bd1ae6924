# src/homebase/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _rewrite_prev_line(line: str) -> None:
    """
    Replace the last terminal line with `line`.
    Best-effort: if not a TTY, just print a new line.
    """
    if sys.stdout.isatty():
        sys.stdout.write("\033[1A\033[2K\r")
        sys.stdout.write(line + "\n")
        sys.stdout.flush()
    else:
        print(line)


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def _prompt(state: AppState) -> str:
    who = state.user.email if state.user is not None else "guest"
    return f"{who}> "


def run_console_loop(state: AppState, *, input_fn: InputFn = input) -> None:
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "HomeBase"))
    logger.info("Console connector started.")
    _print_ts(f"[{app_name}] Use /signup or /login to begin, /help for commands, /exit to quit.\n")

    def emit(text: str) -> None:
        # Extra feedback printed before the command's own reply.
        print(f"[{_ts_local()}] {text}", flush=True)

    while True:
        try:
            prompt = _prompt(state)
            user_input = input_fn(prompt).strip()
            if input_fn is input:
                _rewrite_prev_line(f"[{_ts_local()}] {prompt}{_mask_secrets(user_input)}")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            with state.lock:
                response = command_registry.handle(state, user_input, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response is None:
            response = "Commands start with '/'. Use /help to list available commands."

        _print_ts(response)

    logger.info("Console connector finished.")


def _mask_secrets(line: str) -> str:
    """Hide the password argument of /login and /signup when echoing input."""
    parts = line.split()
    if len(parts) >= 3 and parts[0].lower() in ("/login", "/signup"):
        return " ".join([*parts[:2], "******", *parts[3:]])
    return line
