# src/homebase/errors.py

"""
Exceptions raised by the domain and API layers.

All of them are recoverable: the command layer catches HomeBaseError and shows
the message to the user, keeping the current input state.
"""

from __future__ import annotations


class HomeBaseError(Exception):
    """Base class for user-facing HomeBase errors."""


class ValidationError(HomeBaseError):
    """Empty or malformed input."""


class ConflictError(HomeBaseError):
    """Duplicate email or duplicate family member."""


class NotFoundError(HomeBaseError):
    """
    Lookup failed.

    For logins the message is deliberately generic, so it does not reveal
    whether the email exists.
    """


class NotLoggedInError(HomeBaseError):
    """An operation needs a logged-in user and there is none."""

    def __init__(self, message: str = "Please log in first (/login or /signup).") -> None:
        super().__init__(message)


class StorageError(HomeBaseError):
    """A stored value exists but cannot be read; nothing may overwrite it."""
