# src/homebase/accounts/account_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace
from typing import Any

from ..core.ids import next_id
from ..core.ports import KeyValueRepo
from ..core.security import hash_password, needs_rehash, verify_password
from ..errors import ConflictError, NotFoundError, StorageError, ValidationError
from ..tasks.task_models import Task
from .account_models import User

logger = logging.getLogger(__name__)

USERS_KEY = "users"
INVALID_CREDENTIALS = "Invalid email or password"


class AccountStore:
    """
    Registered users, persisted as one JSON list under the "users" key.

    Every write rewrites the whole list (there is no per-record update in a
    key/value store). Lookups are linear scans; households are small.
    """

    def __init__(self, kv: KeyValueRepo, *, min_password_length: int = 6) -> None:
        self._kv = kv
        self._min_password_length = min_password_length

    # ---- low-level helpers ----

    def _load_all(self) -> tuple[list[User], list[Any]]:
        """
        Return (parsed users, raw records that did not parse).

        Unparsed records are carried through every save unchanged.
        """
        raw = self._kv.get(USERS_KEY, [])
        if not isinstance(raw, list):
            logger.error("Malformed %r value (%s)", USERS_KEY, type(raw).__name__)
            raise StorageError(f"Stored data for {USERS_KEY!r} is not a list; fix or remove it")
        users: list[User] = []
        unparsed: list[Any] = []
        for rec in raw:
            try:
                users.append(User.from_dict(rec))
            except (AttributeError, KeyError, TypeError, ValueError):
                logger.warning("Keeping unreadable user record as-is: %.80r", rec)
                unparsed.append(rec)
        return users, unparsed

    def _load(self) -> list[User]:
        return self._load_all()[0]

    def _save(self, users: Iterable[User], unparsed: Iterable[Any] = ()) -> None:
        payload: list[Any] = [u.to_dict() for u in users]
        payload.extend(unparsed)
        self._kv.set(USERS_KEY, payload)
        logger.debug("Accounts saved records=%d", len(payload))

    def _validate_signup(self, email: str, password: str) -> None:
        if not email or not password:
            raise ValidationError("Please fill in all fields")
        if "@" not in email:
            raise ValidationError("Please enter a valid email")
        if len(password) < self._min_password_length:
            raise ValidationError(
                f"Password must be at least {self._min_password_length} characters"
            )

    # ---- public API ----

    def list_users(self) -> list[User]:
        return self._load()

    def count_users(self) -> int:
        return len(self._load())

    def get_user(self, user_id: int) -> User | None:
        for u in self._load():
            if u.id == user_id:
                return u
        return None

    def email_exists(self, email: str) -> bool:
        return any(u.email == email for u in self._load())

    def find_user(self, email: str, password: str) -> User | None:
        """Exact match on email plus a password that verifies; None otherwise."""
        users, unparsed = self._load_all()
        for i, u in enumerate(users):
            if u.email != email or not verify_password(password, u.password):
                continue
            if needs_rehash(u.password):
                u = replace(u, password=hash_password(password))
                users[i] = u
                self._save(users, unparsed)
                logger.info("Upgraded stored password hash for user_id=%s", u.id)
            return u
        return None

    def login(self, email: str, password: str) -> User:
        user = self.find_user(email, password)
        if user is None:
            # Same message for unknown email and wrong password.
            raise NotFoundError(INVALID_CREDENTIALS)
        return user

    def create_user(self, email: str, password: str, *, now: int | None = None) -> User:
        self._validate_signup(email, password)

        users, unparsed = self._load_all()
        raw = [r for r in unparsed if isinstance(r, dict)]
        if any(u.email == email for u in users) or any(r.get("email") == email for r in raw):
            raise ConflictError("Email already exists")

        taken = [u.id for u in users]
        taken.extend(r["id"] for r in raw if type(r.get("id")) is int)
        user = User(
            id=next_id(taken, now),
            email=email,
            password=hash_password(password),
            tasks=(),
        )
        users.append(user)
        self._save(users, unparsed)
        logger.info("User created id=%s", user.id)
        return user

    def update_user_tasks(self, user_id: int, tasks: Iterable[Task]) -> User:
        """Replace one user's tasks and rewrite the whole account list."""
        users, unparsed = self._load_all()
        for i, u in enumerate(users):
            if u.id == user_id:
                updated = replace(u, tasks=tuple(tasks))
                users[i] = updated
                self._save(users, unparsed)
                return updated
        raise NotFoundError(f"Unknown user id {user_id}")
