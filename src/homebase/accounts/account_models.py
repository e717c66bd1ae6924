# src/homebase/accounts/account_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_models import Task


@dataclass(frozen=True, slots=True)
class User:
    id: int
    email: str
    # passlib hash; plaintext only in records written by older clients
    password: str
    tasks: tuple[Task, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "email": self.email,
            "password": self.password,
            "tasks": [t.to_dict() for t in self.tasks],
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> User:
        tasks_raw = raw.get("tasks") or []
        return cls(
            id=int(raw["id"]),
            email=str(raw["email"]),
            password=str(raw.get("password") or ""),
            tasks=tuple(Task.from_dict(t) for t in tasks_raw),
        )
