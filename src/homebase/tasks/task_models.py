# src/homebase/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    text: str
    points: int
    completed: bool = False
    assigned_to: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Persisted shape. The camelCase key matches data written by earlier clients."""
        out: dict[str, Any] = {
            "id": self.id,
            "text": self.text,
            "points": self.points,
            "completed": self.completed,
        }
        if self.assigned_to:
            out["assignedTo"] = self.assigned_to
        return out

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task:
        assigned = raw.get("assignedTo")
        return cls(
            id=int(raw["id"]),
            text=str(raw.get("text") or ""),
            points=int(raw.get("points") or 0),
            completed=raw.get("completed") is True,
            assigned_to=str(assigned) if assigned else None,
        )


@dataclass(frozen=True, slots=True)
class LeaderboardEntry:
    member: str
    points: int
