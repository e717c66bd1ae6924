# tests/fakes.py

from __future__ import annotations

import copy
import json
from typing import Any

from homebase.errors import StorageError


class FakeKeyValueStore:
    """
    In-memory KeyValueRepo for unit tests.

    Values go through a JSON round-trip on set, like the real store, so tests
    catch anything that would not serialize.
    """

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.writes: list[str] = []

    def get(self, key: str, default: Any = None) -> Any:
        raw = self.data.get(key)
        if raw is None:
            return default
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(f"Stored data for {key!r} is unreadable") from e

    def set(self, key: str, value: Any) -> None:
        self.data[key] = json.dumps(copy.deepcopy(value))
        self.writes.append(key)

    def delete(self, key: str) -> None:
        self.data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self.data)
