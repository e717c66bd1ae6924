# src/homebase/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps storage swappable and lets tests run against an in-memory fake.
"""

from typing import Any, Protocol


class KeyValueRepo(Protocol):
    """JSON values under string keys (the browser local-storage model)."""

    def get(self, key: str, default: Any = None) -> Any: ...
    def set(self, key: str, value: Any) -> None: ...
    def delete(self, key: str) -> None: ...
    def keys(self) -> list[str]: ...
