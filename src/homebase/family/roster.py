# src/homebase/family/roster.py

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..core.ports import KeyValueRepo
from ..errors import ConflictError, StorageError, ValidationError
from ..storage.kv_store import scoped_key

logger = logging.getLogger(__name__)

ROSTER_CATEGORY = "family"


def add_member(roster: Sequence[str], name: str | None) -> list[str]:
    """
    Append a trimmed member name.

    Raises ValidationError for a blank name and ConflictError when the trimmed
    name is already present (case-sensitive).
    """
    clean = (name or "").strip()
    if not clean:
        raise ValidationError("Please enter a name")
    if clean in roster:
        raise ConflictError("This family member already exists")
    return [*roster, clean]


def remove_member(roster: Sequence[str], name: str) -> list[str]:
    # Tasks assigned to the removed name are not touched.
    return [m for m in roster if m != name]


class RosterStore:
    """Per-user family rosters persisted as JSON lists under "family_<userId>"."""

    def __init__(self, kv: KeyValueRepo) -> None:
        self._kv = kv

    def load(self, user_id: int) -> list[str]:
        key = scoped_key(ROSTER_CATEGORY, user_id)
        raw = self._kv.get(key, [])
        if not isinstance(raw, list):
            logger.error("Malformed roster for user_id=%s (%s)", user_id, type(raw).__name__)
            raise StorageError(f"Stored data for {key!r} is not a list; fix or remove it")
        return [str(m) for m in raw if isinstance(m, str)]

    def save(self, user_id: int, roster: Sequence[str]) -> None:
        self._kv.set(scoped_key(ROSTER_CATEGORY, user_id), list(roster))
        logger.debug("Roster saved user_id=%s members=%d", user_id, len(roster))
