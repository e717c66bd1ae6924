# src/homebase/core/ids.py

from __future__ import annotations

import time
from collections.abc import Iterable


def now_ms() -> int:
    return int(time.time() * 1000)


def next_id(existing_ids: Iterable[int], now: int | None = None) -> int:
    """
    Time-based id that is strictly greater than every id already in use.

    Two ids created in the same millisecond (or after a clock step back)
    still differ: the result is max(now, max(existing) + 1).
    """
    if now is None:
        now = now_ms()
    highest = max(existing_ids, default=0)
    return max(int(now), highest + 1)
