# app/domain/ids.py
from __future__ import annotations

import itertools
import uuid
from typing import Callable

IdSource = Callable[[], str]


def random_ids() -> IdSource:
    """Short random hex ids, same shape as connection pids."""
    def _next() -> str:
        return uuid.uuid4().hex[:10]
    return _next


def counter_ids(prefix: str = "p") -> IdSource:
    """Deterministic ids: p1, p2, ... (tests, replays)."""
    counter = itertools.count(1)

    def _next() -> str:
        return f"{prefix}{next(counter)}"
    return _next
