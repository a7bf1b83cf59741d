# app/store/redis_keys.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RK:
    """
    Redis key builder. Everything lives under one namespace prefix.
    """
    prefix: str = "vote"

    def state(self, name: str = "boardgame_vote_state_v1") -> str:
        return f"{self.prefix}:{name}"  # STRING snapshot JSON
