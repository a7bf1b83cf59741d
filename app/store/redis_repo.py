# app/store/redis_repo.py
from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError
from redis.asyncio import Redis

from app.domain.ids import IdSource
from app.domain.state import GameState
from app.store.models import SnapshotStore
from app.store.redis_keys import RK

logger = logging.getLogger(__name__)


class RedisRepo:
    """
    Persistence adapter: one snapshot record under a single fixed key.
    """

    def __init__(self, r: Redis, key_prefix: str = "vote", state_key: str = "boardgame_vote_state_v1"):
        self.r = r
        self.key = RK(key_prefix).state(state_key)

    def _dec(self, x):
        """Decode redis bytes -> str; pass through str/None."""
        if x is None:
            return None
        if isinstance(x, bytes):
            return x.decode("utf-8")
        return x

    async def load_snapshot(self) -> Optional[SnapshotStore]:
        """
        Returns None when the record is absent or unusable.
        Corruption is logged, never raised.
        """
        data = await self.r.get(self.key)
        if not data:
            return None
        try:
            return SnapshotStore.model_validate_json(self._dec(data))
        except (ValidationError, ValueError) as e:
            logger.warning("discarding corrupt snapshot at %s: %s", self.key, e)
            return None

    async def load_state(self, ids: Optional[IdSource] = None) -> GameState:
        snap = await self.load_snapshot()
        if snap is None:
            logger.info("no snapshot at %s, starting empty", self.key)
            return GameState.empty(ids=ids)
        state = GameState.from_snapshot(snap, ids=ids)
        logger.info("loaded snapshot players=%d votes=%d", len(state.roster), state.round.voted_count())
        return state

    async def save_state(self, state: GameState) -> None:
        await self.r.set(self.key, state.to_snapshot().model_dump_json())
        logger.debug("saved snapshot to %s", self.key)

    async def clear_state(self) -> None:
        await self.r.delete(self.key)
