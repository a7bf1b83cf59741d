# app/store/models.py
from __future__ import annotations

from typing import Dict, List, Literal

from pydantic import BaseModel


class PlayerStore(BaseModel):
    id: str
    name: str


class RoundStore(BaseModel):
    # required: a snapshot without round.votes is treated as corrupt
    votes: Dict[str, Literal["yes", "no"]]


class SnapshotStore(BaseModel):
    """
    The one persisted record. Overwritten wholesale on every save.
    """
    players: List[PlayerStore]
    round: RoundStore
