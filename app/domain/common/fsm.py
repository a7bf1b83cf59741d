# app/domain/common/fsm.py
from __future__ import annotations

from app.domain.common.types import RoundState


def round_state_of(total: int, voted: int) -> RoundState:
    """
    Derive the round state purely from roster size and vote count.
    Never cached: removals during COMPLETE may drop straight to EMPTY.
    """
    if total <= 0:
        return "EMPTY"
    if voted >= total:
        return "COMPLETE"
    return "IN_PROGRESS"


def is_complete(total: int, voted: int) -> bool:
    return round_state_of(total, voted) == "COMPLETE"
