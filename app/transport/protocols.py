# app/transport/protocols.py
from __future__ import annotations

from typing import Any, Dict, Literal, Union
from pydantic import BaseModel, Field

from app.domain.common.types import Vote


# =========================
# Incoming (Client -> Server)
# =========================

class InBase(BaseModel):
    type: str


class InAddPlayer(InBase):
    type: Literal["add_player"] = "add_player"
    # raw input; normalization + length rules live in the domain
    name: str = ""


class InRemovePlayer(InBase):
    type: Literal["remove_player"] = "remove_player"
    player_id: str


class InCastVote(InBase):
    type: Literal["cast_vote"] = "cast_vote"
    # empty = nothing selected in the client
    player_id: str = ""
    choice: Vote


class InResetRound(InBase):
    type: Literal["reset_round"] = "reset_round"


class InResetGame(InBase):
    type: Literal["reset_game"] = "reset_game"


class InSnapshot(InBase):
    type: Literal["snapshot"] = "snapshot"


IncomingMessage = Union[
    InAddPlayer,
    InRemovePlayer,
    InCastVote,
    InResetRound,
    InResetGame,
    InSnapshot,
]


# =========================
# Outgoing (Server -> Client)
# =========================

class OutBase(BaseModel):
    type: str


class OutError(OutBase):
    type: Literal["error"] = "error"
    code: str
    message: str


class OutStatus(OutBase):
    type: Literal["status"] = "status"
    ok: bool
    code: str
    message: str


class OutBoard(OutBase):
    type: Literal["board"] = "board"
    board: Dict[str, Any] = Field(default_factory=dict)


OutgoingEvent = Union[
    OutError,
    OutStatus,
    OutBoard,
]


# =========================
# Parser helpers
# =========================

_INCOMING_BY_TYPE = {
    "add_player": InAddPlayer,
    "remove_player": InRemovePlayer,
    "cast_vote": InCastVote,
    "reset_round": InResetRound,
    "reset_game": InResetGame,
    "snapshot": InSnapshot,
}


def parse_incoming(payload: Dict[str, Any]) -> IncomingMessage:
    """
    Convert raw dict -> validated message model.
    Raises ValidationError (bad fields) or ValueError (bad/unknown type).
    """
    if not isinstance(payload, dict):
        raise ValueError("Message must be a JSON object")

    t = payload.get("type")
    if not isinstance(t, str):
        raise ValueError("Missing/invalid type")

    cls = _INCOMING_BY_TYPE.get(t)
    if cls is None:
        raise ValueError(f"Unknown message type: {t}")

    return cls.model_validate(payload)
