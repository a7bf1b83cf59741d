# app/transport/dispatcher.py
from __future__ import annotations

from typing import Any, Dict, List

from pydantic import ValidationError

from app.transport.protocols import (
    parse_incoming,
    OutError,
    OutgoingEvent,
    InAddPlayer,
    InRemovePlayer,
    InCastVote,
    InResetRound,
    InResetGame,
)
from app.domain.handlers import (
    handle_add_player,
    handle_remove_player,
    handle_cast_vote,
    handle_reset_round,
    handle_reset_game,
    handle_snapshot,
)

DispatchResult = List[Dict[str, Any]]
# events for the sender, each event is a JSON dict


async def dispatch_message(*, app, raw: Dict[str, Any]) -> DispatchResult:
    """
    Transport layer calls this.
    - Parses + validates raw JSON
    - Routes to the correct domain handler
    - Returns events as JSON dicts

    NOTE: This file contains NO Redis usage and NO vote rules.
    """
    try:
        msg = parse_incoming(raw)
    except (ValidationError, ValueError) as e:
        return [OutError(code="BAD_MESSAGE", message=str(e)).model_dump()]

    if isinstance(msg, InAddPlayer):
        return _dump(await handle_add_player(app=app, msg=msg))

    if isinstance(msg, InRemovePlayer):
        return _dump(await handle_remove_player(app=app, msg=msg))

    if isinstance(msg, InCastVote):
        return _dump(await handle_cast_vote(app=app, msg=msg))

    if isinstance(msg, InResetRound):
        return _dump(await handle_reset_round(app=app, msg=msg))

    if isinstance(msg, InResetGame):
        return _dump(await handle_reset_game(app=app, msg=msg))

    # InSnapshot
    return _dump(await handle_snapshot(app=app, msg=msg))


def _dump(events: List[OutgoingEvent]) -> DispatchResult:
    """
    Convert pydantic events -> JSON dicts.
    """
    return [e.model_dump() for e in events]
