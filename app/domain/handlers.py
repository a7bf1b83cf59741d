# app/domain/handlers.py
from __future__ import annotations

import logging
from typing import Awaitable, Callable, List

from redis.exceptions import RedisError

from app.domain.controller import CommandResult, RoundController
from app.domain.view import render
from app.transport.protocols import (
    InAddPlayer,
    InCastVote,
    InRemovePlayer,
    InResetGame,
    InResetRound,
    InSnapshot,
    OutBoard,
    OutgoingEvent,
    OutStatus,
)

logger = logging.getLogger(__name__)

Result = List[OutgoingEvent]


def _board(controller: RoundController) -> OutBoard:
    return OutBoard(board=render(controller.state).model_dump())


async def _run(
    app,
    command: Callable[[RoundController], CommandResult],
    persist: Callable[[], Awaitable[None]],
) -> Result:
    """
    lock -> command -> persist -> redraw.
    A failed write rolls memory back to the pre-command checkpoint.
    """
    async with app.state.command_lock:
        controller: RoundController = app.state.controller
        before = controller.checkpoint()
        result = command(controller)

        if result.ok:
            try:
                await persist()
            except (RedisError, OSError) as e:
                logger.error("persist failed after %s, rolling back: %s", result.code, e)
                controller.restore(before)
                result = CommandResult(
                    ok=False,
                    code="PERSISTENCE_ERROR",
                    message="Could not save the game. Nothing was changed, please try again.",
                )

        logger.info("command %s ok=%s", result.code, result.ok)
        return [OutStatus(ok=result.ok, code=result.code, message=result.message), _board(controller)]


def _save(app) -> Callable[[], Awaitable[None]]:
    return lambda: app.state.repo.save_state(app.state.controller.state)


async def handle_add_player(*, app, msg: InAddPlayer) -> Result:
    return await _run(app, lambda c: c.add_player(msg.name), _save(app))


async def handle_remove_player(*, app, msg: InRemovePlayer) -> Result:
    return await _run(app, lambda c: c.remove_player(msg.player_id), _save(app))


async def handle_cast_vote(*, app, msg: InCastVote) -> Result:
    return await _run(app, lambda c: c.cast_vote(msg.player_id, msg.choice), _save(app))


async def handle_reset_round(*, app, msg: InResetRound) -> Result:
    return await _run(app, lambda c: c.reset_round(), _save(app))


async def handle_reset_game(*, app, msg: InResetGame) -> Result:
    # erase, don't overwrite: the next command writes a fresh record
    return await _run(app, lambda c: c.reset_game(), app.state.repo.clear_state)


async def handle_snapshot(*, app, msg: InSnapshot) -> Result:
    async with app.state.command_lock:
        return [_board(app.state.controller)]
