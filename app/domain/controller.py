# app/domain/controller.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from app.domain.common.errors import VoteError
from app.domain.ids import IdSource
from app.domain.roster import Player
from app.domain.state import GameState
from app.store.models import SnapshotStore

logger = logging.getLogger(__name__)

_CHOICE_LABEL = {"yes": "Yes", "no": "No"}


@dataclass(frozen=True)
class CommandResult:
    ok: bool
    code: str
    message: str
    player: Optional[Player] = None


class RoundController:
    """
    Runs the five commands against an explicitly owned GameState.

    One call = one consistent transition. Rule violations come back as a
    failed CommandResult with the state untouched; nothing is raised.
    Persistence and rendering are the caller's job.
    """

    def __init__(self, state: Optional[GameState] = None, ids: Optional[IdSource] = None) -> None:
        self._ids = ids
        self.state = state if state is not None else GameState.empty(ids=ids)

    def checkpoint(self) -> SnapshotStore:
        return self.state.to_snapshot()

    def restore(self, snap: SnapshotStore) -> None:
        """Roll back to a checkpoint taken before a command."""
        self.state = GameState.from_snapshot(snap, ids=self._ids)

    def add_player(self, name: str) -> CommandResult:
        try:
            player = self.state.roster.add_player(name)
        except VoteError as e:
            return CommandResult(ok=False, code=e.code, message=e.message)

        logger.info("player added id=%s name=%r", player.id, player.name)
        return CommandResult(ok=True, code="PLAYER_ADDED", message=f"Player added: {player.name}", player=player)

    def remove_player(self, player_id: str) -> CommandResult:
        player = self.state.roster.remove_player(player_id)
        # cascade even for a stale id: the ledger must never hold orphans
        self.state.round.discard(player_id)

        if player is None:
            return CommandResult(ok=True, code="PLAYER_REMOVED", message="Player removed.")

        logger.info("player removed id=%s", player.id)
        return CommandResult(ok=True, code="PLAYER_REMOVED", message=f"Player removed: {player.name}", player=player)

    def cast_vote(self, player_id: str, choice: str) -> CommandResult:
        if not player_id:
            return CommandResult(ok=False, code="NO_PLAYER_SELECTED", message="Please select a player first.")

        try:
            self.state.round.cast_vote(self.state.roster, player_id, choice)
        except VoteError as e:
            return CommandResult(ok=False, code=e.code, message=e.message)

        player = self.state.roster.get(player_id)
        name = player.name if player else "Player"
        logger.info("vote cast id=%s choice=%s state=%s", player_id, choice, self.state.round_state())
        return CommandResult(
            ok=True,
            code="VOTE_CAST",
            message=f"{name} voted: {_CHOICE_LABEL[choice]}",
            player=player,
        )

    def reset_round(self) -> CommandResult:
        self.state.round.reset_round()
        return CommandResult(ok=True, code="ROUND_RESET", message="Round reset. A new round can start.")

    def reset_game(self) -> CommandResult:
        self.state = GameState.empty(ids=self._ids)
        logger.info("game reset")
        return CommandResult(ok=True, code="GAME_RESET", message="Game reset. All players removed.")
