# app/domain/ledger.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from app.domain.common.errors import OperationError
from app.domain.common.fsm import is_complete
from app.domain.common.types import VOTE_CHOICES, Vote
from app.domain.roster import Roster


@dataclass(frozen=True)
class Tally:
    yes: int = 0
    no: int = 0


class RoundLedger:
    """
    Votes of the active round: player id -> "yes" | "no".
    At most one entry per current player; keys never outlive the player.
    """

    def __init__(self, votes: Optional[Mapping[str, Vote]] = None) -> None:
        self._votes: Dict[str, Vote] = dict(votes or {})

    @property
    def votes(self) -> Dict[str, Vote]:
        return dict(self._votes)

    def voted_count(self) -> int:
        return len(self._votes)

    def vote_of(self, player_id: str) -> Optional[Vote]:
        return self._votes.get(player_id)

    def is_complete(self, roster: Roster) -> bool:
        return is_complete(len(roster), self.voted_count())

    def cast_vote(self, roster: Roster, player_id: str, choice: str) -> None:
        """
        Record one vote. Checks, in order:
        PLAYER_NOT_FOUND -> ROUND_ALREADY_COMPLETE -> DUPLICATE_VOTE.
        """
        if choice not in VOTE_CHOICES:
            raise OperationError("INVALID_VOTE", "Vote must be 'yes' or 'no'.")
        if player_id not in roster:
            raise OperationError("PLAYER_NOT_FOUND", "Unknown player. Please select again.")
        if self.is_complete(roster):
            raise OperationError("ROUND_ALREADY_COMPLETE", "Round is already complete. Please reset the round.")
        if player_id in self._votes:
            raise OperationError("DUPLICATE_VOTE", "This player has already voted this round.")

        self._votes[player_id] = choice  # type: ignore[assignment]

    def tally(self) -> Tally:
        values = list(self._votes.values())
        return Tally(yes=values.count("yes"), no=values.count("no"))

    def discard(self, player_id: str) -> None:
        self._votes.pop(player_id, None)

    def reset_round(self) -> None:
        self._votes.clear()
