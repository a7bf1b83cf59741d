# app/domain/state.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from app.domain.common.errors import NameValidationError
from app.domain.common.fsm import round_state_of
from app.domain.common.types import RoundState, Vote
from app.domain.common.validation import check_player_name
from app.domain.ids import IdSource
from app.domain.ledger import RoundLedger
from app.domain.roster import Player, Roster
from app.store.models import PlayerStore, RoundStore, SnapshotStore

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    roster: Roster
    round: RoundLedger

    @classmethod
    def empty(cls, ids: Optional[IdSource] = None) -> "GameState":
        return cls(roster=Roster(ids=ids), round=RoundLedger())

    def is_round_complete(self) -> bool:
        return self.round.is_complete(self.roster)

    def round_state(self) -> RoundState:
        return round_state_of(len(self.roster), self.round.voted_count())

    # ----------------------------
    # Snapshot conversion
    # ----------------------------
    def to_snapshot(self) -> SnapshotStore:
        return SnapshotStore(
            players=[PlayerStore(id=p.id, name=p.name) for p in self.roster],
            round=RoundStore(votes=self.round.votes),
        )

    @classmethod
    def from_snapshot(cls, snap: SnapshotStore, ids: Optional[IdSource] = None) -> "GameState":
        """
        Rebuild state from a validated snapshot.
        - repeated player ids: first one wins
        - names are re-normalized; empty, too long or duplicate names are dropped
        - votes for unknown or dropped ids are dropped (no orphans)
        """
        players: List[Player] = []
        seen: set[str] = set()
        for p in snap.players:
            if p.id in seen:
                continue
            try:
                name = check_player_name(p.name, (q.name for q in players))
            except NameValidationError as e:
                logger.warning("dropping stored player id=%s: %s", p.id, e.code)
                continue
            seen.add(p.id)
            players.append(Player(id=p.id, name=name))

        votes: Dict[str, Vote] = {pid: v for pid, v in snap.round.votes.items() if pid in seen}
        return cls(roster=Roster(players, ids=ids), round=RoundLedger(votes))
