# app/domain/roster.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from app.domain.common.validation import check_player_name
from app.domain.ids import IdSource, random_ids


@dataclass(frozen=True)
class Player:
    id: str
    name: str


class Roster:
    """
    Ordered set of players (insertion order).
    - ids are unique for the lifetime of the roster
    - names are normalized and unique case-insensitively
    Vote state is NOT touched here; the controller cascades removals.
    """

    def __init__(self, players: Iterable[Player] = (), ids: Optional[IdSource] = None) -> None:
        self._players: List[Player] = list(players)
        self._ids = ids or random_ids()

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(list(self._players))

    def __contains__(self, player_id: object) -> bool:
        return any(p.id == player_id for p in self._players)

    def ids(self) -> List[str]:
        return [p.id for p in self._players]

    def get(self, player_id: str) -> Optional[Player]:
        for p in self._players:
            if p.id == player_id:
                return p
        return None

    def _fresh_id(self) -> str:
        # loaded snapshots may already hold ids the source would produce
        used = set(self.ids())
        pid = self._ids()
        while pid in used:
            pid = self._ids()
        return pid

    def add_player(self, raw_name: str) -> Player:
        """Raises NameValidationError (EMPTY_NAME, NAME_TOO_LONG, DUPLICATE_NAME)."""
        name = check_player_name(raw_name, (p.name for p in self._players))
        player = Player(id=self._fresh_id(), name=name)
        self._players.append(player)
        return player

    def remove_player(self, player_id: str) -> Optional[Player]:
        """Returns the removed player, or None if the id is not present."""
        player = self.get(player_id)
        if player is None:
            return None
        self._players = [p for p in self._players if p.id != player_id]
        return player
