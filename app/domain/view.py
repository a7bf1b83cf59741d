# app/domain/view.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from app.domain.common.types import RoundState, Vote
from app.domain.state import GameState

_BANNER = {
    "EMPTY": "Waiting for players",
    "IN_PROGRESS": "Round in progress",
    "COMPLETE": "Round complete",
}

_HINT = {
    "EMPTY": "Please add players first.",
    "IN_PROGRESS": "The result appears automatically once every player has voted.",
    "COMPLETE": "Everyone has voted. You can reset the round now.",
}

_CHOICE_LABEL = {"yes": "Yes", "no": "No"}


class PlayerView(BaseModel):
    id: str
    name: str
    voted: bool
    vote: Optional[Vote] = None
    label: str


class TallyView(BaseModel):
    yes: int
    no: int


class ProgressView(BaseModel):
    voted: int
    total: int
    text: str


class BoardView(BaseModel):
    players: List[PlayerView]
    tally: TallyView
    progress: ProgressView
    round_state: RoundState
    banner: str
    hint: str

    empty_hint_visible: bool
    player_select_enabled: bool
    vote_enabled: bool
    round_reset_enabled: bool
    game_reset_enabled: bool


def render(state: GameState) -> BoardView:
    """
    Pure projection: state -> everything a client needs to redraw.
    Never mutates state, never calls back into the controller.
    """
    players: List[PlayerView] = []
    for p in state.roster:
        vote = state.round.vote_of(p.id)
        label = f"Voted: {_CHOICE_LABEL[vote]}" if vote else "Not voted yet"
        players.append(PlayerView(id=p.id, name=p.name, voted=vote is not None, vote=vote, label=label))

    total = len(state.roster)
    voted = state.round.voted_count()
    rs = state.round_state()
    tally = state.round.tally()

    return BoardView(
        players=players,
        tally=TallyView(yes=tally.yes, no=tally.no),
        progress=ProgressView(voted=voted, total=total, text=f"{voted}/{total} voted" if total else ""),
        round_state=rs,
        banner=_BANNER[rs],
        hint=_HINT[rs],
        empty_hint_visible=total == 0,
        player_select_enabled=total > 0,
        vote_enabled=rs == "IN_PROGRESS",
        round_reset_enabled=total > 0,
        game_reset_enabled=True,
    )
