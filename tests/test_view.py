from app.domain.controller import RoundController
from app.domain.ids import counter_ids
from app.domain.view import render


def test_render_empty():
    board = render(RoundController(ids=counter_ids()).state)
    assert board.players == []
    assert board.round_state == "EMPTY"
    assert board.banner == "Waiting for players"
    assert board.progress.text == ""
    assert board.empty_hint_visible is True
    assert board.vote_enabled is False
    assert board.round_reset_enabled is False
    assert board.player_select_enabled is False
    assert board.game_reset_enabled is True


def test_render_in_progress():
    c = RoundController(ids=counter_ids())
    c.add_player("Alice")
    c.add_player("Bob")
    c.cast_vote("p1", "yes")

    board = render(c.state)
    assert [(p.name, p.voted, p.label) for p in board.players] == [
        ("Alice", True, "Voted: Yes"),
        ("Bob", False, "Not voted yet"),
    ]
    assert board.tally.yes == 1
    assert board.tally.no == 0
    assert board.progress.text == "1/2 voted"
    assert board.banner == "Round in progress"
    assert board.vote_enabled is True
    assert board.round_reset_enabled is True


def test_render_complete_disables_voting():
    c = RoundController(ids=counter_ids())
    c.add_player("Alice")
    c.cast_vote("p1", "no")

    board = render(c.state)
    assert board.round_state == "COMPLETE"
    assert board.banner == "Round complete"
    assert board.players[0].label == "Voted: No"
    assert board.vote_enabled is False
    assert board.round_reset_enabled is True
    assert board.game_reset_enabled is True


def test_render_does_not_mutate():
    c = RoundController(ids=counter_ids())
    c.add_player("Alice")
    before = c.state.to_snapshot()
    render(c.state)
    render(c.state)
    assert c.state.to_snapshot() == before
