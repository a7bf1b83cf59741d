import pytest
from pydantic import ValidationError

from app.transport.protocols import InCastVote, parse_incoming


def test_parse_incoming_add_player():
    msg = parse_incoming({"type": "add_player", "name": "  Alice "})
    assert msg.type == "add_player"
    # raw: normalization belongs to the roster
    assert msg.name == "  Alice "


def test_parse_incoming_cast_vote():
    msg = parse_incoming({"type": "cast_vote", "player_id": "p1", "choice": "no"})
    assert isinstance(msg, InCastVote)
    assert msg.choice == "no"

    with pytest.raises(ValidationError):
        parse_incoming({"type": "cast_vote", "player_id": "p1", "choice": "maybe"})


def test_parse_incoming_remove_requires_id():
    with pytest.raises(ValidationError):
        parse_incoming({"type": "remove_player"})


def test_parse_incoming_unknown_type():
    with pytest.raises(ValueError):
        parse_incoming({"type": "does_not_exist"})


def test_parse_incoming_missing_type():
    with pytest.raises(ValueError):
        parse_incoming({"name": "Alice"})
