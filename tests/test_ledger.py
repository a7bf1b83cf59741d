import pytest

from app.domain.common.errors import OperationError
from app.domain.ids import counter_ids
from app.domain.ledger import RoundLedger, Tally
from app.domain.roster import Roster


def _roster(*names):
    roster = Roster(ids=counter_ids())
    for n in names:
        roster.add_player(n)
    return roster


def test_cast_vote_records_and_tallies():
    roster = _roster("Alice", "Bob", "Cem")
    ledger = RoundLedger()
    ledger.cast_vote(roster, "p1", "yes")
    ledger.cast_vote(roster, "p2", "no")
    assert ledger.tally() == Tally(yes=1, no=1)
    assert ledger.vote_of("p1") == "yes"
    assert ledger.vote_of("p3") is None
    assert ledger.is_complete(roster) is False


def test_last_vote_completes_round():
    roster = _roster("Alice", "Bob")
    ledger = RoundLedger()
    ledger.cast_vote(roster, "p1", "yes")
    ledger.cast_vote(roster, "p2", "yes")
    assert ledger.is_complete(roster) is True


def test_empty_roster_is_never_complete():
    assert RoundLedger().is_complete(Roster()) is False


def test_unknown_player_rejected_first():
    roster = _roster("Alice")
    ledger = RoundLedger({"p1": "yes"})
    # round is complete too, but PLAYER_NOT_FOUND is checked first
    with pytest.raises(OperationError) as exc:
        ledger.cast_vote(roster, "ghost", "no")
    assert exc.value.code == "PLAYER_NOT_FOUND"


def test_complete_round_rejects_before_duplicate():
    roster = _roster("Alice")
    ledger = RoundLedger({"p1": "yes"})
    with pytest.raises(OperationError) as exc:
        ledger.cast_vote(roster, "p1", "no")
    assert exc.value.code == "ROUND_ALREADY_COMPLETE"


def test_duplicate_vote_keeps_first():
    roster = _roster("Alice", "Bob")
    ledger = RoundLedger()
    ledger.cast_vote(roster, "p1", "yes")
    with pytest.raises(OperationError) as exc:
        ledger.cast_vote(roster, "p1", "no")
    assert exc.value.code == "DUPLICATE_VOTE"
    assert ledger.tally() == Tally(yes=1, no=0)


def test_only_yes_or_no():
    roster = _roster("Alice")
    ledger = RoundLedger()
    with pytest.raises(OperationError) as exc:
        ledger.cast_vote(roster, "p1", "maybe")
    assert exc.value.code == "INVALID_VOTE"
    assert ledger.voted_count() == 0


def test_reset_round_is_idempotent():
    roster = _roster("Alice")
    ledger = RoundLedger()
    ledger.cast_vote(roster, "p1", "no")
    ledger.reset_round()
    assert ledger.votes == {}
    ledger.reset_round()
    assert ledger.votes == {}
    assert len(roster) == 1


def test_votes_property_is_a_copy():
    ledger = RoundLedger({"p1": "yes"})
    ledger.votes["p2"] = "no"
    assert ledger.voted_count() == 1
