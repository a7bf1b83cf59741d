"""
Domain exceptions.

Raised by Roster / RoundLedger, caught by RoundController and turned into
status messages. Nothing here ever reaches the transport layer.
"""
from __future__ import annotations


class VoteError(Exception):
    """Base for every rule violation in the vote core."""

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(message)


# ============ Name validation ============

class NameValidationError(VoteError):
    """User input problem: EMPTY_NAME / NAME_TOO_LONG / DUPLICATE_NAME."""
    pass


# ============ Command preconditions ============

class OperationError(VoteError):
    """PLAYER_NOT_FOUND / ROUND_ALREADY_COMPLETE / DUPLICATE_VOTE / INVALID_VOTE."""
    pass
