# app/domain/common/types.py
from __future__ import annotations

from typing import Literal

Vote = Literal["yes", "no"]
RoundState = Literal["EMPTY", "IN_PROGRESS", "COMPLETE"]

VOTE_CHOICES: tuple[str, ...] = ("yes", "no")
MAX_NAME_LEN = 24
