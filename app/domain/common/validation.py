# app/domain/common/validation.py
from __future__ import annotations

import re
from typing import Iterable

from app.domain.common.errors import NameValidationError
from app.domain.common.types import MAX_NAME_LEN

_WS = re.compile(r"\s+")


def normalize_name(raw: str) -> str:
    """Trim and collapse internal whitespace to single spaces."""
    return _WS.sub(" ", raw or "").strip()


def check_player_name(raw: str, existing: Iterable[str]) -> str:
    """
    Normalize raw and validate it against the current names.
    Returns the normalized name or raises NameValidationError.
    """
    name = normalize_name(raw)
    if not name:
        raise NameValidationError("EMPTY_NAME", "Please enter a name.")
    if len(name) > MAX_NAME_LEN:
        raise NameValidationError("NAME_TOO_LONG", f"Name too long (max. {MAX_NAME_LEN} characters).")

    lower = name.lower()
    if any(n.lower() == lower for n in existing):
        raise NameValidationError("DUPLICATE_NAME", "This name already exists. Please choose another name.")
    return name
