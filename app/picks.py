from __future__ import annotations

from typing import Any, List, Optional

from app.errors import MESSAGES, ErrorKind, ReadingError
from app.sessions import Session

REQUIRED_PICKS = 7


def coerce_pick(value: Any) -> Optional[int]:
    """Return ``value`` as an int, or None when it is not a whole number.

    Accepts ints, integral floats and numeric strings ("3", " 3 ", "3.0").
    Booleans and null are rejected even though they are ints to Python.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        s = value.strip()
        if not s:
            return None
        try:
            return int(s)
        except ValueError:
            pass
        try:
            f = float(s)
        except ValueError:
            return None
        return int(f) if f.is_integer() else None
    return None


def validate_picks(session: Session, picks: Any, required_count: int = REQUIRED_PICKS) -> List[int]:
    """Check a client's picks against the session pool.

    Rules are applied one at a time over the whole list, so the first
    rule that fails decides the error: shape and count, then integer
    coercion, then pool membership, then duplicates.

    Returns the coerced picks in the order the client sent them.
    """
    if not isinstance(picks, (list, tuple)):
        raise ReadingError(ErrorKind.PICKS_NOT_ARRAY)
    if len(picks) != required_count:
        raise ReadingError(
            ErrorKind.WRONG_COUNT,
            MESSAGES[ErrorKind.WRONG_COUNT].format(count=required_count),
        )

    ids = [coerce_pick(v) for v in picks]
    if any(i is None for i in ids):
        raise ReadingError(ErrorKind.INVALID_TYPE)

    if any(i not in session.pool for i in ids):
        raise ReadingError(ErrorKind.OUT_OF_POOL)

    if len(set(ids)) != len(ids):
        raise ReadingError(ErrorKind.DUPLICATE_PICK)

    return ids
