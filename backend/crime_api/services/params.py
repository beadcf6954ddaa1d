"""Normalization of raw query-string values into typed filter values.

Nothing in here raises on bad input: a value that cannot be used collapses
to ``None``, which callers treat as "no filter on this field".
"""

import math
from collections.abc import Sequence

RawParam = str | Sequence[str] | None
Number = int | float

# Range of a SQLite INTEGER; larger integers are bound as REAL
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1


def _join(value: RawParam) -> str:
    # Repeated keys (?code=1&code=2) arrive as a list
    if isinstance(value, str):
        return value
    return ",".join(str(item) for item in value)


def _fit(value: int) -> Number:
    if SQLITE_INT_MIN <= value <= SQLITE_INT_MAX:
        return value
    return float(value)


def parse_number(token: str) -> Number | None:
    """Parse a single token as a finite number, or return None."""
    token = token.strip()
    # No digit separators, and no sign in front of a 0x/0o/0b prefix
    if not token or "_" in token:
        return None
    if token[0] in "+-" and token[1:3].lower() in ("0x", "0o", "0b"):
        return None
    try:
        # Base 0 accepts 0x/0o/0b literals
        return _fit(int(token, 0))
    except ValueError:
        pass
    try:
        value = float(token)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return _fit(int(value)) if value.is_integer() else value


def parse_comma_list(value: RawParam, as_number: bool = False) -> list | None:
    """
    Split a comma-delimited parameter into trimmed, non-empty tokens.

    With ``as_number`` the tokens are parsed as numbers and anything that is
    not a finite number is dropped. Order and duplicates are preserved.
    Returns None when no token survives.
    """
    if not value:
        return None

    items = [item.strip() for item in _join(value).split(",")]
    items = [item for item in items if item]
    if not items:
        return None
    if not as_number:
        return items

    numbers = [parse_number(item) for item in items]
    numbers = [n for n in numbers if n is not None]
    return numbers or None


def parse_text(value: RawParam) -> str | None:
    """Trimmed single value, or None when absent or blank."""
    if not value:
        return None
    if not isinstance(value, str):
        # Last occurrence wins for repeated keys
        value = value[-1]
    value = value.strip()
    return value or None


def parse_limit(value: RawParam, default: int, maximum: int | None = None) -> int:
    """Row cap for listings; anything missing, non-numeric or non-positive is ``default``."""
    text = parse_text(value)
    number = parse_number(text) if text else None
    if number is None or number <= 0:
        return default

    limit = min(int(number), SQLITE_INT_MAX)
    if limit <= 0:
        return default
    if maximum is not None:
        limit = min(limit, maximum)
    return limit
