"""Sequential record identifiers such as ``C1`` or ``F12``."""

from __future__ import annotations

import re
from collections.abc import Iterable

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

# Leading whitespace, an optional sign and at least one digit; anything after is ignored.
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def generate_sequential_id(prefix: str, number: int) -> str:
    """Join ``prefix`` and ``number`` into an identifier."""
    return f"{prefix}{number}"


def _leading_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def max_id_number(ids: Iterable[str], prefix: str) -> int:
    """Return the largest number among ``ids`` that start with ``prefix``.

    Identifiers with another prefix, or with no readable number after the
    prefix, are skipped. The result is never below zero.
    """
    highest = 0
    for record_id in ids:
        if not record_id or record_id[0] != prefix:
            continue
        number = _leading_int(record_id[1:])
        if number is not None and number > highest:
            highest = number
    return highest