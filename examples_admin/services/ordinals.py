"""
Ordinal extraction.

Stored examples are numbered by the backend: ``before/3.png`` pairs with
``after/3.jpg``. The ordinal is the run of digits that starts the filename
and is immediately followed by a dot.
"""

import re
from datetime import datetime

_ORDINAL_PATTERN = re.compile(r"^(\d+)\.")


def extract_ordinal(filename: str | None) -> int | None:
    """
    Return the leading ordinal of *filename*, or ``None`` when there is none.

    ``"3.png"`` gives 3 and ``"0.png"`` gives 0; ``"cover.png"``,
    ``"v3.png"`` and ``"3"`` give ``None``.
    """
    if not filename or not isinstance(filename, str):
        return None
    match = _ORDINAL_PATTERN.match(filename)
    if match is None:
        return None
    return int(match.group(1))


def usable_ordinal(filename: str | None) -> int | None:
    """Like :func:`extract_ordinal`, but ordinals below 1 count as missing."""
    ordinal = extract_ordinal(filename)
    if ordinal is None or ordinal <= 0:
        return None
    return ordinal


def recency_key(last_modified: datetime | None, key: str) -> tuple[float, str]:
    """
    Sort key deciding which of two assets sharing an ordinal survives.

    The most recently modified asset wins; equal timestamps fall back to the
    greater storage key so the outcome never depends on listing order.
    """
    timestamp = last_modified.timestamp() if last_modified is not None else float("-inf")
    return timestamp, key
