"""Degree-of-protection set codec.

The storage layer keeps a product's ingress-protection ratings in a single
comma-joined text column (e.g. ``"IP67,IP68"``). Logically it is a set of
rating values. Every piece of code that reads or writes that column, or
parses ratings from a request, goes through these two functions.
"""

from __future__ import annotations

from typing import Iterable

SEPARATOR = ","


def decode_protection(raw: str | None) -> tuple[str, ...]:
    """
    Decode a comma-joined rating string into a tuple of rating values.

    Values are trimmed and upper-cased; blanks and duplicates are dropped,
    first occurrence wins.

    Args:
        raw: Stored column value or request parameter (may be None)

    Returns:
        Tuple of normalised rating values (empty if nothing usable)
    """
    if not raw:
        return ()
    return normalize_protection(raw.split(SEPARATOR))


def normalize_protection(values: Iterable[str]) -> tuple[str, ...]:
    """Trim, upper-case and dedupe an iterable of rating values."""
    cleaned = (value.strip().upper() for value in values)
    return tuple(dict.fromkeys(value for value in cleaned if value))


def encode_protection(values: Iterable[str]) -> str | None:
    """
    Encode rating values into the stored comma-joined form.

    Returns:
        Canonical column value, or None when no rating remains
    """
    normalized = normalize_protection(values)
    if not normalized:
        return None
    return SEPARATOR.join(normalized)
