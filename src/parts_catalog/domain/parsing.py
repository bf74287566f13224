"""Lenient parsers for comma-separated query values.

Malformed entries are dropped rather than rejected: a listing request with
a typo'd id still succeeds, the bad entry simply does not constrain it.
"""

from __future__ import annotations

import re

_UUID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def split_csv(raw: str | None) -> tuple[str, ...]:
    """
    Split a comma-separated value into trimmed, non-empty, unique entries.

    Order of first occurrence is preserved.

    Examples:
        >>> split_csv(" M12, ,M8,M12 ")
        ('M12', 'M8')
        >>> split_csv(None)
        ()
    """
    if not raw:
        return ()
    entries = (entry.strip() for entry in raw.split(","))
    return tuple(dict.fromkeys(entry for entry in entries if entry))


def is_valid_identifier(value: str | None) -> bool:
    """True if value is a canonical 8-4-4-4-12 hex UUID string."""
    if not value:
        return False
    return _UUID_RE.match(value) is not None


def normalize_identifier(value: str | None) -> str | None:
    """Return the lower-cased identifier, or None if it is malformed or absent."""
    if value is None:
        return None
    candidate = value.strip()
    if not is_valid_identifier(candidate):
        return None
    return candidate.lower()


def parse_identifiers(raw: str | None) -> tuple[str, ...]:
    """Parse a comma-separated identifier list, dropping malformed entries."""
    normalized = (normalize_identifier(entry) for entry in split_csv(raw))
    return tuple(dict.fromkeys(value for value in normalized if value is not None))


def parse_integers(raw: str | None) -> tuple[int, ...]:
    """Parse a comma-separated integer list, dropping non-numeric entries."""
    values: list[int] = []
    for entry in split_csv(raw):
        try:
            values.append(int(entry))
        except ValueError:
            continue
    return tuple(dict.fromkeys(values))


def parse_true_flag(raw: str | None) -> bool:
    """Only the literal ``"true"`` enables a flag; anything else means unset."""
    return raw == "true"


def resolve_limit(raw: str | int | None, max_limit: int, default: int) -> int:
    """
    Turn a caller-supplied page size into a usable one.

    Never rejects: non-numeric values use the default and numeric values are
    clamped to ``[1, max_limit]``.

    Args:
        raw: Page size as received (string from the query, int, or None)
        max_limit: Privilege-dependent upper bound
        default: Page size used when raw is absent or not a number

    Returns:
        Page size within ``[1, max_limit]``
    """
    if raw is None or raw == "":
        value = default
    else:
        try:
            value = int(raw)
        except (TypeError, ValueError):
            value = default
    return max(1, min(value, max_limit))
