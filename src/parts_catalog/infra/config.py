"""Application settings read from the environment.

Integer settings fall back to their default when unset or not a number.
"""

from __future__ import annotations

import os

DEFAULT_PAGE_LIMIT = 10
PUBLIC_MAX_LIMIT = 100
ADMIN_MAX_LIMIT = 10_000


def int_env(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= minimum else default


def default_page_limit() -> int:
    return int_env("PRODUCTS_DEFAULT_LIMIT", DEFAULT_PAGE_LIMIT)


def public_max_limit() -> int:
    return int_env("PRODUCTS_PUBLIC_MAX_LIMIT", PUBLIC_MAX_LIMIT)


def admin_max_limit() -> int:
    return int_env("PRODUCTS_ADMIN_MAX_LIMIT", ADMIN_MAX_LIMIT)


def admin_jwt_secret() -> str | None:
    """Secret for verifying admin session tokens; None disables admin privileges."""
    return os.getenv("ADMIN_JWT_SECRET") or None


LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


def log_level() -> str:
    level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    return level if level in LOG_LEVELS else "INFO"


RATE_LIMIT_PER_MINUTE = 100


def rate_limit_per_minute() -> int:
    """Requests per client per minute on the API; 0 turns the limit off."""
    return int_env("RATE_LIMIT_PER_MINUTE", RATE_LIMIT_PER_MINUTE, minimum=0)
