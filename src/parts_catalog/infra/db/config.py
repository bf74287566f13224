from __future__ import annotations

import os

from parts_catalog.infra.config import int_env


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def pool_size() -> int:
    return int_env("DB_POOL_SIZE", 10)


def max_overflow() -> int:
    return int_env("DB_MAX_OVERFLOW", 20, minimum=0)


def pool_recycle_seconds() -> int:
    return int_env("DB_POOL_RECYCLE_SECONDS", 3600)


def pool_timeout_seconds() -> int:
    return int_env("DB_POOL_TIMEOUT_SECONDS", 30)
