from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from parts_catalog.infra.db import config

logger = logging.getLogger(__name__)

# Process-wide pool: created by init_engine() (or on first use), closed by dispose_engine()
_engine: Engine | None = None
_session_local: sessionmaker[Session] | None = None


def init_engine(url: str | None = None) -> Engine:
    """
    Create the process-wide database engine, replacing any existing one.

    Connection Pool Configuration:
    - pool_size: Number of connections to keep open (base pool)
    - max_overflow: Additional connections allowed beyond pool_size
    - pool_timeout: Seconds to wait for a free connection before failing
    - pool_pre_ping: Verify connection health before use
    - pool_recycle: Recycle connections after N seconds (prevent stale connections)

    Args:
        url: Database URL; defaults to DATABASE_URL from the environment

    Returns:
        The new engine
    """
    global _engine
    dispose_engine()

    _engine = create_engine(
        url or config.database_url(),
        pool_size=config.pool_size(),
        max_overflow=config.max_overflow(),
        pool_timeout=config.pool_timeout_seconds(),
        pool_pre_ping=True,
        pool_recycle=config.pool_recycle_seconds(),
    )
    logger.info("Database engine initialized", extra={"pool_size": config.pool_size()})
    return _engine


def get_engine() -> Engine:
    """Get the database engine, creating it on first use."""
    if _engine is None:
        return init_engine()
    return _engine


def get_session_local() -> sessionmaker[Session]:
    """Get or create the session factory bound to the current engine."""
    global _session_local
    if _session_local is None:
        _session_local = sessionmaker(
            bind=get_engine(),
            class_=Session,
            expire_on_commit=False,
        )
    return _session_local


def dispose_engine() -> None:
    """Close every pooled connection and forget the engine. Safe to call twice."""
    global _engine, _session_local
    if _engine is not None:
        _engine.dispose()
        logger.info("Database engine disposed")
    _engine = None
    _session_local = None


@contextmanager
def get_session() -> Iterator[Session]:
    """Get a database session with automatic commit/rollback."""
    session = get_session_local()()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
