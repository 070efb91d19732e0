from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from storefront_catalog.infra.config import database_url, pool_settings

# Created on first use so importing the app never needs DATABASE_URL
_engine: Engine | None = None
_session_local: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """
    Get or create the database engine.

    Pool sizing comes from infra.config.pool_settings(). Catalog loads are
    short single SELECTs, so connections are pre-pinged and recycled rather
    than held.
    """
    global _engine
    if _engine is None:
        pool = pool_settings()
        _engine = create_engine(
            database_url(),
            pool_size=pool.size,
            max_overflow=pool.max_overflow,
            pool_pre_ping=True,
            pool_recycle=pool.recycle_seconds,
        )
    return _engine


def get_session_local() -> sessionmaker[Session]:
    """Get or create the session factory."""
    global _session_local
    if _session_local is None:
        _session_local = sessionmaker(
            bind=get_engine(),
            class_=Session,
            expire_on_commit=False,
        )
    return _session_local


def dispose_engine() -> None:
    """Close pooled connections and forget the engine (app shutdown)."""
    global _engine, _session_local
    if _engine is not None:
        _engine.dispose()
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
