"""Database session management.

SQLite engines and session factories, cached per database file
and shared across FastAPI worker threads.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from orderdesk.config import get_settings
from orderdesk.db.schema import Base

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrderStore:
    """Engine and session factory bound to one SQLite file."""

    engine: Engine
    session_factory: sessionmaker


# One store per resolved database file
_stores: dict[Path, OrderStore] = {}


def get_store(db_path: Path | None = None) -> OrderStore:
    """Get the cached OrderStore for a database file.

    Args:
        db_path: Path to SQLite database file. Defaults to the configured path.

    Returns:
        OrderStore created on first use of the path.
    """
    db_path = Path(db_path) if db_path is not None else get_settings().db_path
    key = db_path.resolve()

    store = _stores.get(key)
    if store is None:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        # check_same_thread=False + StaticPool: one connection shared across
        # FastAPI worker threads
        engine = create_engine(
            f"sqlite:///{db_path}",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        store = _stores[key] = OrderStore(engine, sessionmaker(bind=engine))
        logger.info(f"Connected to SQLite database at {db_path}")

    return store


def get_engine(db_path: Path | None = None) -> Engine:
    """Get the cached SQLAlchemy engine for a database file."""
    return get_store(db_path).engine


def get_session(db_path: Path | None = None) -> Session:
    """Get a database session.

    Note: Caller is responsible for closing the session. For automatic
    resource management, use session_scope() instead.

    Args:
        db_path: Path to SQLite database file.

    Returns:
        SQLAlchemy Session instance.
    """
    factory = get_store(db_path).session_factory
    return factory()


@contextmanager
def session_scope(db_path: Path | None = None) -> Generator[Session, None, None]:
    """Context manager for database sessions with automatic cleanup.

    Commits on successful exit, rolls back on exception, and always
    closes the session.

    Example:
        with session_scope() as session:
            repo.delete_all_orders(session)
    """
    session = get_session(db_path)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(db_path: Path | None = None) -> None:
    """Create the orders table if it does not exist yet."""
    engine = get_engine(db_path)
    Base.metadata.create_all(engine)
    logger.info("Orders table created or already exists")
