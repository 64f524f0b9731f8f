"""
Database connection management for the GenAI audit store.

Provides the engine, session factory, and unit-of-work helpers. One session
is one data context: create it per logical request and release it when the
unit of work ends.
"""

import logging
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from genai_audit.config import settings
from genai_audit.models.db import Base

logger = logging.getLogger(__name__)

_database_url = settings.sqlalchemy_url

if _database_url.startswith("sqlite"):
    engine = create_engine(
        _database_url,
        echo=settings.db_echo,
        connect_args={"check_same_thread": False},
        pool_pre_ping=True,
    )
else:
    # Configure via DB_POOL_* environment variables
    engine = create_engine(
        _database_url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_pool_max_overflow,
        pool_pre_ping=True,
        pool_timeout=settings.db_pool_timeout,
        pool_recycle=settings.db_pool_recycle,
    )

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

# Ensure tables exist for SQLite runs (in-memory databases don't persist schema)
if _database_url.startswith("sqlite"):
    Base.metadata.create_all(bind=engine)


def get_session() -> Session:
    """
    Get a new database session.

    The caller owns the session and must commit/rollback and close it.

    Returns:
        Session: A new SQLAlchemy session
    """
    return SessionLocal()


def get_db() -> Generator[Session, None, None]:
    """
    Generator dependency yielding a session with automatic cleanup.

    Commits when the consumer finishes normally, rolls back and re-raises
    on error, and always closes the session.

    Yields:
        Session: A SQLAlchemy session
    """
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@contextmanager
def db_session() -> Generator[Session, None, None]:
    """
    Context manager for one unit of work.

    Yields:
        Session: A SQLAlchemy session

    Example:
        >>> with db_session() as db:
        >>>     ConversationService(db).create_conversation(dto)
    """
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db() -> None:
    """
    Create all tables programmatically.

    Note:
        Prefer using Alembic migrations: `alembic upgrade head`
    """
    Base.metadata.create_all(bind=engine)


def check_connection() -> bool:
    """
    Check if database connection is working.

    Returns:
        bool: True if connection successful, False otherwise
    """
    try:
        with db_session() as db:
            db.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.error("Database connection failed: %s", e)
        return False
