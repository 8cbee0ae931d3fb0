"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 for the catalog.

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives → create a new session
2. Repositories use that session for all work in the request
3. Each repository write commits or rolls back as one unit
4. Session is closed when the request ends

The engine is the only long-lived store handle. It is created here,
handed to sessions through SessionLocal, and disposed by the application
lifespan at shutdown.
"""

import logging
import sqlite3
from collections.abc import Generator

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from catalog.config import Settings, get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


# =============================================================================
# Database Engine
# =============================================================================
def create_db_engine(settings: Settings) -> Engine:
    """
    Build the SQLAlchemy engine for the configured database.

    SQLite does not take pool sizing arguments and needs
    check_same_thread=False because FastAPI runs sync routes in a
    thread pool.
    """
    if settings.is_sqlite:
        return create_engine(
            settings.database_url,
            connect_args={"check_same_thread": False},
            echo=settings.debug,
        )

    return create_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,  # Verify connections are alive before using
        echo=settings.debug,  # Log SQL in debug mode
    )


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """
    Turn on foreign key enforcement for SQLite connections.

    SQLite ignores REFERENCES clauses unless this pragma is set on every
    new connection. Other backends enforce them already.
    """
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_db_engine(settings)


# =============================================================================
# Session Factory
# =============================================================================
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic reads Base.metadata to discover tables for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Creates a session, yields it to the route, and closes it when the
    request ends. The finally block ensures cleanup even on errors.

    Yields:
        SQLAlchemy Session instance
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables() -> None:
    """
    Create all database tables.

    WARNING: In production, use Alembic migrations instead!
    """
    Base.metadata.create_all(bind=engine)


def dispose_engine() -> None:
    """Close every pooled connection. Called once at shutdown."""
    engine.dispose()
    logger.info("Database engine disposed")
