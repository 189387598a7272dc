"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 for the catalog store.

We use SYNCHRONOUS SQLAlchemy: every handler in this application is a short
sequence of reads followed by at most one write, and FastAPI runs sync
handlers in its threadpool so requests still proceed concurrently.

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives → create a new session
2. Use session for all database operations in that request
3. Commit on success, rollback on failure
4. Close session when request ends

This is implemented using FastAPI's dependency injection.
"""

from collections.abc import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from catalog.config import get_settings

settings = get_settings()


# =============================================================================
# Database Engine
# =============================================================================
# Key parameters:
# - pool_size / max_overflow: connection pool sizing (not valid for SQLite)
# - pool_pre_ping: Test connection health before using
# - echo: Log all SQL statements in debug mode

engine_options: dict = {
    "pool_pre_ping": True,
    "echo": settings.debug,
}
if not settings.is_sqlite:
    engine_options["pool_size"] = settings.db_pool_size
    engine_options["max_overflow"] = settings.db_max_overflow

engine = create_engine(settings.database_url, **engine_options)


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def register_sqlite_functions(dbapi_connection, connection_record) -> None:
    """
    Replace SQLite's ASCII-only lower() with Python's, so case-insensitive
    name lookups fold "É" like PostgreSQL does.
    """
    dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


if settings.is_sqlite:
    event.listen(engine, "connect", register_sqlite_functions)


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

    Alembic uses Base.metadata to discover the catalog tables.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Creates a session, yields it to the route handler and closes it when
    the request ends (the finally block runs even if the handler raised).

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

    Used by the seed script and for quick local setups. Production
    databases are managed with Alembic migrations.
    """
    Base.metadata.create_all(bind=engine)


def drop_tables() -> None:
    """
    Drop all database tables.

    DANGER: This deletes all data! Only use in development and tests.
    """
    Base.metadata.drop_all(bind=engine)
