"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 for the Library API.

We use SYNCHRONOUS SQLAlchemy: the API is a small CRUD service and
FastAPI runs sync endpoints in its thread pool, one session per request.

Session Management Pattern
==========================
1. Request arrives → create a new session
2. Use session for all database operations in that request
3. Services commit on success, roll back on failure
4. Close session when request ends
"""

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from library_api.config import get_settings

settings = get_settings()


# =============================================================================
# Database Engine
# =============================================================================
# Key parameters:
# - pool_size / max_overflow: connection pool sizing (server databases only)
# - pool_pre_ping: Test connection health before using
# - echo: Log all SQL statements in debug mode

def _engine_options(database_url: str) -> dict:
    """Build create_engine() keyword arguments for the configured backend."""
    if database_url.startswith("sqlite"):
        # SQLite connections are used from FastAPI's worker threads
        return {"connect_args": {"check_same_thread": False}, "echo": settings.debug}

    return {
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_pre_ping": True,
        "echo": settings.debug,
    }


engine = create_engine(settings.database_url, **_engine_options(settings.database_url))


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

    Alembic uses Base.metadata to discover tables for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Code before yield creates the session, code after yield closes it
    when the request ends, even if the handler raised.

    Usage in Routes:
        @router.get("/books/")
        def list_books(db: Session = Depends(get_db)):
            ...

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
def create_tables(bind=None) -> None:
    """
    Create all database tables.

    Used by the startup initialization routine and tests.
    In production, prefer Alembic migrations.
    """
    # Register every model on Base.metadata before creating
    import library_api.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def drop_tables(bind=None) -> None:
    """
    Drop all database tables.

    DANGER: This deletes all data! Only use in development and tests.
    """
    import library_api.models  # noqa: F401

    Base.metadata.drop_all(bind=bind or engine)
