"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 for the Review Service.

We use SYNCHRONOUS SQLAlchemy with the "session per request" pattern:
1. Request arrives → create a new session
2. Use session for all database operations in that request
3. Commit on success, rollback on failure
4. Close session when request ends

PostgreSQL (psycopg2) is the production database. SQLite is supported for
tests; foreign key enforcement is switched on for every SQLite connection
because SQLite leaves it off by default.
"""

import sqlite3
from collections.abc import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from review_api.config import get_settings

settings = get_settings()


# =============================================================================
# SQLite Foreign Keys
# =============================================================================
# Reviews and comments must never reference missing rows. PostgreSQL always
# enforces REFERENCES clauses; SQLite only does so after this pragma.

@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# =============================================================================
# Database Engine
# =============================================================================
# - pool_pre_ping: Test connection health before using (prevents stale connections)
# - echo: Log all SQL statements in debug mode

def _engine_options(database_url: str) -> dict:
    options = {
        "pool_pre_ping": True,
        "echo": settings.debug,
    }
    if database_url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
    else:
        options["pool_size"] = settings.db_pool_size
        options["max_overflow"] = settings.db_max_overflow
    return options


engine = create_engine(settings.database_url, **_engine_options(settings.database_url))


# =============================================================================
# Session Factory
# =============================================================================
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic uses Base.metadata to discover models for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Creates a session, yields it to the route handler and closes it when the
    request ends, even if the handler raised.

    Yields:
        SQLAlchemy Session instance
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Schema Management
# =============================================================================
def create_tables(bind: Engine | None = None) -> None:
    """
    Create all database tables that do not exist yet.

    WARNING: In production, use Alembic migrations instead!
    """
    import review_api.models  # noqa: F401 - registers all tables on Base.metadata

    Base.metadata.create_all(bind=bind or engine)


def drop_tables(bind: Engine | None = None) -> None:
    """
    Drop all database tables.

    DANGER: This deletes all data!
    """
    import review_api.models  # noqa: F401

    Base.metadata.drop_all(bind=bind or engine)


def reset_schema(bind: Engine | None = None) -> None:
    """
    Drop and recreate users, items, reviews and comments.

    Idempotent: running it twice leaves the same empty schema. Dependent
    tables are dropped first, so existing data never blocks the reset.
    """
    drop_tables(bind)
    create_tables(bind)


PG_UNIQUE_VIOLATION = "23505"
SQLITE_UNIQUE_CODES = (
    sqlite3.SQLITE_CONSTRAINT_UNIQUE,
    sqlite3.SQLITE_CONSTRAINT_PRIMARYKEY,
)


def is_unique_violation(exc: IntegrityError) -> bool:
    """
    Tell a uniqueness violation apart from a foreign key violation.

    Decided by the driver error code, never the message text: PostgreSQL
    SQLSTATE 23505 (23503 is a foreign key violation), SQLite extended code
    SQLITE_CONSTRAINT_UNIQUE or SQLITE_CONSTRAINT_PRIMARYKEY.
    """
    orig = exc.orig

    pgcode = getattr(orig, "pgcode", None)
    if pgcode is not None:
        return pgcode == PG_UNIQUE_VIOLATION

    if isinstance(orig, sqlite3.IntegrityError):
        return orig.sqlite_errorcode in SQLITE_UNIQUE_CODES

    return False
