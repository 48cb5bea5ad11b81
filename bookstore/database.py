"""
Database Configuration Module

Sets up SQLAlchemy 2.0 for the Bookstore API.

Storage Handle
==============
The engine and session factory are built explicitly from Settings by
create_db_engine() / create_session_factory(). The application keeps one
cached pair (get_engine() / get_session_factory()) so the pool is shared
across requests, and nothing connects to the database until the first
request asks for a session.

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives -> get_db() opens a session from the factory
2. The repository runs its statements on that session
3. The session is closed when the request ends (connection back to the pool)
"""

from collections.abc import Generator
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from bookstore.config import Settings, get_settings


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic reads Base.metadata to discover tables for autogenerate.
    """
    pass


# =============================================================================
# Engine / Session Factory
# =============================================================================
def create_db_engine(settings: Settings) -> Engine:
    """
    Build an engine for the configured database.

    Key parameters:
    - pool_size / max_overflow / pool_timeout: queue pool sizing
    - pool_pre_ping: test connection health before using it
    - echo: log every SQL statement in debug mode

    SQLite uses its own pool classes, which reject the sizing options,
    so they are only passed for server databases.
    """
    options: dict = {"echo": settings.debug}

    if settings.is_sqlite:
        options["connect_args"] = {"check_same_thread": False}
    else:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_timeout=settings.db_pool_timeout,
            pool_pre_ping=True,
        )

    return create_engine(settings.database_url, **options)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """
    Create a session factory bound to engine.

    - autoflush=False: don't flush before queries (more predictable)
    - expire_on_commit=False: returned books stay readable after commit
    """
    return sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )


@lru_cache
def get_engine() -> Engine:
    """Return the application-wide engine, creating it on first use."""
    return create_db_engine(get_settings())


@lru_cache
def get_session_factory() -> sessionmaker[Session]:
    """Return the application-wide session factory."""
    return create_session_factory(get_engine())


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Code before yield opens the session, the route uses it, and the
    finally block closes it even when the route raised.

    Yields:
        SQLAlchemy Session instance
    """
    db = get_session_factory()()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables(engine: Engine | None = None) -> None:
    """
    Create all database tables.

    Useful for development and tests. In production, run
    `alembic upgrade head` instead.
    """
    # Models must be imported so they are registered on Base.metadata
    import bookstore.models  # noqa: F401

    Base.metadata.create_all(bind=engine or get_engine())


def drop_tables(engine: Engine | None = None) -> None:
    """
    Drop all database tables.

    DANGER: This deletes all data! Only use in development and tests.
    """
    import bookstore.models  # noqa: F401

    Base.metadata.drop_all(bind=engine or get_engine())
