"""
pytest Fixtures for Bookstore API Tests

Shared fixtures used across all test files.

For database tests, we use:
- session scope for the engine (created once)
- function scope for sessions (each test runs in a transaction that is
  rolled back afterwards, so tests never see each other's rows)
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app.
# This disables rate limiting and keeps the app off the real database.
import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DATABASE_URL"] = "sqlite://"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from bookstore.database import create_tables, drop_tables, get_db
from bookstore.main import app
from bookstore.models import Book

# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory: fast, isolated, no external database needed.
# StaticPool keeps the single connection alive for the whole session,
# otherwise the in-memory database would disappear between connections.


@pytest.fixture(scope="session")
def engine():
    """Create a SQLite in-memory engine with the books table."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    create_tables(engine)

    yield engine

    drop_tables(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session is bound to a connection inside an outer transaction.
    Commits made by the repository stay inside it, and the outer
    transaction is rolled back when the test ends.
    """
    TestSessionLocal = sessionmaker(
        autoflush=False,
        expire_on_commit=False,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client that uses the test session.

    get_db is overridden so every request shares db_session.
    """

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


@pytest.fixture
def sample_book(db_session: Session) -> Book:
    """Insert the book every HTTP test starts with."""
    book = Book(
        isbn="1234567890",
        amazon_url="http://a.co/eobPtX2",
        author="Author Name",
        language="english",
        pages=200,
        publisher="Publisher Name",
        title="Book Title",
        year=2020,
    )
    db_session.add(book)
    db_session.commit()
    return book


@pytest.fixture
def new_book_payload() -> dict:
    """A complete, valid payload for a book that is not in the table."""
    return {
        "isbn": "0987654321",
        "amazon_url": "http://a.co/eobPtX3",
        "author": "New Author",
        "language": "english",
        "pages": 250,
        "publisher": "New Publisher",
        "title": "New Book Title",
        "year": 2021,
    }


@pytest.fixture
def update_payload() -> dict:
    """A full replacement for sample_book."""
    return {
        "isbn": "1234567890",
        "amazon_url": "http://a.co/eobPtX4",
        "author": "Updated Author",
        "language": "english",
        "pages": 300,
        "publisher": "Updated Publisher",
        "title": "Updated Title",
        "year": 2022,
    }
