"""
pytest Fixtures for Library API Tests

Shared fixtures used across all test files.

For database tests, we use:
- session scope for the engine (expensive to create)
- function scope for sessions, each wrapped in a transaction that is
  rolled back after the test
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["ENVIRONMENT"] = "testing"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["INIT_DB_ON_STARTUP"] = "false"
os.environ["SECRET_KEY"] = "test-secret-key-for-unit-tests-at-least-32-characters-long"

from collections.abc import Generator
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from library_api.database import Base, create_tables, get_db
from library_api.main import app
from library_api.models import Book, User
from library_api.services.security import create_access_token, hash_password

SAMPLE_PASSWORD = "SecurePass123"


def make_memory_engine():
    """
    SQLite in-memory engine.

    StaticPool keeps one connection alive; without it the in-memory
    database would disappear between connections.
    """
    return create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


# =============================================================================
# DATABASE FIXTURES
# =============================================================================
@pytest.fixture(scope="session")
def engine():
    """Shared in-memory engine with all tables created."""
    engine = make_memory_engine()
    create_tables(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Fresh database session for each test.

    The session joins an outer transaction that is rolled back afterwards,
    so tests don't see each other's rows.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def isolated_session() -> Generator[Session, None, None]:
    """
    Session on a private in-memory database, with no outer transaction.

    Used by tests that need a real rollback, e.g. after a unique index
    rejects a commit.
    """
    engine = make_memory_engine()
    create_tables(bind=engine)
    session = sessionmaker(bind=engine, autoflush=False)()

    yield session

    session.close()
    engine.dispose()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Test client wired to the test database.

    get_db is overridden so every request uses db_session.
    """

    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def sample_user(db_session: Session) -> User:
    """Create a registered user with password SAMPLE_PASSWORD."""
    user = User(username="reader", hashed_password=hash_password(SAMPLE_PASSWORD))
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def auth_headers(sample_user: User) -> dict[str, str]:
    """Authorization header carrying a valid token for sample_user."""
    token = create_access_token(sample_user.username, sample_user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def sample_book(db_session: Session) -> Book:
    book = Book(
        title="Clean Code",
        author="Robert C. Martin",
        isbn="978-0132350884",
        published_date=date(2008, 8, 1),
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def multiple_books(db_session: Session) -> list[Book]:
    """Three books, inserted out of title order."""
    books = [
        Book(
            title="The Pragmatic Programmer",
            author="Andrew Hunt",
            isbn="978-0201616224",
            published_date=date(1999, 10, 20),
        ),
        Book(
            title="Clean Code",
            author="Robert C. Martin",
            isbn="978-0132350884",
            published_date=date(2008, 8, 1),
        ),
        Book(
            title="Domain-Driven Design",
            author="Eric Evans",
            isbn="978-0321125217",
            published_date=date(2003, 8, 30),
        ),
    ]
    db_session.add_all(books)
    db_session.commit()
    for book in books:
        db_session.refresh(book)

    return books
