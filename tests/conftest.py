"""
pytest Fixtures for Catalog Tests

Shared fixtures used across the test modules.

For database tests, we use:
- session scope for the engine (expensive to create)
- function scope for sessions (each test runs in a transaction that is
  rolled back afterwards)
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
# This disables rate limiting and keeps the app off PostgreSQL
import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DATABASE_URL"] = "sqlite://"

from collections.abc import Generator
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from catalog.database import Base, get_db, register_sqlite_functions
from catalog.main import app
from catalog.models import Book, BookInstance, BookInstanceStatus, Genre

# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory: fast, isolated, no external database needed.
# Some PostgreSQL features won't work in SQLite; the catalog doesn't use them.

@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps one connection alive for the entire session, otherwise
    the in-memory database would disappear between connections.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    # Same Unicode-aware lower() as the app engine uses on SQLite
    event.listen(engine, "connect", register_sqlite_functions)

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session is bound to a connection whose transaction is rolled back
    after the test, so commits made by the handlers don't leak between tests.
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
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client that uses the test session.

    Redirects are not followed so tests can check the 303 and its Location.
    """

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def lenient_client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Like `client`, but unhandled errors come back as the 500 page instead
    of being re-raised into the test.
    """

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app, follow_redirects=False, raise_server_exceptions=False) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================

@pytest.fixture
def sample_genre(db_session: Session) -> Genre:
    """Create a sample genre for testing."""
    genre = Genre(name="Science Fiction")
    db_session.add(genre)
    db_session.commit()
    db_session.refresh(genre)
    return genre


@pytest.fixture
def multiple_genres(db_session: Session) -> list[Genre]:
    """Create genres inserted out of alphabetical order."""
    genres = [Genre(name=name) for name in ("Poetry", "Fantasy", "Mystery")]
    db_session.add_all(genres)
    db_session.commit()
    for genre in genres:
        db_session.refresh(genre)
    return genres


@pytest.fixture
def sample_book(db_session: Session, sample_genre: Genre) -> Book:
    """Create a sample book in the sample genre."""
    book = Book(
        title="Foundation",
        summary="The fall of the Galactic Empire.",
        isbn="9780553293357",
    )
    book.genres = [sample_genre]
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def multiple_books(db_session: Session, sample_genre: Genre) -> list[Book]:
    """Create books, only two of which are in the sample genre."""
    books = [
        Book(title="I, Robot", summary="Robot stories."),
        Book(title="Dune", summary="Spice."),
        Book(title="Emma", summary="Matchmaking."),
    ]
    books[0].genres = [sample_genre]
    books[1].genres = [sample_genre]
    db_session.add_all(books)
    db_session.commit()
    for book in books:
        db_session.refresh(book)
    return books


@pytest.fixture
def sample_bookinstance(db_session: Session, sample_book: Book) -> BookInstance:
    """Create a loaned copy of the sample book."""
    bookinstance = BookInstance(
        book_id=sample_book.id,
        imprint="New York, Bantam, 1991.",
        status=BookInstanceStatus.LOANED.value,
        due_back=date(2024, 1, 5),
    )
    db_session.add(bookinstance)
    db_session.commit()
    db_session.refresh(bookinstance)
    return bookinstance
