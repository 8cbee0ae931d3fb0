"""
pytest Fixtures for Book Catalog Tests

This file contains shared fixtures used across all test files.

FIXTURE SCOPES:
- function (default): New instance per test function

Every test gets its own in-memory SQLite database, so tests never see
each other's rows. Foreign keys are enforced (catalog.database turns the
pragma on for every SQLite connection), which the book update tests rely
on.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DATABASE_URL"] = "sqlite://"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from catalog.database import Base, get_db
from catalog.main import app
from catalog.models import Author, Book, Genre

API = "/api/v1"


# =============================================================================
# DATABASE FIXTURES
# =============================================================================
@pytest.fixture
def engine():
    """
    Create a fresh SQLite in-memory database engine.

    StaticPool keeps a single connection alive for the whole test.
    Without it, the in-memory database would disappear between connections.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine) -> Generator[Session, None, None]:
    """Session bound to the test engine."""
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )
    session = TestSessionLocal()

    yield session

    session.close()


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    We override the get_db dependency to use our test session.
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
def sample_author(db_session: Session) -> Author:
    """Create a sample author for testing."""
    author = Author(name="Robert C. Martin", year=1952)
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def second_author(db_session: Session) -> Author:
    author = Author(name="Martin Fowler", year=1963)
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def third_author(db_session: Session) -> Author:
    author = Author(name="Kent Beck", year=1961)
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def sample_genre(db_session: Session) -> Genre:
    """Create a sample genre for testing."""
    genre = Genre(name="Programming")
    db_session.add(genre)
    db_session.commit()
    db_session.refresh(genre)
    return genre


@pytest.fixture
def sample_book(
    db_session: Session,
    sample_author: Author,
    second_author: Author,
    sample_genre: Genre,
) -> Book:
    """A book linked to two authors and one genre."""
    book = Book(
        name="Clean Code",
        img="https://example.com/clean-code.jpg",
        authors=[sample_author, second_author],
        genres=[sample_genre],
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def make_authors(db_session: Session):
    """Factory: insert authors with the given names, in order."""

    def _make(names: list[str]) -> list[Author]:
        authors = [Author(name=name, year=1900 + i) for i, name in enumerate(names)]
        db_session.add_all(authors)
        db_session.commit()
        for author in authors:
            db_session.refresh(author)
        return authors

    return _make
