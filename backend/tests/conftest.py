"""Shared test fixtures: in-memory database, sessions and API client."""

import os

# Must be set before app.config is imported so the module-level engine is SQLite
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.database import Base, get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.models import Book  # noqa: E402
from app.rate_limiter import limiter  # noqa: E402


@pytest.fixture
def engine():
    """Create in-memory SQLite engine with the books table."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_maker(engine):
    """Session factory bound to the test engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_maker):
    """Create database session for testing."""
    session = session_maker()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_maker):
    """Create test client with the database dependency pointed at the test engine."""
    limiter.reset()

    def override_get_db():
        db = session_maker()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def test_book(db):
    """Create a test book."""
    book = Book(
        title="Dune",
        author="Frank Herbert",
        isbn="9780441013593",
        publisher="Ace",
        published_year=1965,
    )
    db.add(book)
    db.commit()
    db.refresh(book)
    return book
