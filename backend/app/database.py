"""Database configuration and session management."""

from collections.abc import Generator
from typing import Any

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import settings


# Base class for ORM models
class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""

    pass


def engine_options(database_url: str) -> dict[str, Any]:
    """Build engine keyword arguments suited to the database backend.

    Server databases get a sized connection pool; PostgreSQL also gets a
    5s lock timeout. SQLite takes no pool sizing arguments, and an
    in-memory SQLite database must share one connection across sessions.
    """
    url = make_url(database_url)
    options: dict[str, Any] = {"echo": settings.database_echo}

    if url.get_backend_name() == "sqlite":
        options["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            options["poolclass"] = StaticPool
        return options

    options.update(
        pool_pre_ping=True,  # Enable connection health checks
        pool_size=10,  # Number of connections to maintain
        max_overflow=20,  # Maximum number of connections beyond pool_size
        pool_recycle=3600,  # Recycle connections after 1 hour
    )
    if url.get_backend_name() == "postgresql":
        options["isolation_level"] = "READ COMMITTED"
        options["connect_args"] = {"options": "-c lock_timeout=5000"}
    return options


def build_engine(database_url: str) -> Engine:
    """Create an engine for the given URL with backend-specific options."""
    return create_engine(database_url, **engine_options(database_url))


engine = build_engine(settings.database_url)

# Create session factory
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False,  # Prevent lazy loading errors after commit
)


# Dependency for FastAPI routes
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Yields:
        Session: SQLAlchemy database session

    Example:
        @app.get("/books")
        def get_books(db: Session = Depends(get_db)):
            return BookRepository(db).find_all()
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
