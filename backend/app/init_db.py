"""Database initialization script with seed data."""

import argparse

from sqlalchemy.orm import Session

from app.database import Base, SessionLocal, engine
from app.models import Book
from app.services.repositories import BookRepository

SAMPLE_BOOKS = [
    {
        "title": "The Pragmatic Programmer",
        "author": "Andrew Hunt, David Thomas",
        "isbn": "9780201616224",
        "publisher": "Addison-Wesley",
        "published_year": 1999,
    },
    {
        "title": "Domain-Driven Design",
        "author": "Eric Evans",
        "isbn": "9780321125217",
        "publisher": "Addison-Wesley",
        "published_year": 2003,
    },
    {
        "title": "Fluent Python",
        "author": "Luciano Ramalho",
        "isbn": "9781491946008",
        "publisher": "O'Reilly Media",
        "published_year": 2015,
    },
    {
        "title": "Fluent Python",
        "author": "Luciano Ramalho",
        "isbn": "9781492056355",
        "publisher": "O'Reilly Media",
        "published_year": 2022,
    },
]


def create_tables():
    """Create all database tables."""
    print("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    print("Tables created successfully!")


def seed_data(db: Session):
    """Seed the database with sample books."""
    print("\nSeeding database with sample data...")

    repository = BookRepository(db)
    books = repository.save_all(Book(**book_data) for book_data in SAMPLE_BOOKS)
    db.commit()

    print("Seed data created successfully!")
    for book in books:
        print(f"  Book {book.id}: {book.title} ({book.published_year})")


def init_db(seed: bool = True):
    """Initialize database with tables and, optionally, seed data."""
    print("Initializing database...")

    # Create tables
    create_tables()

    if not seed:
        print("\nSkipping seed data.")
        return

    db = SessionLocal()
    try:
        # Check if data already exists
        existing_books = BookRepository(db).count()
        if existing_books > 0:
            print(f"\nDatabase already has {existing_books} books. Skipping seed data.")
            return

        seed_data(db)
        print("\nDatabase initialization complete!")

    except Exception as e:
        print(f"\nError during database initialization: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Create the book tables and seed sample data")
    parser.add_argument("--no-seed", action="store_true", help="Only create tables")
    args = parser.parse_args(argv)
    init_db(seed=not args.no_seed)


if __name__ == "__main__":
    main()
