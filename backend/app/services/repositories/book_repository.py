"""Book data access layer."""

import logging
from collections.abc import Iterable

from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session

from app.models import Book
from app.services.repositories.exceptions import DuplicateError, RepositoryError

logger = logging.getLogger(__name__)

# Columns a save overwrites; the rest are assigned by the database
REPLACEABLE_FIELDS = tuple(
    attr.key
    for attr in inspect(Book).column_attrs
    if attr.key not in ("id", "created_at", "updated_at")
)


def _is_isbn_conflict(error: IntegrityError) -> bool:
    """Whether the violated constraint is the ISBN uniqueness one."""
    return "isbn" in str(error.orig).lower()


class BookRepository:
    """Centralized book data access.

    Naming conventions:
    - find_* : Query that may return None or empty list
    - save* : Insert or replace, flushes but never commits
    - delete* : Remove rows; unknown ids are ignored

    Absence is never an error at this layer. Callers that require a book to
    exist translate a None result into their own error.
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def _ordered(self) -> "Query[Book]":
        return self._db.query(Book).order_by(Book.id)

    def save(self, book: Book) -> Book:
        """Insert a new book or replace the row with the same id.

        A book without an id is inserted and receives a generated id. A book
        carrying an id overwrites every column of the matching row, unset
        fields included, or is inserted under that id when none exists
        (upsert). Store-managed columns (id, timestamps) are left alone.

        Raises:
            DuplicateError: If the ISBN is already used by another book.
            RepositoryError: If any other constraint rejects the row.
        """
        if book.id is None:
            self._db.add(book)
            persisted = book
        else:
            existing = self._db.get(Book, book.id)
            if existing is None:
                self._db.add(book)
                persisted = book
            else:
                if existing is not book:
                    for field in REPLACEABLE_FIELDS:
                        setattr(existing, field, getattr(book, field))
                persisted = existing

        isbn = persisted.isbn
        try:
            self._db.flush()
        except IntegrityError as e:
            self._db.rollback()
            if isbn is not None and _is_isbn_conflict(e):
                raise DuplicateError("Book", "isbn", isbn) from e
            raise RepositoryError(f"Book rejected by database: {e.orig}") from e

        logger.info(f"Saved book {persisted.id} ({persisted.title!r})")
        return persisted

    def save_all(self, books: Iterable[Book]) -> list[Book]:
        """Save several books, returning the persisted instances in order."""
        return [self.save(book) for book in books]

    def find_by_id(self, book_id: int) -> Book | None:
        """Find book by primary key."""
        return self._db.query(Book).filter(Book.id == book_id).first()

    def find_all_by_id(self, book_ids: Iterable[int]) -> list[Book]:
        """Find books whose ids are in the given collection. Unknown ids are skipped."""
        ids = list(book_ids)
        if not ids:
            return []
        return self._ordered().filter(Book.id.in_(ids)).all()

    def find_all(self, *, skip: int = 0, limit: int | None = None) -> list[Book]:
        """Find all books in insertion order."""
        query = self._ordered().offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def find_by_title(
        self, title: str, *, skip: int = 0, limit: int | None = None
    ) -> list[Book]:
        """Find books by title (exact match, case-sensitive)."""
        query = self._ordered().filter(Book.title == title).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def exists_by_id(self, book_id: int) -> bool:
        """Check whether a book with this id is stored."""
        return self._db.query(Book.id).filter(Book.id == book_id).first() is not None

    def count(self) -> int:
        """Count stored books."""
        return self._db.query(Book).count()

    def delete(self, book: Book) -> None:
        """Delete a loaded book."""
        self._db.delete(book)
        self._db.flush()
        logger.info(f"Deleted book {book.id}")

    def delete_by_id(self, book_id: int) -> bool:
        """Delete book by primary key.

        Returns:
            True if a row was removed, False if the id was unknown.
        """
        book = self.find_by_id(book_id)
        if book is None:
            logger.debug(f"Delete of unknown book {book_id} ignored")
            return False
        self.delete(book)
        return True

    def delete_all(self) -> int:
        """Delete every book. Returns the number of rows removed."""
        deleted = self._db.query(Book).delete(synchronize_session=False)
        self._db.expunge_all()
        logger.info(f"Deleted {deleted} books")
        return deleted
