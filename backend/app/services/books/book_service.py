"""Book service - request validation on top of BookRepository.

The repository treats a missing row as a normal outcome. This service is
where a missing row becomes BookNotFoundError, and where an update whose
body id disagrees with its target becomes BookIdMismatchError.
"""

import logging

from sqlalchemy.orm import Session

from app.models import Book
from app.schemas.book import BookCreate, BookUpdate
from app.services.books.exceptions import BookIdMismatchError, BookNotFoundError
from app.services.repositories.book_repository import BookRepository

logger = logging.getLogger(__name__)


class BookService:
    """Create, read, update and delete books.

    Each write is its own unit of work: committed on success, rolled back
    when anything raises.
    """

    def __init__(self, db: Session, repository: BookRepository | None = None) -> None:
        self._db = db
        self._repo = repository or BookRepository(db)

    def create_book(self, data: BookCreate) -> Book:
        """Store a new book. The database assigns its id."""
        book = Book(**data.model_dump())
        try:
            book = self._repo.save(book)
            self._db.commit()
        except Exception:
            self._db.rollback()
            raise
        logger.info(f"Created book {book.id}")
        return book

    def get_book(self, book_id: int) -> Book:
        """Get a book by id.

        Raises:
            BookNotFoundError: If no book has this id.
        """
        book = self._repo.find_by_id(book_id)
        if book is None:
            raise BookNotFoundError(book_id=book_id)
        return book

    def list_books(self, *, skip: int = 0, limit: int | None = None) -> list[Book]:
        return self._repo.find_all(skip=skip, limit=limit)

    def find_books_by_title(
        self, title: str, *, skip: int = 0, limit: int | None = None
    ) -> list[Book]:
        """Books whose title equals ``title`` exactly. Empty when none match."""
        return self._repo.find_by_title(title, skip=skip, limit=limit)

    def update_book(self, book_id: int, data: BookUpdate) -> Book:
        """Replace every field of an existing book.

        Raises:
            BookIdMismatchError: If ``data.id`` is set and differs from ``book_id``.
            BookNotFoundError: If no book has this id.
        """
        if data.id is not None and data.id != book_id:
            raise BookIdMismatchError(path_id=book_id, body_id=data.id)

        book = self.get_book(book_id)
        for field, value in data.model_dump(exclude={"id"}).items():
            setattr(book, field, value)

        try:
            book = self._repo.save(book)
            self._db.commit()
        except Exception:
            self._db.rollback()
            raise
        logger.info(f"Updated book {book_id}")
        return book

    def delete_book(self, book_id: int, *, missing_ok: bool = False) -> None:
        """Delete a book by id.

        Args:
            book_id: Id of the book to delete
            missing_ok: Treat an unknown id as already deleted instead of failing

        Raises:
            BookNotFoundError: If no book has this id and ``missing_ok`` is false.
        """
        try:
            deleted = self._repo.delete_by_id(book_id)
            self._db.commit()
        except Exception:
            self._db.rollback()
            raise

        if not deleted:
            if not missing_ok:
                raise BookNotFoundError(book_id=book_id)
            return
        logger.info(f"Deleted book {book_id}")
