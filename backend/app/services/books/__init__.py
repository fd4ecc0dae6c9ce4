"""Book catalogue business logic and domain errors."""

from app.services.books.book_service import BookService
from app.services.books.exceptions import BookError, BookIdMismatchError, BookNotFoundError

__all__ = [
    "BookError",
    "BookIdMismatchError",
    "BookNotFoundError",
    "BookService",
]
