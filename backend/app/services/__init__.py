"""Services layer - business logic.

This module is organized into domain-based subpackages:
- books/: Book catalogue operations and domain errors
- repositories/: Data access layer

Common imports for convenience:
    from app.services import BookService, BookRepository
    from app.services import BookNotFoundError, BookIdMismatchError
"""

# Re-export commonly used components for convenience
from app.services.books import (
    BookError,
    BookIdMismatchError,
    BookNotFoundError,
    BookService,
)
from app.services.repositories import (
    BookRepository,
    DuplicateError,
    RepositoryError,
)

__all__ = [
    # Books
    "BookError",
    "BookIdMismatchError",
    "BookNotFoundError",
    "BookService",
    # Repositories
    "BookRepository",
    "DuplicateError",
    "RepositoryError",
]
