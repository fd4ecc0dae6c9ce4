"""Book service dependency for routes."""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.services.books import BookService


def get_book_service(db: Session = Depends(get_db)) -> BookService:
    """
    Build a BookService bound to the request's database session.

    Usage:
        @router.get("/books/{book_id}")
        def read_book(book_id: int, service: BookService = Depends(get_book_service)):
            return service.get_book(book_id)
    """
    return BookService(db)
