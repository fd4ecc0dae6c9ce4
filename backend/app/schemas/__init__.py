"""Pydantic schemas for API validation."""

from app.schemas.book import Book, BookCreate, BookUpdate
from app.schemas.common import ErrorDetail, ErrorResponse

__all__ = [
    # Book schemas
    "Book",
    "BookCreate",
    "BookUpdate",
    # Common schemas
    "ErrorDetail",
    "ErrorResponse",
]
