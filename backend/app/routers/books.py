"""Books API router."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Request, status

from app.config import settings
from app.dependencies.books import get_book_service
from app.rate_limiter import limiter, write_limit
from app.schemas.book import Book as BookSchema
from app.schemas.book import MAX_BOOK_ID, BookCreate, BookUpdate
from app.schemas.common import ErrorResponse
from app.services.books import BookService

router = APIRouter(prefix="/api/books", tags=["books"])

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}

BookId = Annotated[int, Path(ge=1, le=MAX_BOOK_ID, description="Book id")]


@router.get("", response_model=list[BookSchema])
def list_books(
    title: str | None = Query(None, description="Return only books with exactly this title"),
    skip: int = Query(0, ge=0),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    service: BookService = Depends(get_book_service),
):
    """
    Get list of books in insertion order.

    Query Parameters:
        - title: Exact, case-sensitive title filter
        - skip: Number of records to skip (pagination)
        - limit: Maximum number of records to return
    """
    if title is not None:
        return service.find_books_by_title(title, skip=skip, limit=limit)
    return service.list_books(skip=skip, limit=limit)


@router.post(
    "",
    response_model=BookSchema,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_409_CONFLICT: {"model": ErrorResponse}},
)
@limiter.limit(write_limit)
def create_book(
    request: Request,
    book: BookCreate,
    service: BookService = Depends(get_book_service),
):
    """Create a new book."""
    return service.create_book(book)


@router.get("/{book_id}", response_model=BookSchema, responses=NOT_FOUND_RESPONSE)
def get_book(book_id: BookId, service: BookService = Depends(get_book_service)):
    """Get a specific book by ID."""
    return service.get_book(book_id)


@router.put(
    "/{book_id}",
    response_model=BookSchema,
    responses={
        **NOT_FOUND_RESPONSE,
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    },
)
@limiter.limit(write_limit)
def update_book(
    request: Request,
    book_id: BookId,
    book_update: BookUpdate,
    service: BookService = Depends(get_book_service),
):
    """Replace an existing book. A body id, if given, must match the path id."""
    return service.update_book(book_id, book_update)


@router.delete(
    "/{book_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND_RESPONSE
)
@limiter.limit(write_limit)
def delete_book(
    request: Request,
    book_id: BookId,
    service: BookService = Depends(get_book_service),
):
    """Delete a book."""
    service.delete_book(book_id)
    return None
