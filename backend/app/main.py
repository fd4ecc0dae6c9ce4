"""Main FastAPI application."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.config import settings
from app.rate_limiter import limiter
from app.schemas.common import ErrorDetail, ErrorResponse
from app.services.books import BookIdMismatchError, BookNotFoundError
from app.services.repositories import DuplicateError

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Book Catalog API",
    description="Create, read, update and delete book records",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Add rate limiter to app state and exception handler
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    details: list[ErrorDetail] | None = None,
) -> JSONResponse:
    body = ErrorResponse(error=error, message=message, details=details, path=request.url.path)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def book_not_found_handler(request: Request, exc: BookNotFoundError) -> JSONResponse:
    """Translate BookNotFoundError into a 404 error body."""
    logger.warning(f"{request.method} {request.url.path}: {exc.message}")
    return _error_response(request, status.HTTP_404_NOT_FOUND, "BookNotFound", exc.message)


async def book_id_mismatch_handler(request: Request, exc: BookIdMismatchError) -> JSONResponse:
    """Translate BookIdMismatchError into a 400 error body naming both ids."""
    logger.warning(f"{request.method} {request.url.path}: {exc.message}")
    details = [
        ErrorDetail(field="path.book_id", message=str(exc.path_id)),
        ErrorDetail(field="body.id", message=str(exc.body_id)),
    ]
    return _error_response(
        request, status.HTTP_400_BAD_REQUEST, "BookIdMismatch", exc.message, details
    )


async def duplicate_handler(request: Request, exc: DuplicateError) -> JSONResponse:
    """Translate DuplicateError into a 409 error body."""
    logger.warning(f"{request.method} {request.url.path}: {exc}")
    return _error_response(
        request,
        status.HTTP_409_CONFLICT,
        "Duplicate",
        str(exc),
        [ErrorDetail(field=exc.field, message=f"{exc.value} is already in use")],
    )


app.add_exception_handler(BookNotFoundError, book_not_found_handler)
app.add_exception_handler(BookIdMismatchError, book_id_mismatch_handler)
app.add_exception_handler(DuplicateError, duplicate_handler)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Book Catalog API", "version": "0.1.0", "status": "running"}


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# Import and include routers
from app.routers import books  # noqa: E402

app.include_router(books.router)


def run() -> None:
    """Start the API server."""
    import uvicorn

    uvicorn.run("app.main:app", host=settings.host, port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    run()
