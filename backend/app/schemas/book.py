"""Pydantic schemas for Book model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# Largest id a 32-bit INTEGER primary key can hold
MAX_BOOK_ID = 2**31 - 1


class BookBase(BaseModel):
    """Base Book schema with common fields."""

    title: str = Field(..., min_length=1, max_length=255)
    author: str | None = Field(None, max_length=255)
    isbn: str | None = Field(None, min_length=1, max_length=20)
    publisher: str | None = Field(None, max_length=255)
    published_year: int | None = Field(None, ge=0, le=9999)


class BookCreate(BookBase):
    """Schema for creating a new Book. Ids are assigned by the database."""

    pass


class BookUpdate(BookBase):
    """Schema for replacing an existing Book.

    The body may repeat the target id; when it does it must match the id in
    the request path.
    """

    id: int | None = Field(
        None, ge=1, le=MAX_BOOK_ID, description="Must equal the id of the book being updated"
    )


class Book(BookBase):
    """Schema for Book responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: datetime
