"""Book domain errors.

Both errors describe bad client input, not transient faults, so they are
never retried. Each accepts an optional message and an optional underlying
error, which is also chained as ``__cause__``. Without a message, the
cause's text is used, then a generic default.
"""


class BookError(Exception):
    """Base exception for book domain errors."""

    default_message = "Book request failed"

    def __init__(self, message: str | None = None, cause: BaseException | None = None):
        if message is None and cause is not None:
            message = str(cause)
        self.message = message or self.default_message
        self.cause = cause
        super().__init__(self.message)
        if cause is not None:
            self.__cause__ = cause


class BookNotFoundError(BookError):
    """Requested book does not exist."""

    default_message = "Book not found"

    def __init__(
        self,
        message: str | None = None,
        cause: BaseException | None = None,
        *,
        book_id: int | None = None,
    ):
        self.book_id = book_id
        if message is None and cause is None and book_id is not None:
            message = f"Book not found: {book_id}"
        super().__init__(message, cause)


class BookIdMismatchError(BookError):
    """Id in the request body disagrees with the id of the targeted book."""

    default_message = "Book id mismatch"

    def __init__(
        self,
        message: str | None = None,
        cause: BaseException | None = None,
        *,
        path_id: int | None = None,
        body_id: int | None = None,
    ):
        self.path_id = path_id
        self.body_id = body_id
        if message is None and cause is None and path_id is not None and body_id is not None:
            message = f"Book id mismatch: target {path_id}, body {body_id}"
        super().__init__(message, cause)
