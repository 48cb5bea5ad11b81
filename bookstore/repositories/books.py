"""
Book Repository

Translates validated payloads into single-row SQL statements on the books
table. The repository is built around a session supplied by the caller
(one per request) and never opens connections of its own.

Failures are raised as domain errors:
- BookNotFoundError: no row for the ISBN (get, update, delete)
- BookConflictError: the ISBN is already taken (create)

Driver errors (SQLAlchemyError) are not caught here; they propagate to
the application's storage error handler.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bookstore.exceptions import BookConflictError, BookNotFoundError
from bookstore.models import Book
from bookstore.schemas.book import BookCreate, BookUpdate

logger = logging.getLogger(__name__)


class BookRepository:
    """CRUD operations for the books table."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_all(self) -> list[Book]:
        """Return every book, ordered by ISBN."""
        stmt = select(Book).order_by(Book.isbn)
        return list(self.session.execute(stmt).scalars().all())

    def get_by_isbn(self, isbn: str) -> Book:
        """
        Get a book by ISBN.

        Raises:
            BookNotFoundError: if no book has this ISBN
        """
        book = self.session.get(Book, isbn)
        if book is None:
            raise BookNotFoundError(isbn)
        return book

    def create(self, data: BookCreate) -> Book:
        """
        Insert a new book.

        Raises:
            BookConflictError: if a book with the same ISBN exists
        """
        if self.session.get(Book, data.isbn) is not None:
            raise BookConflictError(data.isbn)

        book = Book(**data.model_dump())
        self.session.add(book)
        try:
            self.session.commit()
        except IntegrityError:
            # Another request inserted the same ISBN between get() and commit()
            self.session.rollback()
            raise BookConflictError(data.isbn)

        logger.info(f"Created book {book.isbn}")
        return book

    def update(self, isbn: str, data: BookUpdate) -> Book:
        """
        Replace every mutable field of the book with this ISBN.

        Raises:
            BookNotFoundError: if no book has this ISBN
        """
        book = self.get_by_isbn(isbn)

        for field, value in data.to_row().items():
            setattr(book, field, value)

        self.session.commit()

        logger.info(f"Updated book {isbn}")
        return book

    def delete(self, isbn: str) -> None:
        """
        Delete the book with this ISBN.

        Raises:
            BookNotFoundError: if no book has this ISBN
        """
        book = self.get_by_isbn(isbn)
        self.session.delete(book)
        self.session.commit()

        logger.info(f"Deleted book {isbn}")
