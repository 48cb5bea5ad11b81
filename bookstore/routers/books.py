"""
Books Router

CRUD endpoints for books, addressed by ISBN.

Each handler is a single request -> response step:
1. Validate the JSON body (create / update)
2. Run one repository operation
3. Wrap the result in the response envelope

Validation failures, missing books and duplicate ISBNs are raised as
BookstoreError subclasses and turned into 400 / 404 / 409 responses by
the exception handlers registered in main.py.
"""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Request, status

from bookstore.config import get_settings
from bookstore.dependencies import BookRepo
from bookstore.schemas import (
    BookCreate,
    BookEnvelope,
    BookListEnvelope,
    BookResponse,
    BookUpdate,
    MessageResponse,
)
from bookstore.services.rate_limiter import limiter
from bookstore.validation import ValidationMode, ValidationResult, validate_book

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        404: {"description": "Book not found"},
    },
)

BookPayload = Annotated[
    Any,
    Body(
        description="Book fields as a JSON object",
        examples=[
            {
                "isbn": "0691161518",
                "amazon_url": "http://a.co/eobPtX2",
                "author": "Matthew Lane",
                "language": "english",
                "pages": 264,
                "publisher": "Princeton University Press",
                "title": "Power-Up: Unlocking the Hidden Mathematics in Video Games",
                "year": 2017,
            }
        ],
    ),
]


def _checked(result: ValidationResult, action: str) -> BookCreate | BookUpdate:
    if not result.ok:
        fields = ", ".join(v.field for v in result.violations)
        logger.info(f"Rejected {action} payload: {fields}")
    return result.unwrap()


@router.get(
    "",
    response_model=BookListEnvelope,
    summary="List all books",
)
@router.get("/", response_model=BookListEnvelope, include_in_schema=False)
def list_books(books: BookRepo) -> BookListEnvelope:
    """Return every book, ordered by ISBN."""
    return BookListEnvelope(
        books=[BookResponse.model_validate(book) for book in books.list_all()]
    )


@router.get(
    "/{isbn}",
    response_model=BookEnvelope,
    summary="Get a book by ISBN",
)
def get_book(isbn: str, books: BookRepo) -> BookEnvelope:
    """
    Get a single book.

    Raises:
        BookNotFoundError: 404 if no book has this ISBN
    """
    return BookEnvelope(book=BookResponse.model_validate(books.get_by_isbn(isbn)))


@router.post(
    "",
    response_model=BookEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    responses={
        400: {"description": "Invalid book data"},
        409: {"description": "A book with this ISBN already exists"},
    },
)
@router.post(
    "/",
    response_model=BookEnvelope,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
@limiter.limit(settings.rate_limit_write)
def create_book(
    request: Request,
    payload: BookPayload,
    books: BookRepo,
) -> BookEnvelope:
    """
    Create a new book.

    Every field is required, including isbn. A duplicate ISBN is
    rejected with 409; existing books are never overwritten.
    """
    data = _checked(validate_book(payload, ValidationMode.CREATE), "create")
    book = books.create(data)
    return BookEnvelope(book=BookResponse.model_validate(book))


@router.put(
    "/{isbn}",
    response_model=BookEnvelope,
    summary="Update a book",
    responses={400: {"description": "Invalid book data"}},
)
@limiter.limit(settings.rate_limit_write)
def update_book(
    request: Request,
    isbn: str,
    payload: BookPayload,
    books: BookRepo,
) -> BookEnvelope:
    """
    Replace every field of an existing book.

    The book is addressed by the ISBN in the URL; an isbn in the body
    must match it.
    """
    data = _checked(
        validate_book(payload, ValidationMode.UPDATE, isbn=isbn), "update"
    )
    book = books.update(isbn, data)
    return BookEnvelope(book=BookResponse.model_validate(book))


@router.delete(
    "/{isbn}",
    response_model=MessageResponse,
    summary="Delete a book",
)
@limiter.limit(settings.rate_limit_write)
def delete_book(request: Request, isbn: str, books: BookRepo) -> MessageResponse:
    """Delete a book; unknown ISBNs get 404, not a silent success."""
    books.delete(isbn)
    return MessageResponse(message="Book deleted")
