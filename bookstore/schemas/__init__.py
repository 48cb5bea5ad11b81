"""
Pydantic Schemas Package

Request/response validation models, kept separate from the SQLAlchemy
models so the API contract can evolve independently of the table.

Schema Naming Convention:
- XxxBase: Shared fields between create/update
- XxxCreate: Fields required when creating a new record
- XxxUpdate: Fields required when replacing a record
- XxxResponse: Fields returned in API responses
"""

from bookstore.schemas.book import (
    BOOK_FIELDS,
    BookBase,
    BookCreate,
    BookEnvelope,
    BookListEnvelope,
    BookResponse,
    BookUpdate,
    MessageResponse,
)

__all__ = [
    "BOOK_FIELDS",
    "BookBase",
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    "BookEnvelope",
    "BookListEnvelope",
    "MessageResponse",
]
