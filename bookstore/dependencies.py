"""
FastAPI Dependencies Module

Reusable components injected into route handlers with Depends().

Instead of writing:
    def list_books(db: Session = Depends(get_db)):

routes write:
    def list_books(books: BookRepo):
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from bookstore.database import get_db
from bookstore.repositories import BookRepository

DbSession = Annotated[Session, Depends(get_db)]


def get_book_repository(db: DbSession) -> BookRepository:
    """Build a repository around the request's session."""
    return BookRepository(db)


BookRepo = Annotated[BookRepository, Depends(get_book_repository)]
