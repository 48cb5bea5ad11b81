"""Data access layer."""

from bookstore.repositories.books import BookRepository

__all__ = ["BookRepository"]
