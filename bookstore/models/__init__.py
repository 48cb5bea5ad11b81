"""
SQLAlchemy Models Package

Import all models here so they are available as `from bookstore.models
import Book` and so Alembic discovers them for migrations.
"""

from bookstore.models.book import Book

__all__ = [
    "Book",
]
