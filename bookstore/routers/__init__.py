"""
API Routers Package

- books.py: /books/* endpoints

Each router is imported and registered in main.py.
"""

from bookstore.routers.books import router as books_router

__all__ = [
    "books_router",
]
