#!/usr/bin/env python3
"""
Database Seed Script

Populates the books table with sample data for development.

USAGE:
    # From the project root with the virtualenv active, after
    # `alembic upgrade head` (or with AUTO_CREATE_TABLES=true)
    python scripts/seed_data.py

    # Start from an empty table
    python scripts/seed_data.py --clear

Books go through the same validation and repository as the API, so
existing ISBNs are skipped rather than overwritten.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from bookstore.config import get_settings
from bookstore.database import create_tables, get_session_factory
from bookstore.exceptions import BookConflictError
from bookstore.models import Book
from bookstore.repositories import BookRepository
from bookstore.validation import ValidationMode, validate_book

logger = logging.getLogger("seed_data")

SAMPLE_BOOKS = [
    {
        "isbn": "0691161518",
        "amazon_url": "http://a.co/eobPtX2",
        "author": "Matthew Lane",
        "language": "english",
        "pages": 264,
        "publisher": "Princeton University Press",
        "title": "Power-Up: Unlocking the Hidden Mathematics in Video Games",
        "year": 2017,
    },
    {
        "isbn": "0451524934",
        "amazon_url": "https://www.amazon.com/dp/0451524934",
        "author": "George Orwell",
        "language": "english",
        "pages": 328,
        "publisher": "Signet Classic",
        "title": "1984",
        "year": 1961,
    },
    {
        "isbn": "0141439513",
        "amazon_url": "https://www.amazon.com/dp/0141439513",
        "author": "Jane Austen",
        "language": "english",
        "pages": 480,
        "publisher": "Penguin Classics",
        "title": "Pride and Prejudice",
        "year": 2002,
    },
    {
        "isbn": "0547928227",
        "amazon_url": "https://www.amazon.com/dp/0547928227",
        "author": "J.R.R. Tolkien",
        "language": "english",
        "pages": 300,
        "publisher": "Mariner Books",
        "title": "The Hobbit",
        "year": 2012,
    },
]


def clear_data(db: Session) -> None:
    """Delete every book."""
    logger.info("Clearing existing books...")
    db.execute(delete(Book))
    db.commit()


def seed_books(db: Session) -> int:
    """Insert the sample books, skipping ISBNs that already exist."""
    repository = BookRepository(db)
    created = 0

    for payload in SAMPLE_BOOKS:
        data = validate_book(payload, ValidationMode.CREATE).unwrap()
        try:
            repository.create(data)
        except BookConflictError:
            logger.info(f"Skipping {data.isbn}: already present")
            continue
        created += 1

    return created


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the books table")
    parser.add_argument(
        "--clear",
        action="store_true",
        help="delete all books before seeding",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s - %(message)s")

    # The schema normally comes from `alembic upgrade head`
    if get_settings().auto_create_tables:
        create_tables()

    with get_session_factory()() as db:
        if args.clear:
            clear_data(db)
        created = seed_books(db)

    logger.info(f"Seeded {created} book(s)")


if __name__ == "__main__":
    main()
