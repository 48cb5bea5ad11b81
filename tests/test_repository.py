"""
Tests for BookRepository.

These run directly against the test session, without HTTP.
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from bookstore.exceptions import BookConflictError, BookNotFoundError
from bookstore.repositories import BookRepository
from bookstore.schemas import BookCreate, BookResponse, BookUpdate


@pytest.fixture
def repository(db_session) -> BookRepository:
    return BookRepository(db_session)


@pytest.fixture
def new_book(new_book_payload) -> BookCreate:
    return BookCreate.model_validate(new_book_payload)


class TestListAll:
    def test_empty(self, repository):
        assert repository.list_all() == []

    def test_returns_every_book(self, repository, sample_book, new_book):
        repository.create(new_book)

        isbns = [book.isbn for book in repository.list_all()]

        assert isbns == ["0987654321", "1234567890"]


class TestCreate:
    def test_create_then_get_returns_equal_book(self, repository, new_book):
        repository.create(new_book)

        stored = repository.get_by_isbn(new_book.isbn)

        assert BookResponse.model_validate(stored).model_dump() == new_book.model_dump()

    def test_duplicate_isbn_conflicts(self, repository, sample_book, new_book_payload):
        new_book_payload["isbn"] = sample_book.isbn

        with pytest.raises(BookConflictError) as exc_info:
            repository.create(BookCreate.model_validate(new_book_payload))

        assert exc_info.value.isbn == "1234567890"
        assert repository.get_by_isbn("1234567890").title == "Book Title"

    def test_integrity_error_on_commit_conflicts(self, new_book):
        """Test a concurrent insert of the same ISBN is reported as a conflict."""
        session = MagicMock()
        session.get.return_value = None
        session.commit.side_effect = IntegrityError("INSERT", {}, Exception("duplicate key"))

        with pytest.raises(BookConflictError):
            BookRepository(session).create(new_book)

        session.rollback.assert_called_once()


class TestUpdate:
    def test_replaces_mutable_fields(self, repository, sample_book, update_payload):
        data = BookUpdate.model_validate(update_payload)

        book = repository.update("1234567890", data)

        assert book.isbn == "1234567890"
        assert book.title == "Updated Title"
        assert book.author == "Updated Author"
        assert book.year == 2022

    def test_idempotent(self, repository, sample_book, update_payload):
        data = BookUpdate.model_validate(update_payload)

        repository.update("1234567890", data)
        first = BookResponse.model_validate(repository.get_by_isbn("1234567890"))
        repository.update("1234567890", data)
        second = BookResponse.model_validate(repository.get_by_isbn("1234567890"))

        assert first == second
        assert len(repository.list_all()) == 1

    def test_unknown_isbn(self, repository, update_payload):
        with pytest.raises(BookNotFoundError):
            repository.update("nonexistent", BookUpdate.model_validate(update_payload))


class TestDelete:
    def test_delete_then_get_not_found(self, repository, sample_book):
        repository.delete("1234567890")

        with pytest.raises(BookNotFoundError):
            repository.get_by_isbn("1234567890")

    def test_unknown_isbn(self, repository):
        with pytest.raises(BookNotFoundError) as exc_info:
            repository.delete("nonexistent")

        assert exc_info.value.status_code == 404
