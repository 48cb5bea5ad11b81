"""
Test Suite for Bookstore API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_books.py: Tests for the /books endpoints
- test_validation.py: Tests for payload validation
- test_repository.py: Tests for BookRepository
- test_app.py: Settings, engine factory, health check, rate-limit keys

Running Tests:
    pytest
    pytest tests/test_books.py -v
"""
