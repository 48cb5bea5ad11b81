"""
Bookstore API Package

A small CRUD API over a table of books keyed by ISBN.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine, session factory and get_db dependency
- exceptions.py: Error kinds and the error envelope
- validation.py: Book payload validation
- main.py: FastAPI application factory and exception handlers
- dependencies.py: Dependency injection aliases
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- repositories/: SQL access for books
- routers/: API route handlers
- services/: Rate limiting
"""

__version__ = "1.0.0"
