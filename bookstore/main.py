"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() returns a configured app
   - Tests can create instances and override dependencies

2. Lifespan Events
   - startup: log configuration, optionally create tables
   - shutdown: dispose of the connection pool

3. Exception Handlers
   - BookstoreError -> 400 / 404 / 409 with the error envelope
   - Request body errors -> 400 with field violations
   - Database errors -> 500 without driver details
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from bookstore.config import get_settings
from bookstore.database import create_tables, get_engine
from bookstore.dependencies import DbSession
from bookstore.exceptions import (
    BookstoreError,
    BookValidationError,
    ErrorKind,
    error_body,
)
from bookstore.routers import books_router
from bookstore.services.rate_limiter import limiter, rate_limit_exceeded_handler
from bookstore.validation import violations_from_errors

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield runs on startup, code after yield on shutdown.
    """
    logger.info(f"Starting {settings.app_name} {settings.api_version}...")
    logger.info(f"Debug mode: {settings.debug}")

    if settings.auto_create_tables:
        logger.info("Creating database tables")
        create_tables()

    yield

    logger.info(f"Shutting down {settings.app_name}...")

    # Only dispose of the pool if a request actually created it
    if get_engine.cache_info().currsize:
        get_engine().dispose()


# =============================================================================
# Application Factory
# =============================================================================
def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## Bookstore API

A small RESTful API over a table of books, addressed by ISBN.

- `GET /books` lists every book
- `POST /books` creates a book
- `GET /books/{isbn}` returns one book
- `PUT /books/{isbn}` replaces a book
- `DELETE /books/{isbn}` deletes a book

Errors use the envelope `{"error": {"kind", "message", "status"}}`.
        """,
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # Rate Limiting
    # -------------------------------------------------------------------------
    # slowapi decorators look the limiter up on app.state
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(BookstoreError)
    async def bookstore_exception_handler(
        request: Request,
        exc: BookstoreError,
    ) -> JSONResponse:
        """Map domain errors to their status code and error envelope."""
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Report unparseable request bodies the same way as invalid books.

        FastAPI would answer 422; this API reports every client payload
        problem as 400 with field violations.
        """
        error = BookValidationError(violations_from_errors(exc.errors()))
        logger.info(f"Rejected request to {request.url.path}: {error.message}")
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """
        Handle SQLAlchemy database errors.

        Logs the actual error while hiding details from clients.
        """
        logger.error(f"Database error: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(
                ErrorKind.STORAGE_UNAVAILABLE,
                "A database error occurred. Please try again later.",
                status.HTTP_500_INTERNAL_SERVER_ERROR,
            ),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        In debug mode the exception text is returned to help development.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        message = str(exc) if settings.debug else "An internal error occurred."
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "message": message,
                    "status": status.HTTP_500_INTERNAL_SERVER_ERROR,
                }
            },
        )

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    app.include_router(books_router)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and the database answers.",
    )
    def health_check(db: DbSession) -> dict:
        """
        Health check endpoint for load balancers and probes.

        Always answers 200; the database field reports "unavailable"
        when SELECT 1 fails.
        """
        try:
            db.execute(text("SELECT 1"))
            database = "ok"
        except SQLAlchemyError as exc:
            logger.warning(f"Health check database error: {exc}")
            database = "unavailable"

        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": settings.api_version,
            "database": database,
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
    )
    def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.api_version,
            "books": "/books",
            "docs": "/docs",
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn bookstore.main:app
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookstore.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
