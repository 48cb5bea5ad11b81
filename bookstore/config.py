"""
Application Configuration Module

This module uses Pydantic Settings for type-safe configuration management.

WHY Pydantic Settings?
======================
1. Type Safety: All configuration values are validated against their types
2. Environment Variables: Automatically loads from environment variables
3. .env Support: Can load from .env files for local development
4. Validation: Catches configuration errors at startup, not runtime

PATTERN: Settings Singleton
===========================
A single Settings instance is cached using @lru_cache, so configuration is
loaded once and every part of the app sees the same values.

Usage:
    from bookstore.config import get_settings

    settings = get_settings()
    print(settings.database_url)
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every field can be overridden by the upper-cased environment variable
    of the same name (DATABASE_URL, LOG_LEVEL, ...) or by a .env file.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(
        default="Bookstore API",
        description="Application name displayed in docs and logs"
    )
    api_version: str = Field(
        default="1.0.0",
        description="Version reported by the OpenAPI schema and /health"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (detailed errors, SQL echo, auto-reload)"
    )
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind the server to"
    )
    port: int = Field(
        default=3000,
        description="Port to bind the server to"
    )
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production"
    )

    # -------------------------------------------------------------------------
    # Database Settings
    # -------------------------------------------------------------------------
    database_url: str = Field(
        default="postgresql://localhost/books",
        description="SQLAlchemy database URL"
    )
    db_pool_size: int = Field(
        default=5,
        ge=1,
        description="Number of permanent database connections"
    )
    db_max_overflow: int = Field(
        default=10,
        ge=0,
        description="Maximum additional connections during high load"
    )
    db_pool_timeout: int = Field(
        default=30,
        ge=1,
        description="Seconds to wait for a pooled connection before giving up"
    )
    auto_create_tables: bool = Field(
        default=False,
        description="Create the books table on startup instead of relying on Alembic"
    )

    # -------------------------------------------------------------------------
    # HTTP Settings
    # -------------------------------------------------------------------------
    allowed_origins: str = Field(
        default="http://localhost:3000,http://localhost:8080",
        description="Comma-separated list of allowed CORS origins"
    )

    # -------------------------------------------------------------------------
    # Rate Limiting Settings
    # -------------------------------------------------------------------------
    rate_limit_enabled: bool = Field(
        default=True,
        description="Enable per-client rate limiting"
    )
    rate_limit_default: str = Field(
        default="100/minute",
        description="Limit applied to every route"
    )
    rate_limit_write: str = Field(
        default="30/minute",
        description="Limit applied to create, update and delete"
    )

    # -------------------------------------------------------------------------
    # Logging Settings
    # -------------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    @property
    def allowed_origins_list(self) -> List[str]:
        """Parse comma-separated CORS origins into a list."""
        return [
            origin.strip()
            for origin in self.allowed_origins.split(",")
            if origin.strip()
        ]

    @property
    def is_sqlite(self) -> bool:
        """SQLite URLs do not accept the queue pool sizing options."""
        return self.database_url.startswith("sqlite")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate that log_level is a valid Python logging level.

        Returns:
            The validated value (uppercase)

        Raises:
            ValueError: If log level is invalid
        """
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is a known value."""
        valid_envs = {"development", "staging", "production"}
        if v.lower() not in valid_envs:
            raise ValueError(f"environment must be one of {valid_envs}")
        return v.lower()

    @model_validator(mode="after")
    def validate_auto_create_tables(self) -> "Settings":
        """Production schemas are created by Alembic, never on startup."""
        if self.is_production and self.auto_create_tables:
            raise ValueError(
                "AUTO_CREATE_TABLES cannot be enabled in production; "
                "run `alembic upgrade head` instead"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    The first call reads the environment (and .env) and validates it;
    later calls return the same instance. Tests that change environment
    variables call get_settings.cache_clear() first.
    """
    return Settings()
