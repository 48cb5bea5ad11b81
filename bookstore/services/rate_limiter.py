"""
Rate Limiting Service

Implements rate limiting using slowapi so a single client cannot flood
the API.

Rate Limit Tiers:
=================
- Default (every route): RATE_LIMIT_DEFAULT, 100 requests/minute
- Writes (create, update, delete): RATE_LIMIT_WRITE, 30 requests/minute

Counters live in process memory, so each API instance limits on its own.
"""

import logging

from fastapi import Request, status
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.responses import JSONResponse

from bookstore.config import get_settings
from bookstore.exceptions import ErrorKind, error_body

logger = logging.getLogger(__name__)
settings = get_settings()


def get_client_ip(request: Request) -> str:
    """
    Get client IP address for rate limiting.

    Handles common proxy headers to get the real client IP and falls back
    to the direct connection IP.
    """
    # X-Forwarded-For can contain multiple IPs; first is the client
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    # nginx
    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    return get_remote_address(request)


def create_limiter() -> Limiter:
    """Create and configure the rate limiter."""
    limiter = Limiter(
        key_func=get_client_ip,
        default_limits=[settings.rate_limit_default],
        storage_uri="memory://",
        strategy="fixed-window",
        enabled=settings.rate_limit_enabled,
    )

    logger.info(
        f"Rate limiter initialized - enabled: {settings.rate_limit_enabled}, "
        f"default: {settings.rate_limit_default}, write: {settings.rate_limit_write}"
    )

    return limiter


limiter = create_limiter()


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """
    Return 429 Too Many Requests in the standard error envelope.

    Adds Retry-After and X-RateLimit-Limit headers.
    """
    limit_detail = str(exc.detail)

    response = JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content=error_body(
            ErrorKind.RATE_LIMITED,
            "Too many requests. Please slow down.",
            status.HTTP_429_TOO_MANY_REQUESTS,
            limit=limit_detail,
        ),
    )
    response.headers["Retry-After"] = str(60)
    response.headers["X-RateLimit-Limit"] = limit_detail

    logger.warning(
        f"Rate limit exceeded for {get_client_ip(request)}: {limit_detail}"
    )

    return response
