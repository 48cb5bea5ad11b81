"""
Bookstore Error Taxonomy

Every failure the API reports to clients has an ErrorKind. Domain errors
are raised as BookstoreError subclasses, each carrying its kind and HTTP
status, and a single exception handler in main.py turns them into the
error envelope:

    {"error": {"kind": "NotFound", "message": "...", "status": 404}}
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

from fastapi import status


class ErrorKind(str, Enum):
    """Kinds of failure surfaced to clients."""

    MISSING_FIELD = "MissingField"
    INVALID_FIELD = "InvalidField"
    NOT_FOUND = "NotFound"
    CONFLICT = "Conflict"
    STORAGE_UNAVAILABLE = "StorageUnavailable"
    RATE_LIMITED = "RateLimited"


@dataclass(frozen=True)
class FieldViolation:
    """One offending field in a rejected payload."""

    field: str
    kind: ErrorKind
    message: str

    def to_dict(self) -> dict[str, str]:
        data = asdict(self)
        data["kind"] = self.kind.value
        return data


def error_body(
    kind: ErrorKind,
    message: str,
    status_code: int,
    **extra: Any,
) -> dict[str, Any]:
    """Build the JSON error envelope shared by every failure response."""
    return {
        "error": {
            "kind": kind.value,
            "message": message,
            "status": status_code,
            **extra,
        }
    }


class BookstoreError(Exception):
    """Base class for errors that map directly to an HTTP response."""

    kind: ErrorKind = ErrorKind.INVALID_FIELD
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return error_body(self.kind, self.message, self.status_code)


class BookValidationError(BookstoreError):
    """A payload was rejected before any storage mutation."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, violations: list[FieldViolation]) -> None:
        fields = ", ".join(v.field for v in violations)
        super().__init__(f"Invalid book data: {fields}")
        self.violations = violations
        # Report MissingField when every problem is a missing field
        if violations and all(
            v.kind is ErrorKind.MISSING_FIELD for v in violations
        ):
            self.kind = ErrorKind.MISSING_FIELD
        else:
            self.kind = ErrorKind.INVALID_FIELD

    def to_dict(self) -> dict[str, Any]:
        return error_body(
            self.kind,
            self.message,
            self.status_code,
            violations=[v.to_dict() for v in self.violations],
        )


class BookNotFoundError(BookstoreError):
    """No row matches the given ISBN."""

    kind = ErrorKind.NOT_FOUND
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, isbn: str) -> None:
        super().__init__(f"Book with isbn '{isbn}' not found")
        self.isbn = isbn


class BookConflictError(BookstoreError):
    """A book with the given ISBN already exists."""

    kind = ErrorKind.CONFLICT
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, isbn: str) -> None:
        super().__init__(f"Book with isbn '{isbn}' already exists")
        self.isbn = isbn
