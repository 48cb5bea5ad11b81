"""
Book Payload Validation

validate_book() checks a decoded JSON body against the book schema and
returns a ValidationResult: either the normalized book, or every field
violation found. It never touches the database.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import ValidationError

from bookstore.exceptions import BookValidationError, ErrorKind, FieldViolation
from bookstore.schemas.book import BOOK_FIELDS, BookCreate, BookUpdate


class ValidationMode(str, Enum):
    CREATE = "create"
    UPDATE = "update"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validate_book(): a book or a list of violations."""

    book: BookCreate | BookUpdate | None = None
    violations: list[FieldViolation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations

    def unwrap(self) -> BookCreate | BookUpdate:
        """Return the book, or raise BookValidationError with all violations."""
        if not self.ok:
            raise BookValidationError(self.violations)
        return self.book


def _field_rank(name: str) -> int:
    try:
        return BOOK_FIELDS.index(name)
    except ValueError:
        return len(BOOK_FIELDS)


def violations_from_errors(errors: Iterable[dict[str, Any]]) -> list[FieldViolation]:
    """
    Convert pydantic error dicts into one FieldViolation per field.

    Works for both model errors (loc=("pages",)) and FastAPI request
    errors (loc=("body", "pages") or ("body", 12) for broken JSON).
    """
    seen: dict[str, FieldViolation] = {}

    for error in errors:
        loc: Sequence[Any] = error.get("loc", ())
        if loc and loc[0] == "body":
            loc = loc[1:]
        name = str(loc[0]) if loc and isinstance(loc[0], str) else "body"

        if name in seen:
            continue

        kind = (
            ErrorKind.MISSING_FIELD
            if error.get("type") == "missing"
            else ErrorKind.INVALID_FIELD
        )
        message = str(error.get("msg", "Invalid value")).removeprefix("Value error, ")
        seen[name] = FieldViolation(field=name, kind=kind, message=message)

    return sorted(seen.values(), key=lambda v: _field_rank(v.field))


def validate_book(
    payload: Any,
    mode: ValidationMode,
    isbn: str | None = None,
) -> ValidationResult:
    """
    Validate a book payload.

    Args:
        payload: Decoded JSON request body
        mode: CREATE requires isbn in the body; UPDATE takes it from the URL
        isbn: ISBN from the URL (update only); a body isbn must equal it

    Returns:
        ValidationResult with the normalized book or all violations
    """
    if not isinstance(payload, dict):
        return ValidationResult(
            violations=[
                FieldViolation(
                    field="body",
                    kind=ErrorKind.INVALID_FIELD,
                    message="Request body must be a JSON object",
                )
            ]
        )

    schema = BookCreate if mode is ValidationMode.CREATE else BookUpdate

    try:
        book = schema.model_validate(payload)
    except ValidationError as exc:
        book = None
        violations = violations_from_errors(exc.errors())
    else:
        violations = []

    if mode is ValidationMode.UPDATE and isbn is not None:
        body_isbn = payload.get("isbn")
        already_flagged = any(v.field == "isbn" for v in violations)
        if (
            isinstance(body_isbn, str)
            and not already_flagged
            and body_isbn.strip() != isbn
        ):
            violations.insert(
                0,
                FieldViolation(
                    field="isbn",
                    kind=ErrorKind.INVALID_FIELD,
                    message="isbn cannot be changed; it must match the isbn in the URL",
                ),
            )

    if violations:
        return ValidationResult(violations=violations)
    return ValidationResult(book=book)
