"""
Book Pydantic Schemas

The explicit schema of a book payload: each field's type, whether it is
required, and its constraints. Request schemas run in strict mode, so
"200" is not accepted for pages and 2020 is not accepted for author.

- BookCreate: every field required, isbn included
- BookUpdate: every mutable field required, isbn optional (the path names the book)
- BookResponse: what the API returns for a stored book
"""

from datetime import date

from pydantic import (
    AnyHttpUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)

# Field order used when reporting violations
BOOK_FIELDS = (
    "isbn",
    "amazon_url",
    "author",
    "language",
    "pages",
    "publisher",
    "title",
    "year",
)

# Letters, digits and hyphens only, so every ISBN is addressable as /books/{isbn}
ISBN_PATTERN = r"^[0-9A-Za-z-]+$"

_http_url = TypeAdapter(AnyHttpUrl)


class BookBase(BaseModel):
    """
    Fields shared by create and update payloads.

    Contains validation for:
    - amazon_url (well-formed http/https URL)
    - pages (must be positive)
    - year (must be a plausible publication year)
    """

    model_config = ConfigDict(
        strict=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    amazon_url: str = Field(
        ...,
        min_length=1,
        max_length=2048,
        description="Link to the book on Amazon",
        examples=["http://a.co/eobPtX2"],
    )

    author: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Author name",
        examples=["Matthew Lane"],
    )

    language: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Language the book is written in",
        examples=["english"],
    )

    pages: int = Field(
        ...,
        gt=0,
        description="Number of pages",
        examples=[264],
    )

    publisher: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Publisher name",
        examples=["Princeton University Press"],
    )

    title: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Book title",
        examples=["Power-Up: Unlocking the Hidden Mathematics in Video Games"],
    )

    year: int = Field(
        ...,
        ge=1,
        description="Publication year",
        examples=[2017],
    )

    @field_validator("amazon_url")
    @classmethod
    def validate_amazon_url(cls, v: str) -> str:
        """Accept only absolute http(s) URLs; the original string is stored."""
        try:
            _http_url.validate_python(v)
        except ValidationError:
            raise ValueError("amazon_url must be a valid http or https URL")
        return v

    @field_validator("year")
    @classmethod
    def validate_year(cls, v: int) -> int:
        """Reject years after next year."""
        latest = date.today().year + 1
        if v > latest:
            raise ValueError(f"year must not be later than {latest}")
        return v


class BookCreate(BookBase):
    """
    Schema for creating a new book.

    Example request body:
    {
        "isbn": "0691161518",
        "amazon_url": "http://a.co/eobPtX2",
        "author": "Matthew Lane",
        "language": "english",
        "pages": 264,
        "publisher": "Princeton University Press",
        "title": "Power-Up",
        "year": 2017
    }
    """

    isbn: str = Field(
        ...,
        min_length=1,
        max_length=20,
        pattern=ISBN_PATTERN,
        description="ISBN of the book, unique",
        examples=["0691161518"],
    )


class BookUpdate(BookBase):
    """
    Schema for a full update of an existing book.

    Unlike a PATCH, every mutable field must be present. The isbn may be
    repeated in the body but it must name the same book as the URL.
    """

    isbn: str | None = Field(
        default=None,
        min_length=1,
        max_length=20,
        pattern=ISBN_PATTERN,
        description="Must match the ISBN in the URL when given",
    )

    def to_row(self) -> dict:
        """Mutable column values, without the isbn."""
        return self.model_dump(exclude={"isbn"})


class BookResponse(BaseModel):
    """Schema for a stored book in API responses."""

    isbn: str
    amazon_url: str
    author: str
    language: str
    pages: int
    publisher: str
    title: str
    year: int

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "isbn": "0691161518",
                "amazon_url": "http://a.co/eobPtX2",
                "author": "Matthew Lane",
                "language": "english",
                "pages": 264,
                "publisher": "Princeton University Press",
                "title": "Power-Up: Unlocking the Hidden Mathematics in Video Games",
                "year": 2017,
            }
        },
    )


class BookEnvelope(BaseModel):
    """Single book response: {"book": {...}}."""

    book: BookResponse


class BookListEnvelope(BaseModel):
    """List response: {"books": [...]}."""

    books: list[BookResponse]


class MessageResponse(BaseModel):
    """Plain acknowledgement, e.g. {"message": "Book deleted"}."""

    message: str
