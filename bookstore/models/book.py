"""
Book Model

The only table of the Bookstore API.

The ISBN is the natural primary key: it is what clients use in
/books/{isbn} and it never changes once a book is created.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from bookstore.database import Base


class Book(Base):
    """
    Book model representing one row of the books table.

    Fields:
    - isbn: International Standard Book Number (primary key)
    - amazon_url: Link to the book's Amazon page
    - author, language, publisher, title: descriptive text
    - pages: Number of pages (positive)
    - year: Publication year

    Example:
        book = Book(
            isbn="0691161518",
            amazon_url="http://a.co/eobPtX2",
            author="Matthew Lane",
            language="english",
            pages=264,
            publisher="Princeton University Press",
            title="Power-Up: Unlocking the Hidden Mathematics in Video Games",
            year=2017,
        )
    """

    __tablename__ = "books"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    isbn: Mapped[str] = mapped_column(
        String(20),
        primary_key=True,
        comment="International Standard Book Number"
    )

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    amazon_url: Mapped[str] = mapped_column(
        String(2048),
        nullable=False,
        comment="Link to the book on Amazon"
    )

    author: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Author name"
    )

    language: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Language the book is written in"
    )

    pages: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Number of pages in the book"
    )

    publisher: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Publisher name"
    )

    title: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Book title"
    )

    year: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Publication year"
    )

    def __repr__(self) -> str:
        return f"Book(isbn='{self.isbn}', title='{self.title}')"
