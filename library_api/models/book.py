"""
Book Model

The catalog record of the Library API.
"""

from datetime import date

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column

from library_api.database import Base


class Book(Base):
    """
    Book model representing a record in the catalog.

    Table: books

    Fields:
    - title: Book title (required)
    - author: Author name (required)
    - isbn: International Standard Book Number (required, unique)
    - published_date: Date of publication (required)

    Indexes:
    - isbn: Unique index, the authoritative guard against duplicate ISBNs
    - title: Index for ordering and searching

    Example:
        book = Book(
            title="Clean Code",
            author="Robert C. Martin",
            isbn="978-0132350884",
            published_date=date(2008, 8, 1),
        )
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)

    title: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Book title"
    )

    author: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Author name"
    )

    # No two books may share an ISBN; the application checks first,
    # the unique index settles concurrent writers
    isbn: Mapped[str] = mapped_column(
        String(32),
        unique=True,
        index=True,
        nullable=False,
        comment="International Standard Book Number"
    )

    # Date (not DateTime) because only the day matters
    published_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        comment="Date of publication"
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', isbn='{self.isbn}')"
