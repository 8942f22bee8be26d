"""
Catalog Validator

Enforces the required-field and ISBN uniqueness rules for book writes.

Create:
- title, author, ISBN and published date are all required, and the first
  missing one is reported
Update:
- the book id must be positive
- at least one of title, author, ISBN or published date must be supplied
Both:
- a supplied ISBN must not belong to another book
"""

from sqlalchemy.orm import Session

from library_api import stores
from library_api.exceptions import (
    DuplicateISBNError,
    InvalidIdError,
    MissingFieldError,
    NoFieldSuppliedError,
    ValidationError,
)
from library_api.schemas import BookDto


def is_blank(value: str | None) -> bool:
    """True for None, empty and whitespace-only strings."""
    return value is None or not value.strip()


def validate_book(
    db: Session,
    dto: BookDto | None,
    is_update: bool = False,
    book_id: int | None = None,
) -> bool:
    """
    Validate a book payload for create or update.

    Args:
        db: Database session, used for the ISBN uniqueness check
        dto: Incoming book data
        is_update: Apply update rules instead of create rules
        book_id: Book being updated (ignored on create)

    Returns:
        True when the payload is valid

    Raises:
        ValidationError: body missing
        MissingFieldError: create without a required field
        InvalidIdError: update with a missing or non-positive id
        NoFieldSuppliedError: update without any field
        DuplicateISBNError: the ISBN belongs to another book
    """
    if dto is None:
        raise ValidationError("Request body is required.")

    if is_update:
        if book_id is None or book_id <= 0:
            raise InvalidIdError()

        if (
            is_blank(dto.title)
            and is_blank(dto.author)
            and is_blank(dto.isbn)
            and dto.published_date is None
        ):
            raise NoFieldSuppliedError()
    else:
        if is_blank(dto.title):
            raise MissingFieldError("Title")
        if is_blank(dto.author):
            raise MissingFieldError("Author")
        if is_blank(dto.isbn):
            raise MissingFieldError("ISBN")
        if dto.published_date is None:
            raise MissingFieldError("PublishedDate")

    # Books are stored with trimmed ISBNs, so compare trimmed
    if not is_blank(dto.isbn):
        exclude_id = book_id if is_update else None
        if stores.isbn_exists(db, dto.isbn.strip(), exclude_id=exclude_id):
            raise DuplicateISBNError()

    return True
