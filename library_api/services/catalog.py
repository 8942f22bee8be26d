"""
Catalog Service

Create, read, update and delete for books, plus paged search.

Every write goes through validate_book() first. Uniqueness races that
slip past the validator are caught when the unique index on books.isbn
rejects the commit, and reported as the same DuplicateISBNError.
"""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from library_api import stores
from library_api.config import get_settings
from library_api.exceptions import (
    BookNotFoundError,
    DuplicateISBNError,
    InternalError,
    InvalidIdError,
    InvalidPageError,
)
from library_api.models import Book
from library_api.schemas import BookDto, BookPage, BookRead
from library_api.services.validation import is_blank, validate_book

logger = logging.getLogger(__name__)
settings = get_settings()


def _persistence_error(db: Session, action: str, exc: SQLAlchemyError) -> InternalError:
    """Roll back, log and wrap an unexpected database failure."""
    db.rollback()
    logger.exception(f"Database error while {action}")
    return InternalError(f"An error occurred while {action}: {exc}")


def create_book(db: Session, dto: BookDto) -> Book:
    """
    Create a new book.

    1. Validate the payload (all fields required, ISBN unused)
    2. Trim string fields
    3. Persist and return the stored book

    Raises:
        ValidationError subclasses from validate_book()
        DuplicateISBNError: the unique index rejected the ISBN
        InternalError: the database write failed
    """
    validate_book(db, dto)

    book = Book(
        title=dto.title.strip(),
        author=dto.author.strip(),
        isbn=dto.isbn.strip(),
        published_date=dto.published_date,
    )

    try:
        stores.add_book(db, book)
    except IntegrityError:
        db.rollback()
        raise DuplicateISBNError() from None
    except SQLAlchemyError as exc:
        raise _persistence_error(db, "creating the book", exc) from exc

    logger.info(f"Book created: id={book.id} isbn='{book.isbn}'")
    return book


def list_books(
    db: Session,
    search: str | None,
    page_number: int,
    page_size: int,
) -> BookPage:
    """
    Return one page of books, optionally filtered by a search term.

    The search term is trimmed; an empty term means no filter. It
    matches title or author as a case-insensitive substring. Books are
    ordered by title. page_size is capped at settings.max_page_size.

    Args:
        db: Database session
        search: Optional search term
        page_number: 1-based page number
        page_size: Books per page

    Returns:
        BookPage with the items and the total count before paging

    Raises:
        InvalidPageError: page_number or page_size below 1
        InternalError: the query failed
    """
    if page_number <= 0:
        raise InvalidPageError("pageNumber must be greater than 0.")
    if page_size <= 0:
        raise InvalidPageError("pageSize must be greater than 0.")

    page_size = min(page_size, settings.max_page_size)
    search = search.strip() if search else None

    try:
        total, books = stores.search_books(
            db,
            search=search or None,
            offset=(page_number - 1) * page_size,
            limit=page_size,
        )
    except SQLAlchemyError as exc:
        raise _persistence_error(db, "retrieving books", exc) from exc

    return BookPage(
        items=[BookRead.model_validate(book) for book in books],
        total=total,
        page_number=page_number,
        page_size=page_size,
    )


def get_book(db: Session, book_id: int) -> Book:
    """
    Get a single book by id.

    Raises:
        InvalidIdError: book_id is not positive
        BookNotFoundError: no book with this id
        InternalError: the query failed
    """
    if book_id <= 0:
        raise InvalidIdError()

    try:
        book = stores.get_book(db, book_id)
    except SQLAlchemyError as exc:
        raise _persistence_error(db, "retrieving the book", exc) from exc

    if book is None:
        raise BookNotFoundError()

    return book


def update_book(db: Session, book_id: int, dto: BookDto) -> bool:
    """
    Partially update a book.

    Only supplied fields are applied: strings that are non-blank
    (trimmed before storing) and a non-null published date. Everything
    else keeps its current value.

    Returns:
        True once the change is committed

    Raises:
        ValidationError subclasses from validate_book()
        BookNotFoundError: no book with this id
        DuplicateISBNError: the unique index rejected the ISBN
        InternalError: the database write failed
    """
    validate_book(db, dto, is_update=True, book_id=book_id)

    try:
        book = stores.get_book(db, book_id)
    except SQLAlchemyError as exc:
        raise _persistence_error(db, "updating the book", exc) from exc

    if book is None:
        raise BookNotFoundError()

    if not is_blank(dto.title):
        book.title = dto.title.strip()
    if not is_blank(dto.author):
        book.author = dto.author.strip()
    if not is_blank(dto.isbn):
        book.isbn = dto.isbn.strip()
    if dto.published_date is not None:
        book.published_date = dto.published_date

    try:
        stores.save(db, book)
    except IntegrityError:
        db.rollback()
        raise DuplicateISBNError() from None
    except SQLAlchemyError as exc:
        raise _persistence_error(db, "updating the book", exc) from exc

    logger.info(f"Book updated: id={book_id}")
    return True


def delete_book(db: Session, book_id: int) -> bool:
    """
    Delete a book by id.

    Returns:
        True once the book is removed

    Raises:
        InvalidIdError: book_id is not positive
        BookNotFoundError: no book with this id
        InternalError: the database write failed
    """
    if book_id <= 0:
        raise InvalidIdError()

    try:
        book = stores.get_book(db, book_id)
        if book is None:
            raise BookNotFoundError()
        stores.delete_book(db, book)
    except SQLAlchemyError as exc:
        raise _persistence_error(db, "deleting the book", exc) from exc

    logger.info(f"Book deleted: id={book_id}")
    return True
