"""
Persistence Helpers

Thin query functions over the users and books tables. Services call these
instead of building SQLAlchemy statements inline, which keeps the
validation and orchestration logic readable.

None of these functions catch database errors; the calling service decides
how a failure is reported.
"""

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from library_api.models import Book, User


# =============================================================================
# Users
# =============================================================================
def get_user_by_username(db: Session, username: str) -> User | None:
    stmt = select(User).where(User.username == username)
    return db.execute(stmt).scalar_one_or_none()


def get_user_by_id(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)


def username_exists(db: Session, username: str) -> bool:
    stmt = select(User.id).where(User.username == username).limit(1)
    return db.execute(stmt).first() is not None


def add_user(db: Session, user: User) -> User:
    """Insert a user, commit and reload generated columns."""
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


# =============================================================================
# Books
# =============================================================================
def get_book(db: Session, book_id: int) -> Book | None:
    return db.get(Book, book_id)


def isbn_exists(db: Session, isbn: str, exclude_id: int | None = None) -> bool:
    """
    Check whether a book already holds an ISBN.

    Args:
        db: Database session
        isbn: ISBN to look for (exact match)
        exclude_id: Book to ignore, used when a book keeps its own ISBN

    Returns:
        True if another book has this ISBN
    """
    stmt = select(Book.id).where(Book.isbn == isbn)
    if exclude_id is not None:
        stmt = stmt.where(Book.id != exclude_id)
    return db.execute(stmt.limit(1)).first() is not None


def search_books(
    db: Session,
    search: str | None,
    offset: int,
    limit: int,
) -> tuple[int, list[Book]]:
    """
    Filter, count and page the books table.

    The search term is a case-insensitive substring match against the
    title OR the author. Results are ordered by title, then by id so
    books with equal titles keep insertion order.

    Returns:
        Tuple of (total matching books, books on the requested page)
    """
    base_stmt = select(Book)

    if search:
        # autoescape: "%" and "_" in the term are matched literally
        search_term = search.lower()
        base_stmt = base_stmt.where(
            or_(
                func.lower(Book.title).contains(search_term, autoescape=True),
                func.lower(Book.author).contains(search_term, autoescape=True),
            )
        )

    count_stmt = select(func.count()).select_from(base_stmt.subquery())
    total = db.execute(count_stmt).scalar() or 0

    stmt = (
        base_stmt
        .order_by(Book.title.asc(), Book.id.asc())
        .offset(offset)
        .limit(limit)
    )
    books = list(db.execute(stmt).scalars().all())

    return total, books


def add_book(db: Session, book: Book) -> Book:
    """Insert a book, commit and reload generated columns."""
    db.add(book)
    db.commit()
    db.refresh(book)
    return book


def save(db: Session, obj) -> None:
    """Commit pending changes to an already persisted object."""
    db.commit()
    db.refresh(obj)


def delete_book(db: Session, book: Book) -> None:
    db.delete(book)
    db.commit()
