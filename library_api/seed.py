"""
Database Initialization

Creates the tables and, when asked to, fills empty tables with sample data:
- three well-known software books
- a demo user (username: admin, password: Pa$$w0rd)

Seeding is controlled by the explicit `seed` argument; the application
passes settings.seed_on_startup, the command line script passes its flag.
"""

import logging
from datetime import date

from sqlalchemy import func, select
from sqlalchemy.orm import Session, sessionmaker

from library_api.database import create_tables
from library_api.models import Book, User
from library_api.services.security import hash_password

logger = logging.getLogger(__name__)

DEMO_USERNAME = "admin"
DEMO_PASSWORD = "Pa$$w0rd"

SAMPLE_BOOKS = [
    {
        "title": "The Pragmatic Programmer",
        "author": "Andrew Hunt",
        "isbn": "978-0201616224",
        "published_date": date(1999, 10, 20),
    },
    {
        "title": "Clean Code",
        "author": "Robert C. Martin",
        "isbn": "978-0132350884",
        "published_date": date(2008, 8, 1),
    },
    {
        "title": "Domain-Driven Design",
        "author": "Eric Evans",
        "isbn": "978-0321125217",
        "published_date": date(2003, 8, 30),
    },
]


def seed_books(db: Session) -> int:
    """Insert the sample books if the books table is empty. Returns rows added."""
    if db.execute(select(func.count(Book.id))).scalar():
        return 0

    db.add_all(Book(**data) for data in SAMPLE_BOOKS)
    db.commit()
    logger.info(f"Seeded {len(SAMPLE_BOOKS)} books")
    return len(SAMPLE_BOOKS)


def seed_demo_user(db: Session) -> bool:
    """Insert the demo user if the users table is empty."""
    if db.execute(select(func.count(User.id))).scalar():
        return False

    db.add(User(username=DEMO_USERNAME, hashed_password=hash_password(DEMO_PASSWORD)))
    db.commit()
    logger.info(f"Seeded demo user '{DEMO_USERNAME}'")
    return True


def init_db(session_factory: sessionmaker, seed: bool) -> None:
    """
    Create tables and optionally seed sample data.

    Args:
        session_factory: Session factory bound to the target engine
        seed: Insert sample books and the demo user into empty tables
    """
    create_tables(bind=session_factory.kw.get("bind"))

    if not seed:
        return

    with session_factory() as db:
        seed_books(db)
        seed_demo_user(db)
