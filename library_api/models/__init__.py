"""
SQLAlchemy Models Package

This package contains the database models for the Library API.

- User: registered accounts (username + password digest)
- Book: catalog records (title, author, ISBN, published date)

Import all models here to:
1. Make them available as: from library_api.models import Book, User
2. Ensure Alembic discovers them for migrations
"""

from library_api.models.book import Book
from library_api.models.user import User

__all__ = [
    "Book",
    "User",
]
