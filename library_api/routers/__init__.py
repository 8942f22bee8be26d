"""
API Routers Package

Router Structure:
- auth.py: /api/v1/auth/* endpoints (registration, login)
- books.py: /api/v1/books/* endpoints (catalog CRUD, bearer token required)

Each router is imported and registered in main.py.
"""

from library_api.routers.auth import router as auth_router
from library_api.routers.books import router as books_router

__all__ = [
    "auth_router",
    "books_router",
]
