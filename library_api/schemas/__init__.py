"""
Pydantic Schemas Package

Request/response models, kept separate from the SQLAlchemy models so the
API controls exactly what is exposed (password digests never leave the
database layer).
"""

from pydantic import BaseModel, Field

from library_api.schemas.book import BookDto, BookPage, BookRead
from library_api.schemas.user import TokenResponse, UserCredentials, UserRead, UserRegister


class MessageResponse(BaseModel):
    """Plain status message, used for successful updates/deletes and all errors."""

    message: str = Field(..., examples=["Book updated successfully."])


__all__ = [
    # Book schemas
    "BookDto",
    "BookRead",
    "BookPage",
    # User schemas
    "UserCredentials",
    "UserRegister",
    "UserRead",
    "TokenResponse",
    # Shared
    "MessageResponse",
]
