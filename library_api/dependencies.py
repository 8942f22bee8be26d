"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

- Database sessions (per-request)
- Bearer token authentication
- Book listing parameters (search + paging)
"""

import logging
from typing import Annotated

from fastapi import Depends, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from library_api import stores
from library_api.config import get_settings
from library_api.database import get_db
from library_api.exceptions import UnauthorizedError
from library_api.models import User
from library_api.services.security import decode_access_token

logger = logging.getLogger(__name__)
settings = get_settings()

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
# Instead of writing:
#   def list_books(db: Session = Depends(get_db)):
#
# You can write:
#   def list_books(db: DbSession):

DbSession = Annotated[Session, Depends(get_db)]


# =============================================================================
# Book Listing Parameters
# =============================================================================
class BookListParams:
    """
    Search and paging parameters for GET /books/.

    Range checks are left to the catalog service so that a bad page
    number produces the same {"message": ...} error as every other
    validation failure.

    Usage:
        GET /api/v1/books/?search=clean&pageNumber=2&pageSize=5
    """

    def __init__(
        self,
        search: str | None = Query(
            default=None,
            max_length=100,
            description="Substring matched against title or author",
            examples=["clean", "evans"],
        ),
        page_number: int = Query(
            default=1,
            alias="pageNumber",
            description="Page number (1-indexed)",
            examples=[1, 2],
        ),
        page_size: int = Query(
            default=settings.default_page_size,
            alias="pageSize",
            description=f"Number of items per page (max {settings.max_page_size})",
            examples=[10, 25],
        ),
    ) -> None:
        self.search = search
        self.page_number = page_number
        self.page_size = page_size


BookListing = Annotated[BookListParams, Depends()]


# =============================================================================
# JWT Authentication
# =============================================================================
# HTTPBearer extracts the token from "Authorization: Bearer <token>" and adds
# the "Authorize" button to Swagger UI. auto_error is off so a missing header
# goes through the same 401 {"message": ...} path as an invalid token.

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    db: DbSession,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> User:
    """
    Resolve the authenticated user from the bearer token.

    1. Requires an Authorization: Bearer header
    2. Decodes the JWT (signature, issuer, audience, expiry)
    3. Loads the user named by the "id" claim

    Raises:
        UnauthorizedError: missing/invalid token or unknown user
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Not authenticated")

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise UnauthorizedError()

    user_id = payload.get("id")
    if user_id is None or not str(user_id).isdigit():
        raise UnauthorizedError()

    user = stores.get_user_by_id(db, int(user_id))
    if user is None or user.username != payload.get("sub"):
        logger.warning(f"Token for unknown user id {user_id}")
        raise UnauthorizedError()

    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
