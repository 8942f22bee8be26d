"""
Authentication Router

Handles user authentication endpoints:
- Registration (username/password)
- Login (username/password → JWT access token)

Security:
=========
- Passwords are hashed with bcrypt before storage
- Plain text passwords are never logged or stored
- Both endpoints carry a strict rate limit
"""

from fastapi import APIRouter, Request, status

from library_api.config import get_settings
from library_api.dependencies import DbSession
from library_api.schemas import (
    MessageResponse,
    TokenResponse,
    UserCredentials,
    UserRead,
    UserRegister,
)
from library_api.services import auth as auth_service
from library_api.services.rate_limiter import limiter

settings = get_settings()

router = APIRouter(
    prefix="/auth",
    tags=["Authentication"],
    responses={
        400: {"model": MessageResponse, "description": "Bad request"},
        401: {"model": MessageResponse, "description": "Unauthorized"},
    },
)


@router.post(
    "/register",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description="Create a new account. Usernames must be unique.",
)
@limiter.limit(settings.rate_limit_auth)
def register(
    request: Request,
    credentials: UserRegister,
    db: DbSession,
) -> UserRead:
    """
    Register a new user with username and password.

    Returns the new user's id and username (never the password digest).
    """
    user = auth_service.register(db, credentials.username, credentials.password)
    return UserRead.model_validate(user)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login with username and password",
    description="""
    Authenticate with username and password to receive a JWT access token.

    **Usage:**
    Include the token in the Authorization header:
    ```
    Authorization: Bearer <token>
    ```
    """,
)
@limiter.limit(settings.rate_limit_auth)
def login(
    request: Request,
    credentials: UserCredentials,
    db: DbSession,
) -> TokenResponse:
    """Authenticate a user and return a signed access token."""
    token = auth_service.login(db, credentials.username, credentials.password)

    return TokenResponse(
        token=token,
        token_type="bearer",
        expires_in=settings.access_token_expire_minutes * 60,
    )
