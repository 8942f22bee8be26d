"""
Authentication Service

Handles user registration and login.

Security Features:
=================
1. Passwords are hashed with bcrypt before storage
2. Unknown usernames and wrong passwords fail with the same error
3. Plain text passwords and tokens are never logged
4. The unique index on users.username settles concurrent registrations
"""

import logging

from jose import JWTError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from library_api import stores
from library_api.exceptions import (
    DuplicateUsernameError,
    InternalError,
    InvalidCredentialsError,
    ValidationError,
)
from library_api.models import User
from library_api.services.security import (
    create_access_token,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)


def register(db: Session, username: str, password: str) -> User:
    """
    Register a new user.

    1. Rejects empty usernames or passwords
    2. Checks for a duplicate username
    3. Hashes the password with bcrypt
    4. Persists and returns the user

    Args:
        db: Database session
        username: Requested login name (surrounding whitespace is stripped)
        password: Plain text password

    Returns:
        The persisted User

    Raises:
        ValidationError: username or password empty
        DuplicateUsernameError: username already taken
        InternalError: the database write failed
    """
    username = (username or "").strip()
    if not username or not password or not password.strip():
        raise ValidationError("Username and password are required.")

    if stores.username_exists(db, username):
        raise DuplicateUsernameError()

    user = User(username=username, hashed_password=hash_password(password))

    try:
        stores.add_user(db, user)
    except IntegrityError:
        # Another request registered the same username after our check
        db.rollback()
        raise DuplicateUsernameError() from None
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception(f"Registration failed for '{username}'")
        raise InternalError(f"An error occurred while registering the user: {exc}") from exc

    logger.info(f"New user registered: {user.username}")
    return user


def login(db: Session, username: str, password: str) -> str:
    """
    Verify credentials and issue an access token.

    Args:
        db: Database session
        username: Login name
        password: Plain text password

    Returns:
        Encoded JWT access token

    Raises:
        InvalidCredentialsError: empty input, unknown user or wrong password
        InternalError: the lookup or token signing failed
    """
    if not username or not username.strip() or not password or not password.strip():
        raise InvalidCredentialsError()

    try:
        user = stores.get_user_by_username(db, username)
    except SQLAlchemyError as exc:
        logger.exception("User lookup failed during login")
        raise InternalError(f"An error occurred while logging in: {exc}") from exc

    if user is None or not verify_password(password, user.hashed_password):
        logger.warning(f"Login failed for username '{username}'")
        raise InvalidCredentialsError()

    try:
        token = create_access_token(user.username, user.id)
    except JWTError as exc:
        logger.exception("Token signing failed during login")
        raise InternalError(f"An error occurred while logging in: {exc}") from exc

    logger.info(f"User logged in: {user.username}")
    return token
