"""
Security Service

Handles password hashing and JWT token operations.

Security Features:
==================
1. Password hashing with bcrypt (passlib)
2. Signed, time-limited access tokens (python-jose, HS256)
3. Issuer, audience and expiry checked on every decode, with no clock skew

Usage:
    from library_api.services.security import hash_password, verify_password

    hashed = hash_password("SecurePass123")
    is_valid = verify_password("SecurePass123", hashed)
"""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext

from library_api.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

# -------------------------------------------------------------------------
# Password Hashing Configuration
# -------------------------------------------------------------------------
# - schemes: bcrypt is the only accepted scheme
# - deprecated: "auto" means old hashes are automatically upgraded
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """
    Hash a plain text password using bcrypt.

    Example:
        >>> hashed = hash_password("SecurePass123")
        >>> hashed.startswith("$2b$")
        True
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Uses constant-time comparison to prevent timing attacks.

    Args:
        plain_password: The password to verify
        hashed_password: The stored bcrypt hash

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


# -------------------------------------------------------------------------
# JWT Token Configuration
# -------------------------------------------------------------------------

def create_access_token(
    username: str,
    user_id: int,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a signed JWT access token for a user.

    Claims:
    - sub: the username
    - id: the user id, as a string
    - iss / aud: configured issuer and audience
    - iat / exp: issue time and expiry

    Args:
        username: Username placed in the subject claim
        user_id: Primary key of the user
        expires_delta: Optional custom lifetime (defaults to settings)

    Returns:
        Encoded JWT token string

    Example:
        >>> token = create_access_token("admin", 1)
        >>> token.count(".") == 2  # JWT format: header.payload.signature
        True
    """
    issued_at = datetime.now(UTC)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    to_encode = {
        "sub": username,
        "id": str(user_id),
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
        "iat": issued_at,
        "exp": issued_at + expires_delta,
    }

    return jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_access_token(token: str) -> dict | None:
    """
    Decode and validate a JWT access token.

    Checks the signature, issuer, audience and expiry.

    Args:
        token: The JWT token string

    Returns:
        Decoded payload if valid, None if invalid or expired

    Example:
        >>> token = create_access_token("admin", 1)
        >>> decode_access_token(token)["sub"]
        'admin'
    """
    try:
        return jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
            options={"leeway": 0},
        )
    except JWTError as e:
        logger.warning(f"JWT decode error: {e}")
        return None
