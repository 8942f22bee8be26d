"""
Application Exceptions

Services raise these exceptions; handlers registered in main.py turn them
into JSON responses of the form {"message": "..."}.

Each exception carries the HTTP status code it maps to, so routers don't
need to translate service failures themselves.
"""

from fastapi import status


class LibraryError(Exception):
    """Base exception for all Library API errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


# =============================================================================
# 400 Bad Request
# =============================================================================
class ValidationError(LibraryError):
    """Input was missing or invalid."""

    status_code = status.HTTP_400_BAD_REQUEST


class MissingFieldError(ValidationError):
    """A field required to create a book was not supplied."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} is required.")


class InvalidIdError(ValidationError):
    def __init__(self, message: str = "Invalid book id."):
        super().__init__(message)


class NoFieldSuppliedError(ValidationError):
    def __init__(self):
        super().__init__("No valid field supplied for update")


class DuplicateISBNError(ValidationError):
    def __init__(self):
        super().__init__("A book with the same ISBN already exists.")


class InvalidPageError(ValidationError):
    """Paging parameters were out of range."""


class DuplicateUsernameError(ValidationError):
    def __init__(self):
        super().__init__("User with the specified username already exists.")


# =============================================================================
# 401 Unauthorized
# =============================================================================
class InvalidCredentialsError(LibraryError):
    """
    Login failed.

    Unknown usernames and wrong passwords raise the same error with the
    same message, so callers cannot probe which usernames exist.
    """

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self):
        super().__init__("Authentication failed. Invalid username or password.")


class UnauthorizedError(LibraryError):
    """Bearer token missing, invalid or expired."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Could not validate credentials"):
        super().__init__(message)


# =============================================================================
# 404 Not Found
# =============================================================================
class NotFoundError(LibraryError):
    status_code = status.HTTP_404_NOT_FOUND


class BookNotFoundError(NotFoundError):
    def __init__(self):
        super().__init__("Book not found.")


# =============================================================================
# 500 Internal Server Error
# =============================================================================
class InternalError(LibraryError):
    """Unexpected persistence or signing failure."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
