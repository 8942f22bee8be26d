"""
Books Router

CRUD endpoints for the catalog. Every endpoint requires a bearer token.

Routers stay thin: they call the catalog service and shape the response.
Service failures are exceptions that main.py turns into {"message": ...}.
"""

from fastapi import APIRouter, Request, Response, status

from library_api.dependencies import BookListing, CurrentUser, DbSession
from library_api.schemas import BookDto, BookPage, BookRead, MessageResponse
from library_api.services import catalog

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        400: {"model": MessageResponse, "description": "Invalid request"},
        401: {"model": MessageResponse, "description": "Missing or invalid token"},
        404: {"model": MessageResponse, "description": "Book not found"},
    },
)


@router.get(
    "/",
    response_model=BookPage,
    summary="List books",
    description="Paged list of books ordered by title, optionally filtered by title or author.",
)
def list_books(
    db: DbSession,
    params: BookListing,
    _: CurrentUser,
) -> BookPage:
    """
    List books with paging and optional search.

    Examples:
        GET /api/v1/books/?pageNumber=1&pageSize=10
        GET /api/v1/books/?search=clean
    """
    return catalog.list_books(db, params.search, params.page_number, params.page_size)


@router.get(
    "/{book_id}",
    response_model=BookRead,
    summary="Get a book by ID",
)
def get_book(
    book_id: int,
    db: DbSession,
    _: CurrentUser,
) -> BookRead:
    """Get a single book by its ID."""
    book = catalog.get_book(db, book_id)
    return BookRead.model_validate(book)


@router.post(
    "/",
    response_model=BookRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    description="Title, author, ISBN and published date are all required. ISBNs are unique.",
)
def create_book(
    request: Request,
    response: Response,
    book_data: BookDto,
    db: DbSession,
    _: CurrentUser,
) -> BookRead:
    """
    Create a new book.

    Returns 201 Created with a Location header pointing at the new book.
    """
    book = catalog.create_book(db, book_data)
    response.headers["Location"] = str(request.url_for("get_book", book_id=book.id))
    return BookRead.model_validate(book)


@router.put(
    "/{book_id}",
    response_model=MessageResponse,
    summary="Update a book",
    description="Partial update: only the supplied fields are changed.",
)
def update_book(
    book_id: int,
    book_data: BookDto,
    db: DbSession,
    _: CurrentUser,
) -> MessageResponse:
    """
    Update an existing book.

    Uses PUT with PATCH-like semantics: blank strings and a null date
    leave the stored value untouched.
    """
    catalog.update_book(db, book_id, book_data)
    return MessageResponse(message="Book updated successfully.")


@router.delete(
    "/{book_id}",
    response_model=MessageResponse,
    summary="Delete a book",
)
def delete_book(
    book_id: int,
    db: DbSession,
    _: CurrentUser,
) -> MessageResponse:
    """Permanently delete a book."""
    catalog.delete_book(db, book_id)
    return MessageResponse(message="Book deleted successfully.")
