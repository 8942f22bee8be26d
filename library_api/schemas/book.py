"""
Book Pydantic Schemas

- BookDto: write model used by create and update (every field optional,
  required-field rules live in the catalog validator so clients get
  field-specific messages)
- BookRead: read model returned by the API (identity + book fields)
- BookPage: one page of a book listing

On the wire all fields are camelCase (publishedDate, pageNumber, ...).
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BookDto(BaseModel):
    """
    Schema for creating or updating a book.

    Create requires every field. Update applies only the fields that
    are supplied; blank strings and a null date count as not supplied.

    Example request body:
    {
        "title": "Clean Code",
        "author": "Robert C. Martin",
        "isbn": "978-0132350884",
        "publishedDate": "2008-08-01"
    }
    """

    title: str | None = Field(
        default=None,
        max_length=500,
        description="Book title",
        examples=["Clean Code"],
    )

    author: str | None = Field(
        default=None,
        max_length=255,
        description="Author name",
        examples=["Robert C. Martin"],
    )

    isbn: str | None = Field(
        default=None,
        max_length=32,
        description="International Standard Book Number (unique)",
        examples=["978-0132350884"],
    )

    published_date: date | None = Field(
        default=None,
        description="Date of publication",
        examples=["2008-08-01"],
    )

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BookRead(BaseModel):
    """
    Schema for book responses.

    Deliberately not a subclass of BookDto: the read model always has
    every field populated, plus the identity.
    """

    id: int = Field(..., description="Unique identifier")
    title: str = Field(..., description="Book title")
    author: str = Field(..., description="Author name")
    isbn: str = Field(..., description="International Standard Book Number")
    published_date: date = Field(..., description="Date of publication")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 2,
                "title": "Clean Code",
                "author": "Robert C. Martin",
                "isbn": "978-0132350884",
                "publishedDate": "2008-08-01",
            }
        },
    )


class BookPage(BaseModel):
    """
    Schema for paginated book list responses.

    - items: Books on the requested page
    - total: Number of books matching the search, before paging
    - page_number / page_size: Echo of the request parameters
    """

    items: list[BookRead] = Field(..., description="Books on this page")
    total: int = Field(..., ge=0, description="Total number of matching books")
    page_number: int = Field(..., ge=1, description="Current page number")
    page_size: int = Field(..., ge=1, description="Number of items per page")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "items": [],
                "total": 3,
                "pageNumber": 1,
                "pageSize": 10,
            }
        },
    )
