"""
Book Pydantic Schemas

The most involved schemas, handling:
- Author/genre id lists on writes (accepted as authorIds/genreIds)
- Nested author and genre objects on reads
- The flat record returned when a book is deleted
"""

from pydantic import BaseModel, ConfigDict, Field

from catalog.schemas.author import AuthorResponse
from catalog.schemas.genre import GenreResponse


class BookBase(BaseModel):
    """Base schema with shared book fields."""

    name: str = Field(
        ...,
        max_length=500,
        description="Book title",
        examples=["Clean Code", "Refactoring"],
    )

    img: str = Field(
        ...,
        max_length=1000,
        description="Cover image reference",
        examples=["https://example.com/image.jpg"],
    )


class BookCreate(BookBase):
    """
    Schema for creating a new book.

    Every id must reference an existing author/genre, otherwise the
    request fails with 400 and no book is created.

    Example request body:
    {
        "name": "Clean Code",
        "img": "https://example.com/image.jpg",
        "authorIds": [1, 2],
        "genreIds": [1, 3]
    }
    """

    author_ids: list[int] = Field(
        default_factory=list,
        alias="authorIds",
        description="Author IDs to connect to the new book",
        examples=[[1, 2]],
    )

    genre_ids: list[int] = Field(
        default_factory=list,
        alias="genreIds",
        description="Genre IDs to connect to the new book",
        examples=[[1, 3]],
    )

    model_config = ConfigDict(populate_by_name=True)


class BookUpdate(BaseModel):
    """
    Schema for updating an existing book.

    name and img are optional (omitted means unchanged). authorIds and
    genreIds are authoritative: the book's edge sets become exactly the
    lists sent, and an omitted list means an empty set.
    """

    name: str | None = Field(
        default=None,
        max_length=500,
        description="Book title",
    )

    img: str | None = Field(
        default=None,
        max_length=1000,
        description="Cover image reference",
    )

    author_ids: list[int] = Field(
        default_factory=list,
        alias="authorIds",
        description="Author IDs (replaces existing)",
    )

    genre_ids: list[int] = Field(
        default_factory=list,
        alias="genreIds",
        description="Genre IDs (replaces existing)",
    )

    model_config = ConfigDict(populate_by_name=True)


class BookSummary(BookBase):
    """Flat book record without relations."""

    id: int = Field(..., description="Unique identifier")

    model_config = ConfigDict(from_attributes=True)


class BookResponse(BookSummary):
    """
    Schema for book reads.

    Authors and genres are returned as full objects, not ids, so clients
    need no follow-up requests.
    """

    authors: list[AuthorResponse] = Field(
        default=[],
        description="List of authors",
    )

    genres: list[GenreResponse] = Field(
        default=[],
        description="List of genres",
    )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Clean Code",
                "img": "https://example.com/image.jpg",
                "authors": [
                    {"id": 1, "name": "Robert C. Martin", "year": 1952}
                ],
                "genres": [
                    {"id": 1, "name": "Programming"}
                ],
            }
        },
    )


class BookListResponse(BaseModel):
    """One page of books, each with nested authors and genres."""

    data: list[BookResponse] = Field(
        ...,
        description="Books on the requested page",
    )
