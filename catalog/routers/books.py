"""
Books Router

CRUD endpoints for books.

Book reads always include the full author and genre objects. Creating a
book checks that every author/genre id exists before writing (400 if
not); updating replaces both id sets and lets the database reject
unknown ids (409).
"""

from fastapi import APIRouter, Request, status

from catalog.config import get_settings
from catalog.dependencies import BookServiceDep, ListParams
from catalog.schemas import (
    BookCreate,
    BookListResponse,
    BookResponse,
    BookSummary,
    BookUpdate,
)
from catalog.services.assembler import book_record, book_summary, page_of
from catalog.services.rate_limiter import limiter

settings = get_settings()

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        404: {"description": "Book not found"},
    },
)


@router.get(
    "/",
    response_model=BookListResponse,
    summary="List books",
    description="Get a page of books with nested authors and genres. "
                "sort orders only the returned page.",
)
@limiter.limit(settings.rate_limit_default)
def list_books(
    request: Request,
    query: ListParams,
    service: BookServiceDep,
) -> dict:
    """
    List books with pagination, name filter and in-page sort.

    Examples:
        GET /api/v1/books/?name=clean
        GET /api/v1/books/?page=2&limit=5&sort=name
    """
    return page_of(book_record(b) for b in service.list(query))


@router.get(
    "/{book_id}",
    response_model=BookResponse | None,
    summary="Get a book by ID",
    description="Returns the book with nested authors and genres, or null if it does not exist.",
)
@limiter.limit(settings.rate_limit_default)
def get_book(
    request: Request,
    book_id: int,
    service: BookServiceDep,
) -> BookResponse | None:
    book = service.get(book_id)
    return book_record(book) if book is not None else None


@router.post(
    "/",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    responses={400: {"description": "Some author or genre IDs do not exist"}},
)
@limiter.limit(settings.rate_limit_write)
def create_book(
    request: Request,
    book_data: BookCreate,
    service: BookServiceDep,
) -> BookResponse:
    """
    Create a new book connected to existing authors and genres.

    Raises:
        ValidationError: 400 if any author/genre id does not exist
    """
    book = service.create(
        book_data.model_dump(include={"name", "img"}),
        author_ids=book_data.author_ids,
        genre_ids=book_data.genre_ids,
    )
    return book_record(book)


@router.patch(
    "/{book_id}",
    response_model=BookResponse,
    summary="Update a book",
    description="Update name/img if sent and replace the author and genre sets "
                "with authorIds/genreIds (omitted lists clear the set).",
    responses={409: {"description": "Some author or genre IDs do not exist"}},
)
@limiter.limit(settings.rate_limit_write)
def update_book(
    request: Request,
    book_id: int,
    book_data: BookUpdate,
    service: BookServiceDep,
) -> BookResponse:
    book = service.update(
        book_id,
        book_data.model_dump(include={"name", "img"}, exclude_unset=True),
        author_ids=book_data.author_ids,
        genre_ids=book_data.genre_ids,
    )
    return book_record(book)


@router.delete(
    "/{book_id}",
    response_model=BookSummary,
    summary="Delete a book",
    description="Delete a book and return the deleted record. Its authors "
                "and genres are kept.",
)
@limiter.limit(settings.rate_limit_write)
def delete_book(
    request: Request,
    book_id: int,
    service: BookServiceDep,
) -> BookSummary:
    return book_summary(service.delete(book_id))
