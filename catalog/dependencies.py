"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

Here they provide:
- the per-request database session
- list query parameters parsed into a ListQuery
- services wired to repositories on that session

Routes never build repositories themselves, so tests can swap any layer
through app.dependency_overrides.
"""

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from catalog.config import get_settings
from catalog.database import get_db
from catalog.models import Author, Genre
from catalog.repositories import BookRepository, Repository
from catalog.services.books import BookService
from catalog.services.crud import CrudService
from catalog.services.entities import AUTHORS, GENRES
from catalog.services.query import ListQuery, SortOrder

settings = get_settings()

# Instead of writing:
#   def list_authors(db: Session = Depends(get_db)):
# you can write:
#   def list_authors(db: DbSession):
DbSession = Annotated[Session, Depends(get_db)]


# =============================================================================
# List Parameters
# =============================================================================
def get_list_query(
    page: int = Query(
        default=1,
        ge=1,
        description="Page number (1-indexed)",
        examples=[1, 2],
    ),
    limit: int = Query(
        default=settings.default_page_size,
        ge=1,
        description="Rows per page",
        examples=[10, 25],
    ),
    sort: SortOrder | None = Query(
        default=None,
        description="Order the returned page by name ascending (name) or descending (-name)",
    ),
    name: str | None = Query(
        default=None,
        max_length=255,
        description="Case-insensitive substring match on name",
        examples=["clean"],
    ),
) -> ListQuery:
    """
    Common list parameters for authors, genres and books.

        GET /api/v1/books/?page=2&limit=5&sort=-name&name=code
    """
    return ListQuery(page=page, limit=limit, sort=sort, name=name)


ListParams = Annotated[ListQuery, Depends(get_list_query)]


# =============================================================================
# Services
# =============================================================================
def get_author_service(db: DbSession) -> CrudService[Author]:
    return CrudService(Repository(db, Author), AUTHORS)


def get_genre_service(db: DbSession) -> CrudService[Genre]:
    return CrudService(Repository(db, Genre), GENRES)


def get_book_service(db: DbSession) -> BookService:
    return BookService(
        BookRepository(db),
        Repository(db, Author),
        Repository(db, Genre),
    )


AuthorService = Annotated[CrudService[Author], Depends(get_author_service)]
GenreService = Annotated[CrudService[Genre], Depends(get_genre_service)]
BookServiceDep = Annotated[BookService, Depends(get_book_service)]
