"""
Authors Router

CRUD endpoints for authors.
Listing goes through the shared list query builder; writes go straight
to the repository through the generic CrudService.
"""

from fastapi import APIRouter, Request, status

from catalog.config import get_settings
from catalog.dependencies import AuthorService, ListParams
from catalog.schemas import (
    AuthorCreate,
    AuthorListResponse,
    AuthorResponse,
    AuthorUpdate,
)
from catalog.services.assembler import author_record, page_of
from catalog.services.rate_limiter import limiter

settings = get_settings()

router = APIRouter(
    prefix="/authors",
    tags=["Authors"],
    responses={
        404: {"description": "Author not found"},
    },
)


@router.get(
    "/",
    response_model=AuthorListResponse,
    summary="List authors",
    description="Get a page of authors with optional name filter and in-page sort.",
)
@limiter.limit(settings.rate_limit_default)
def list_authors(
    request: Request,
    query: ListParams,
    service: AuthorService,
) -> dict:
    """List authors."""
    return page_of(author_record(a) for a in service.list(query))


@router.post(
    "/",
    response_model=AuthorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new author",
)
@limiter.limit(settings.rate_limit_write)
def create_author(
    request: Request,
    author_data: AuthorCreate,
    service: AuthorService,
) -> AuthorResponse:
    """Create a new author."""
    return author_record(service.create(author_data.model_dump()))


@router.patch(
    "/{author_id}",
    response_model=AuthorResponse,
    summary="Update an author",
    description="Update only the fields sent in the body.",
)
@limiter.limit(settings.rate_limit_write)
def update_author(
    request: Request,
    author_id: int,
    author_data: AuthorUpdate,
    service: AuthorService,
) -> AuthorResponse:
    """Update an existing author."""
    author = service.update(author_id, author_data.model_dump(exclude_unset=True))
    return author_record(author)


@router.delete(
    "/{author_id}",
    response_model=AuthorResponse,
    summary="Delete an author",
    description="Delete an author and return the deleted record. Books that "
                "referenced the author are kept.",
)
@limiter.limit(settings.rate_limit_write)
def delete_author(
    request: Request,
    author_id: int,
    service: AuthorService,
) -> AuthorResponse:
    """Delete an author."""
    return author_record(service.delete(author_id))
