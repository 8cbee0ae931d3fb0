"""
Genres Router

CRUD endpoints for genres.
Follows the same patterns as the authors router.
"""

from fastapi import APIRouter, Request, status

from catalog.config import get_settings
from catalog.dependencies import GenreService, ListParams
from catalog.schemas import (
    GenreCreate,
    GenreListResponse,
    GenreResponse,
    GenreUpdate,
)
from catalog.services.assembler import genre_record, page_of
from catalog.services.rate_limiter import limiter

settings = get_settings()

router = APIRouter(
    prefix="/genres",
    tags=["Genres"],
    responses={
        404: {"description": "Genre not found"},
    },
)


@router.get(
    "/",
    response_model=GenreListResponse,
    summary="List genres",
)
@limiter.limit(settings.rate_limit_default)
def list_genres(
    request: Request,
    query: ListParams,
    service: GenreService,
) -> dict:
    return page_of(genre_record(g) for g in service.list(query))


@router.post(
    "/",
    response_model=GenreResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new genre",
)
@limiter.limit(settings.rate_limit_write)
def create_genre(
    request: Request,
    genre_data: GenreCreate,
    service: GenreService,
) -> GenreResponse:
    return genre_record(service.create(genre_data.model_dump()))


@router.patch(
    "/{genre_id}",
    response_model=GenreResponse,
    summary="Update a genre",
)
@limiter.limit(settings.rate_limit_write)
def update_genre(
    request: Request,
    genre_id: int,
    genre_data: GenreUpdate,
    service: GenreService,
) -> GenreResponse:
    genre = service.update(genre_id, genre_data.model_dump(exclude_unset=True))
    return genre_record(genre)


@router.delete(
    "/{genre_id}",
    response_model=GenreResponse,
    summary="Delete a genre",
)
@limiter.limit(settings.rate_limit_write)
def delete_genre(
    request: Request,
    genre_id: int,
    service: GenreService,
) -> GenreResponse:
    return genre_record(service.delete(genre_id))
