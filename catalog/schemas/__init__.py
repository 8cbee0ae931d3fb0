"""
Pydantic Schemas Package

This package contains Pydantic models for request/response validation.

Schema Naming Convention:
- XxxBase: Shared fields between create and response
- XxxCreate: Fields required when creating a new record
- XxxUpdate: Fields allowed when updating (usually all optional)
- XxxResponse: Fields returned in API responses
- XxxListResponse: One page of records wrapped as {"data": [...]}
"""

from catalog.schemas.author import (
    AuthorBase,
    AuthorCreate,
    AuthorListResponse,
    AuthorResponse,
    AuthorUpdate,
)
from catalog.schemas.book import (
    BookBase,
    BookCreate,
    BookListResponse,
    BookResponse,
    BookSummary,
    BookUpdate,
)
from catalog.schemas.genre import (
    GenreBase,
    GenreCreate,
    GenreListResponse,
    GenreResponse,
    GenreUpdate,
)

__all__ = [
    # Author schemas
    "AuthorBase",
    "AuthorCreate",
    "AuthorUpdate",
    "AuthorResponse",
    "AuthorListResponse",
    # Genre schemas
    "GenreBase",
    "GenreCreate",
    "GenreUpdate",
    "GenreResponse",
    "GenreListResponse",
    # Book schemas
    "BookBase",
    "BookCreate",
    "BookUpdate",
    "BookSummary",
    "BookResponse",
    "BookListResponse",
]
