"""
Catalog Exceptions

Typed errors raised by repositories and services. The application
registers one exception handler for CatalogError (see catalog.main), so
every failure below is turned into exactly one JSON response:

- ValidationError       -> 400  referenced author/genre ids do not exist
- NotFoundError         -> 404  update/delete target is absent
- StoreReferentialError -> 409  the database rejected a relation edge

Anything else falls through to the generic 500 handler.
"""

from collections.abc import Iterable
from typing import Any


class CatalogError(Exception):
    """Base class for errors that map to a client response."""

    status_code: int = 400
    error: str = "catalog_error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.error, "detail": self.detail}


class ValidationError(CatalogError):
    """
    A book create referenced author or genre ids that do not all exist.

    Raised before any write happens. When the existence check passed but
    the write itself was rejected (a referenced row was deleted in
    between), ``retryable`` is True.
    """

    status_code = 400
    error = "validation_error"

    def __init__(
        self,
        detail: str = "Some author or genre IDs do not exist",
        missing_author_ids: Iterable[int] = (),
        missing_genre_ids: Iterable[int] = (),
        retryable: bool = False,
    ) -> None:
        super().__init__(detail)
        self.missing_author_ids = sorted(set(missing_author_ids))
        self.missing_genre_ids = sorted(set(missing_genre_ids))
        self.retryable = retryable

    def to_dict(self) -> dict[str, Any]:
        body = super().to_dict()
        body["missing_author_ids"] = self.missing_author_ids
        body["missing_genre_ids"] = self.missing_genre_ids
        body["retryable"] = self.retryable
        return body


class NotFoundError(CatalogError):
    """The targeted row does not exist."""

    status_code = 404
    error = "not_found"

    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(f"{entity} with id {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class StoreReferentialError(CatalogError):
    """The database refused a write because of an integrity constraint."""

    status_code = 409
    error = "referential_integrity"
