"""
Generic CRUD Service

One service class drives every entity. It builds list queries, calls the
repository, and leaves response shaping to the descriptor's assembler.
Author and Genre use it unchanged; Book specializes create/update in
catalog.services.books.
"""

import logging
from typing import Any, Generic, TypeVar

from catalog.database import Base
from catalog.repositories import Repository
from catalog.services.entities import EntityDescriptor
from catalog.services.query import ListQuery, build_filter, sort_page

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class CrudService(Generic[ModelT]):
    """List/get/create/update/delete for one entity."""

    def __init__(
        self,
        repository: Repository[ModelT],
        descriptor: EntityDescriptor,
    ) -> None:
        self.repository = repository
        self.descriptor = descriptor

    def list(self, query: ListQuery) -> list[ModelT]:
        """
        Fetch one page and sort it locally if asked.

        The store applies the name filter and offset/count; the sort
        only reorders the rows already fetched.
        """
        where = build_filter(
            {field: self.descriptor.column(field) for field in self.descriptor.filterable_fields},
            query,
        )
        rows = self.repository.find_many(
            where,
            offset=query.offset,
            count=query.count,
            include=self.descriptor.include,
        )
        logger.debug(
            f"Listed {len(rows)} {self.descriptor.label} rows "
            f"(page={query.page}, limit={query.limit}, name={query.name!r})"
        )
        return sort_page(rows, query.sort, self.descriptor.name_field)

    def get(self, entity_id: int) -> ModelT | None:
        return self.repository.find_one(entity_id, include=self.descriptor.include)

    def create(self, data: dict[str, Any]) -> ModelT:
        return self.repository.create(data, include=self.descriptor.include)

    def update(self, entity_id: int, data: dict[str, Any]) -> ModelT:
        # None means "not sent"; no column here is nullable
        changes = {field: value for field, value in data.items() if value is not None}
        return self.repository.update(
            entity_id, changes, include=self.descriptor.include
        )

    def delete(self, entity_id: int) -> ModelT:
        return self.repository.delete(entity_id)
