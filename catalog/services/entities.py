"""
Entity Descriptors

Authors, genres and books share one list/create/update/delete shape.
A descriptor holds what differs between them so a single CrudService can
serve all three.
"""

from dataclasses import dataclass

from catalog.database import Base
from catalog.models import Author, Book, Genre


@dataclass(frozen=True)
class EntityDescriptor:
    """
    Attributes:
        label: human-readable name used in logs
        model: SQLAlchemy model class
        name_field: column the in-page sort orders by
        filterable_fields: columns matched (case-insensitive substring)
            against the list query parameter of the same name
        include: relationships loaded on every read
    """

    label: str
    model: type[Base]
    name_field: str = "name"
    filterable_fields: tuple[str, ...] = ("name",)
    include: tuple[str, ...] = ()

    def column(self, field: str):
        return getattr(self.model, field)


AUTHORS = EntityDescriptor(label="Author", model=Author)

GENRES = EntityDescriptor(label="Genre", model=Genre)

BOOKS = EntityDescriptor(
    label="Book",
    model=Book,
    include=("authors", "genres"),
)
