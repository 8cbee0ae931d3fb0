"""
Repositories Package

Persistence layer: the only code that talks to the SQLAlchemy session.
Services receive repositories and never build queries themselves.
"""

from catalog.repositories.base import RelationDirective, RelationTable, Repository
from catalog.repositories.books import BookRepository

__all__ = [
    "Repository",
    "RelationDirective",
    "RelationTable",
    "BookRepository",
]
