"""
Response Assembler

Shapes repository rows into outward records. Books carry their authors
and genres as full nested objects; authors and genres are flat. Nothing
here filters or reorders.
"""

from collections.abc import Iterable

from pydantic import BaseModel

from catalog.models import Author, Book, Genre
from catalog.schemas import (
    AuthorResponse,
    BookResponse,
    BookSummary,
    GenreResponse,
)


def author_record(author: Author) -> AuthorResponse:
    return AuthorResponse.model_validate(author)


def genre_record(genre: Genre) -> GenreResponse:
    return GenreResponse.model_validate(genre)


def book_record(book: Book) -> BookResponse:
    """Book with every edge resolved to a nested author/genre object."""
    return BookResponse.model_validate(book)


def book_summary(book: Book) -> BookSummary:
    """Book without relations, used for the record returned by delete."""
    return BookSummary.model_validate(book)


def page_of(records: Iterable[BaseModel]) -> dict[str, list[BaseModel]]:
    """Wrap records as the list payload ``{"data": [...]}``."""
    return {"data": list(records)}
