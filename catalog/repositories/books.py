"""
Book Repository

Books are the only entity that owns edges. This repository tells the
generic Repository which association table backs each relation.
"""

from sqlalchemy.orm import Session

from catalog.models import Book, book_authors, book_genres
from catalog.repositories.base import RelationTable, Repository


class BookRepository(Repository[Book]):
    relation_tables = {
        "authors": RelationTable(book_authors, "book_id", "author_id"),
        "genres": RelationTable(book_genres, "book_id", "genre_id"),
    }

    def __init__(self, session: Session) -> None:
        super().__init__(session, Book)
