"""
Book Service (relationship synchronization)

Books are the only records that reference others. Their author and genre
edges are handled differently on the two write paths:

Create
    1. Load the authors and genres named by authorIds/genreIds.
    2. If either count differs from the number of ids sent, raise
       ValidationError. Nothing is written.
    3. Insert the book and *connect* it to exactly those rows, in one
       transaction.

Update
    Write the scalar fields and *replace* both edge sets with the ids
    sent, in one transaction. There is no existence check first: an
    unknown id is rejected by the database's foreign keys and surfaces
    as StoreReferentialError (409), while the same mistake on create is
    a ValidationError (400).

Steps 1-2 and step 3 of create are not atomic with each other. If a
referenced author/genre is deleted in between, the write fails on the
foreign key; that failure is reported as a retryable ValidationError.
"""

import logging
from collections.abc import Sequence
from typing import Any

from catalog.models import Author, Book, Genre
from catalog.exceptions import StoreReferentialError, ValidationError
from catalog.repositories import BookRepository, RelationDirective, Repository
from catalog.services.crud import CrudService
from catalog.services.entities import BOOKS

logger = logging.getLogger(__name__)


class BookService(CrudService[Book]):
    """CRUD for books plus author/genre edge handling."""

    def __init__(
        self,
        books: BookRepository,
        authors: Repository[Author],
        genres: Repository[Genre],
    ) -> None:
        super().__init__(books, BOOKS)
        self.authors = authors
        self.genres = genres

    def create(
        self,
        data: dict[str, Any],
        author_ids: Sequence[int] = (),
        genre_ids: Sequence[int] = (),
    ) -> Book:
        """
        Create a book connected to existing authors and genres.

        Raises:
            ValidationError: some author/genre id does not exist
        """
        author_ids = list(author_ids)
        genre_ids = list(genre_ids)

        authors = self.authors.find_by_ids(author_ids)
        genres = self.genres.find_by_ids(genre_ids)

        if len(authors) != len(author_ids) or len(genres) != len(genre_ids):
            missing_authors = set(author_ids) - {a.id for a in authors}
            missing_genres = set(genre_ids) - {g.id for g in genres}
            logger.warning(
                f"Rejected book create: missing authors {sorted(missing_authors)}, "
                f"missing genres {sorted(missing_genres)}"
            )
            raise ValidationError(
                missing_author_ids=missing_authors,
                missing_genre_ids=missing_genres,
            )

        relations = {
            "authors": RelationDirective.connect(a.id for a in authors),
            "genres": RelationDirective.connect(g.id for g in genres),
        }
        try:
            return self.repository.create(
                data, relations=relations, include=self.descriptor.include
            )
        except StoreReferentialError as exc:
            # A referenced row vanished after the existence check
            raise ValidationError(
                "Some author or genre IDs no longer exist; retry the request",
                retryable=True,
            ) from exc

    def update(
        self,
        book_id: int,
        data: dict[str, Any],
        author_ids: Sequence[int] = (),
        genre_ids: Sequence[int] = (),
    ) -> Book:
        """
        Update a book and replace its author and genre sets.

        Raises:
            NotFoundError: no book has this id
            StoreReferentialError: some author/genre id does not exist
        """
        changes = {field: value for field, value in data.items() if value is not None}
        relations = {
            "authors": RelationDirective.replace(author_ids),
            "genres": RelationDirective.replace(genre_ids),
        }
        return self.repository.update(
            book_id, changes, relations=relations, include=self.descriptor.include
        )
