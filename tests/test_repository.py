"""
Tests for the SQLAlchemy Repository

Exercises the store contract directly: pagination, relation directives,
not-found handling and referential rejection.
"""

import pytest
from sqlalchemy import func, select

from catalog.exceptions import NotFoundError, StoreReferentialError
from catalog.models import Author, Book, Genre, book_authors
from catalog.repositories import BookRepository, RelationDirective, Repository


def author_ids(book: Book) -> set[int]:
    return {a.id for a in book.authors}


class TestRelationDirective:
    def test_duplicates_collapse(self):
        directive = RelationDirective.replace([3, 1, 3, 1])

        assert directive.mode == "replace"
        assert directive.ids == (3, 1)

    def test_connect(self):
        assert RelationDirective.connect([]).ids == ()
        assert RelationDirective.connect([2]).mode == "connect"


class TestReads:
    def test_find_many_offset_and_count(self, db_session, make_authors):
        make_authors([f"Author {i}" for i in range(5)])
        repo = Repository(db_session, Author)

        rows = repo.find_many(offset=2, count=2)

        assert [r.name for r in rows] == ["Author 2", "Author 3"]

    def test_find_many_past_the_end(self, db_session, make_authors):
        make_authors(["A", "B"])
        repo = Repository(db_session, Author)

        assert repo.find_many(offset=10, count=5) == []

    def test_find_one_missing_returns_none(self, db_session):
        assert Repository(db_session, Author).find_one(123) is None

    def test_find_by_ids_ignores_unknown(self, db_session, sample_author):
        repo = Repository(db_session, Author)

        rows = repo.find_by_ids([sample_author.id, 999])

        assert [r.id for r in rows] == [sample_author.id]

    def test_count(self, db_session, make_authors):
        make_authors(["A", "B", "C"])

        assert Repository(db_session, Author).count() == 3


class TestWrites:
    def test_create_with_connect(self, db_session, sample_author, sample_genre):
        repo = BookRepository(db_session)

        book = repo.create(
            {"name": "Clean Code", "img": "x.jpg"},
            relations={
                "authors": RelationDirective.connect([sample_author.id]),
                "genres": RelationDirective.connect([sample_genre.id]),
            },
            include=("authors", "genres"),
        )

        assert book.id is not None
        assert author_ids(book) == {sample_author.id}
        assert [g.name for g in book.genres] == ["Programming"]

    def test_connect_keeps_existing_edges(self, db_session, sample_book, third_author):
        repo = BookRepository(db_session)

        book = repo.update(
            sample_book.id,
            {},
            relations={"authors": RelationDirective.connect([third_author.id])},
            include=("authors",),
        )

        assert len(book.authors) == 3

    def test_replace_makes_set_exact(self, db_session, sample_book, third_author):
        repo = BookRepository(db_session)

        book = repo.update(
            sample_book.id,
            {},
            relations={"authors": RelationDirective.replace([third_author.id])},
            include=("authors",),
        )

        assert author_ids(book) == {third_author.id}

    def test_update_missing_raises_not_found(self, db_session):
        with pytest.raises(NotFoundError) as exc_info:
            Repository(db_session, Author).update(42, {"name": "Nobody"})

        assert exc_info.value.entity_id == 42
        assert "Author with id 42 not found" in exc_info.value.detail

    def test_delete_missing_raises_not_found(self, db_session):
        with pytest.raises(NotFoundError):
            Repository(db_session, Genre).delete(42)

    def test_delete_returns_deleted_row(self, db_session, sample_author):
        deleted = Repository(db_session, Author).delete(sample_author.id)

        assert deleted.name == "Robert C. Martin"
        assert Repository(db_session, Author).count() == 0

    def test_unknown_relation_id_rolls_back_whole_write(self, db_session, sample_book):
        repo = BookRepository(db_session)

        with pytest.raises(StoreReferentialError):
            repo.update(
                sample_book.id,
                {"name": "Renamed"},
                relations={"authors": RelationDirective.replace([999])},
            )

        book = repo.find_one(sample_book.id, include=("authors",))
        assert book.name == "Clean Code"
        assert len(book.authors) == 2

    def test_unknown_relation_id_on_create_leaves_no_row(self, db_session):
        repo = BookRepository(db_session)

        with pytest.raises(StoreReferentialError):
            repo.create(
                {"name": "Orphan", "img": "x.jpg"},
                relations={"authors": RelationDirective.connect([999])},
            )

        assert repo.count() == 0
        edges = db_session.execute(select(func.count()).select_from(book_authors)).scalar()
        assert edges == 0
