"""
Book Model

The central model of the catalog.

This file also contains the association tables for many-to-many relationships:
- book_authors: Links books to authors
- book_genres: Links books to genres

WHY Association Tables?
=======================
In relational databases, many-to-many relationships require a "junction"
table holding a foreign key to each side. These edges carry no data of
their own, so they are plain Table objects rather than model classes.

The repository layer writes to these tables directly when it connects or
replaces a book's edges, which lets the database reject identifiers that
do not reference an existing author or genre.
"""

from typing import TYPE_CHECKING

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.database import Base

if TYPE_CHECKING:
    from catalog.models.author import Author
    from catalog.models.genre import Genre


# =============================================================================
# Association Tables
# =============================================================================
book_authors = Table(
    "book_authors",
    Base.metadata,
    Column(
        "book_id",
        Integer,
        ForeignKey("books.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "author_id",
        Integer,
        ForeignKey("authors.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    comment="Association table linking books to their authors",
)

book_genres = Table(
    "book_genres",
    Base.metadata,
    Column(
        "book_id",
        Integer,
        ForeignKey("books.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "genre_id",
        Integer,
        ForeignKey("genres.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    comment="Association table linking books to their genres",
)


class Book(Base):
    """
    Book model representing books in the catalog.

    Table: books

    Fields:
    - name: Book title (required)
    - img: Cover image reference, usually a URL (required)

    Relationships:
    - authors: Many-to-Many (a book can have multiple authors)
    - genres: Many-to-Many (a book can belong to multiple genres)

    Example:
        book = Book(
            name="Clean Code",
            img="https://example.com/clean-code.jpg",
        )
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Book title"
    )

    img: Mapped[str] = mapped_column(
        String(1000),
        nullable=False,
        comment="Cover image reference"
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    # back_populates creates a bidirectional relationship:
    #   book.authors  -> list of authors
    #   author.books  -> list of books
    authors: Mapped[list["Author"]] = relationship(
        "Author",
        secondary=book_authors,
        back_populates="books",
        order_by="Author.id",
    )

    genres: Mapped[list["Genre"]] = relationship(
        "Genre",
        secondary=book_genres,
        back_populates="books",
        order_by="Genre.id",
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, name='{self.name}')"
