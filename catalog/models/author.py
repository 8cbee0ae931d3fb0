"""
Author Model

Represents an author in the catalog.

SQLAlchemy 2.0 Features Used:
- mapped_column(): New way to define columns with full type support
- Mapped[]: Type hint wrapper for SQLAlchemy columns
- relationship(): Define relationships between models
- back_populates: Two-way relationship binding
"""

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.database import Base

# TYPE_CHECKING is True only during type checking (mypy, IDE)
# This prevents circular imports at runtime while enabling type hints
if TYPE_CHECKING:
    from catalog.models.book import Book


class Author(Base):
    """
    Author model representing writers in the catalog.

    Table: authors

    Relationships:
    - books: Many-to-Many relationship through book_authors table

    Deleting an author removes its rows from book_authors but never
    deletes the books themselves.

    Example:
        author = Author(name="Robert C. Martin", year=1952)
        db.add(author)
        db.commit()
    """

    __tablename__ = "authors"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    id: Mapped[int] = mapped_column(primary_key=True)

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    # index=True because list requests filter on name
    name: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
        comment="Author's full name"
    )

    year: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Author's birth year"
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    # With this relationship, you can do:
    #   author.books  # Get all books by this author
    books: Mapped[list["Book"]] = relationship(
        "Book",
        secondary="book_authors",
        back_populates="authors",
    )

    def __repr__(self) -> str:
        return f"Author(id={self.id}, name='{self.name}', year={self.year})"
