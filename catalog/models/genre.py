"""
Genre Model

Represents a book genre/category in the catalog.

A book can belong to multiple genres (e.g., "Programming" and "Software Design").
"""

from typing import TYPE_CHECKING, List

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.database import Base

if TYPE_CHECKING:
    from catalog.models.book import Book


class Genre(Base):
    """
    Genre model representing book categories.

    Table: genres

    Relationships:
    - books: Many-to-Many relationship through book_genres table
    """

    __tablename__ = "genres"

    id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(
        String(100),
        index=True,
        nullable=False,
        comment="Genre name (e.g., 'Programming', 'Mystery')"
    )

    # Many-to-many relationship with Book through book_genres table
    books: Mapped[List["Book"]] = relationship(
        "Book",
        secondary="book_genres",
        back_populates="genres",
    )

    def __repr__(self) -> str:
        return f"Genre(id={self.id}, name='{self.name}')"
