"""
SQLAlchemy Models Package

This package contains all database models for the catalog.

Model Relationships:
- Author <-> Book: Many-to-Many (an author can write many books,
                   a book can have multiple authors)
- Genre <-> Book: Many-to-Many (a book can belong to multiple genres,
                  a genre contains many books)

Import all models here so Alembic discovers them for migrations.
"""

# The order matters for SQLAlchemy to resolve relationships
from catalog.models.author import Author
from catalog.models.genre import Genre
from catalog.models.book import Book, book_authors, book_genres

__all__ = [
    "Author",
    "Genre",
    "Book",
    "book_authors",
    "book_genres",
]
