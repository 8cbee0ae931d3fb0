"""
API Routers Package

Router Structure:
- authors.py: /api/v1/authors/* endpoints
- genres.py: /api/v1/genres/* endpoints
- books.py: /api/v1/books/* endpoints

Each router is imported and registered in main.py.
"""

from catalog.routers.authors import router as authors_router
from catalog.routers.books import router as books_router
from catalog.routers.genres import router as genres_router

__all__ = [
    "authors_router",
    "books_router",
    "genres_router",
]
