"""
Book Catalog Application Package

Authors, genres and books behind a FastAPI service.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine, session factory and get_db dependency
- exceptions.py: Typed errors mapped to HTTP responses in main.py
- main.py: FastAPI application factory and exception handlers
- dependencies.py: List parameters and service injection
- models/: SQLAlchemy ORM models and association tables
- schemas/: Pydantic request/response schemas
- repositories/: Persistence (create/find/update/delete with relation directives)
- services/: Query building, generic CRUD, book relation handling, assembly
- routers/: API route handlers
"""

__version__ = "1.0.0"
