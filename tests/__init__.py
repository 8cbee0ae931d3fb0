"""
Test Suite for the Book Catalog API

Test Organization:
- conftest.py: Shared fixtures (per-test SQLite database, client, sample data)
- test_query.py: List query builder (offset/count, filters, in-page sort)
- test_repository.py: Repository writes, relation directives, integrity errors
- test_authors.py / test_genres.py / test_books.py: HTTP endpoints
- test_app.py: Health, root, generic error handling, settings

Running Tests:
    pytest
    pytest tests/test_books.py -v
"""
