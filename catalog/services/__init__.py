"""
Services Package

Business logic, separate from HTTP handling (routers) and from
persistence (repositories):

- query.py: list query builder (filter predicate, offset/count, in-page sort)
- crud.py: generic list/get/create/update/delete over an entity descriptor
- books.py: book create/update with author/genre edge synchronization
- entities.py: descriptors for authors, genres and books
- assembler.py: repository rows -> outward records
- rate_limiter.py: slowapi limiter and 429 handler
"""
