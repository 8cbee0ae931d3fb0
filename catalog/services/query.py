"""
List Query Builder

Turns the page/limit/sort/name request parameters into:

- a filter predicate (case-insensitive substring match on the name field)
- an offset/count pair for the store

Filtering and pagination run in the database over the whole table.
Sorting does NOT: it reorders only the page that came back. Asking for
page 2 sorted by name gives the rows the store placed on page 2, in name
order, not the second slice of a globally sorted list.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from sqlalchemy import and_
from sqlalchemy.sql.expression import ColumnElement

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


class SortOrder(str, Enum):
    """Accepted values of the ``sort`` query parameter."""

    NAME_ASC = "name"
    NAME_DESC = "-name"


@dataclass(frozen=True)
class ListQuery:
    """
    Parsed list parameters.

    Attributes:
        page: 1-based page number
        limit: rows per page
        sort: optional in-page ordering by name
        name: optional substring filter on name
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    sort: SortOrder | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("page must be >= 1")
        if self.limit < 1:
            raise ValueError("limit must be >= 1")

    @property
    def offset(self) -> int:
        """
        Number of rows to skip.

        Page 1 → skip 0 rows
        Page 2 → skip limit rows
        """
        return (self.page - 1) * self.limit

    @property
    def count(self) -> int:
        return self.limit


def build_name_filter(column, term: str | None) -> ColumnElement[bool] | None:
    """
    Case-insensitive "contains" predicate on ``column``.

    Returns None when there is nothing to filter on, meaning "all rows".
    LIKE wildcards in ``term`` are escaped, so "50%" matches literally.
    """
    if not term:
        return None
    return column.icontains(term, autoescape=True)


def build_filter(columns: Mapping[str, object], query: ListQuery) -> ColumnElement[bool] | None:
    """
    Combine one contains-filter per filterable column.

    ``columns`` maps a ListQuery attribute to the column it filters;
    attributes that are unset are skipped. None means "all rows".
    """
    clauses = [
        clause
        for field, column in columns.items()
        if (clause := build_name_filter(column, getattr(query, field, None))) is not None
    ]
    if not clauses:
        return None
    return and_(*clauses)


def sort_page(
    rows: Sequence[T],
    sort: SortOrder | None,
    field: str = "name",
) -> list[T]:
    """
    Reorder one fetched page by ``field``.

    Names compare case-insensitively (casefolded). The sort is stable, so
    rows whose names compare equal keep their store order. With no
    ``sort`` the page is returned as is.
    """
    if sort is None:
        return list(rows)
    return sorted(
        rows,
        key=lambda row: getattr(row, field).casefold(),
        reverse=sort is SortOrder.NAME_DESC,
    )
