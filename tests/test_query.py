"""
Tests for the List Query Builder

Pure unit tests: no database or HTTP involved.
"""

from types import SimpleNamespace

import pytest
from sqlalchemy.dialects import sqlite

from catalog.models import Author
from catalog.services.query import (
    ListQuery,
    SortOrder,
    build_filter,
    build_name_filter,
    sort_page,
)


def rows(*names: str) -> list[SimpleNamespace]:
    return [SimpleNamespace(id=i, name=name) for i, name in enumerate(names, start=1)]


class TestListQuery:
    """Tests for offset/count calculation."""

    def test_defaults(self):
        query = ListQuery()

        assert query.page == 1
        assert query.limit == 10
        assert query.offset == 0
        assert query.count == 10

    @pytest.mark.parametrize(
        "page,limit,offset",
        [(1, 10, 0), (2, 10, 10), (3, 5, 10), (7, 1, 6)],
    )
    def test_offset_is_page_minus_one_times_limit(self, page, limit, offset):
        query = ListQuery(page=page, limit=limit)

        assert query.offset == offset
        assert query.count == limit

    def test_page_below_one_rejected(self):
        with pytest.raises(ValueError):
            ListQuery(page=0)

    def test_limit_below_one_rejected(self):
        with pytest.raises(ValueError):
            ListQuery(limit=0)


class TestNameFilter:
    """Tests for the case-insensitive contains predicate."""

    def test_no_term_means_no_filter(self):
        assert build_name_filter(Author.name, None) is None
        assert build_name_filter(Author.name, "") is None

    def test_filter_is_case_insensitive_contains(self):
        clause = build_name_filter(Author.name, "clean")
        sql = str(clause.compile(dialect=sqlite.dialect()))

        assert "lower(authors.name)" in sql
        assert "LIKE" in sql

    def test_build_filter_skips_unset_fields(self):
        assert build_filter({"name": Author.name}, ListQuery()) is None

    def test_build_filter_uses_query_attribute(self):
        clause = build_filter({"name": Author.name}, ListQuery(name="Mart"))

        assert clause is not None
        assert "authors.name" in str(clause.compile(dialect=sqlite.dialect()))


class TestSortPage:
    """Tests for in-page sorting."""

    def test_no_sort_keeps_store_order(self):
        page = rows("Delta", "Alpha", "Charlie")

        assert [r.name for r in sort_page(page, None)] == ["Delta", "Alpha", "Charlie"]

    def test_ascending(self):
        page = rows("Delta", "Alpha", "Charlie")

        result = sort_page(page, SortOrder.NAME_ASC)

        assert [r.name for r in result] == ["Alpha", "Charlie", "Delta"]

    def test_descending(self):
        page = rows("Delta", "Alpha", "Charlie")

        result = sort_page(page, SortOrder.NAME_DESC)

        assert [r.name for r in result] == ["Delta", "Charlie", "Alpha"]

    def test_sort_ignores_case(self):
        page = rows("Mango", "Zeta", "apple")

        assert [r.name for r in sort_page(page, SortOrder.NAME_ASC)] == ["apple", "Mango", "Zeta"]
        assert [r.name for r in sort_page(page, SortOrder.NAME_DESC)] == ["Zeta", "Mango", "apple"]

    def test_names_differing_only_in_case_keep_store_order(self):
        page = rows("beta", "Beta", "alpha")

        result = sort_page(page, SortOrder.NAME_ASC)

        assert [r.id for r in result] == [3, 1, 2]

    def test_sort_is_stable_for_equal_names(self):
        page = rows("Same", "Other", "Same")

        result = sort_page(page, SortOrder.NAME_ASC)

        assert [r.id for r in result] == [2, 1, 3]

    def test_sort_value_parses_from_query_string(self):
        assert SortOrder("name") is SortOrder.NAME_ASC
        assert SortOrder("-name") is SortOrder.NAME_DESC
