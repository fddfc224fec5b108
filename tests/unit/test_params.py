"""Tests for PaginationParams."""

from unittest.mock import patch

import pytest

from paginator.config import Settings
from paginator.models import Filter, FilterOperator, PaginationParams, SearchParams, SortDirection
from paginator.pagination import Cursor
from paginator.query import Dialect


class TestClamping:
    """Test page and per_page clamping."""

    def test_defaults(self):
        """Test default params."""
        params = PaginationParams()

        assert params.page == 1
        assert params.per_page == 20
        assert params.sort_by is None
        assert params.sort_direction is None
        assert params.filters == []
        assert params.search is None
        assert params.disable_total_count is False
        assert params.cursor is None

    @pytest.mark.parametrize("page,expected", [(0, 1), (-5, 1), (1, 1), (7, 7)])
    def test_page_clamped(self, page, expected):
        """Test page is raised to at least 1."""
        assert PaginationParams(page=page).page == expected

    @pytest.mark.parametrize("per_page,expected", [(0, 1), (-1, 1), (1, 1), (50, 50), (100, 100), (1000, 100)])
    def test_per_page_clamped(self, per_page, expected):
        """Test per_page is clamped to [1, 100]."""
        assert PaginationParams.new(1, per_page).per_page == expected

    def test_assignment_clamped(self):
        """Test clamping also applies on assignment."""
        params = PaginationParams()
        params.page = 0
        params.per_page = 500

        assert params.page == 1
        assert params.per_page == 100

    def test_validated_input_clamped(self):
        """Test values from parsed input are clamped."""
        params = PaginationParams.model_validate({"page": "0", "per_page": "250"})

        assert params.page == 1
        assert params.per_page == 100


class TestOffsetLimit:
    """Test offset and limit arithmetic."""

    def test_offset(self):
        """Test offset is (page - 1) * per_page."""
        assert PaginationParams.new(3, 10).offset() == 20
        assert PaginationParams.new(1, 10).offset() == 0

    def test_limit(self):
        """Test limit equals per_page."""
        assert PaginationParams.new(3, 10).limit() == 10


class TestModifiers:
    """Test copy-returning modifiers."""

    def test_with_sort_and_direction(self):
        """Test sort modifiers."""
        params = PaginationParams().with_sort("created_at").with_direction(SortDirection.DESC)

        assert params.sort_by == "created_at"
        assert params.sort_direction is SortDirection.DESC

    def test_with_filter_appends(self):
        """Test filters keep insertion order."""
        first = Filter("a", FilterOperator.EQ, 1)
        second = Filter("b", FilterOperator.EQ, 2)

        params = PaginationParams().with_filter(first).with_filters([second])

        assert params.filters == [first, second]

    def test_original_untouched(self):
        """Test modifiers do not mutate the receiver."""
        params = PaginationParams()
        params.with_filter(Filter("a", FilterOperator.EQ, 1)).without_total_count()

        assert params.filters == []
        assert params.disable_total_count is False

    def test_with_cursor_and_search(self):
        """Test attaching a cursor and a search."""
        cursor = Cursor.after("id", 5)
        search = SearchParams.new("x", ["name"])

        params = PaginationParams().with_cursor(cursor).with_search(search)

        assert params.cursor == cursor
        assert params.search == search
        assert params.has_search is True


class TestWhereRendering:
    """Test WHERE rendering of combined filters and search."""

    def test_no_predicates(self):
        """Test params without filters or search render nothing."""
        assert PaginationParams().to_sql_where() is None
        assert PaginationParams().to_surrealql_where() is None

    def test_filters_then_search(self, filtered_params):
        """Test filters come first, joined with AND, then the search group."""
        assert filtered_params.to_sql_where() == (
            "status = 'active' AND age > 18 AND (name ILIKE '%john%' OR email ILIKE '%john%')"
        )

    def test_surrealql(self, filtered_params):
        """Test SurrealQL rendering of the same params."""
        assert filtered_params.to_surrealql_where() == (
            "status = 'active' AND age > 18 AND (name ~ '%john%' OR email ~ '%john%')"
        )

    def test_search_without_fields_ignored(self):
        """Test a search with no fields adds no condition."""
        params = PaginationParams(
            filters=[Filter("a", FilterOperator.EQ, 1)],
            search=SearchParams.new("x", [])
        )

        assert params.to_sql_where() == "a = 1"
        assert params.has_search is False

    def test_to_where_by_name(self):
        """Test the dialect can be given by name."""
        params = PaginationParams(filters=[Filter("name", FilterOperator.ILIKE, "%a%")])

        assert params.to_where("sqlite") == "LOWER(name) LIKE LOWER('%a%')"
        assert params.to_where(Dialect.POSTGRES) == "name ILIKE '%a%'"

    def test_to_where_uses_configured_dialect(self):
        """Test the configured dialect is the default."""
        params = PaginationParams(filters=[Filter("name", FilterOperator.ILIKE, "%a%")])

        with patch("paginator.models.params.get_settings", return_value=Settings(sql_dialect="mysql")):
            assert params.to_where() == "LOWER(name) LIKE LOWER('%a%')"

    def test_unknown_dialect(self):
        """Test unknown dialect names are rejected."""
        with pytest.raises(ValueError):
            PaginationParams().to_where("oracle")
