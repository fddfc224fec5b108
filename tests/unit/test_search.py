"""Tests for SearchParams."""

from paginator.models import SearchParams
from paginator.query import Dialect


class TestSearchParams:
    """Test search rendering and modifiers."""

    def test_defaults(self):
        """Test a new search is a case-insensitive substring match."""
        search = SearchParams.new("john", ["name", "email"])

        assert search.query == "john"
        assert search.fields == ["name", "email"]
        assert search.case_sensitive is False
        assert search.exact_match is False
        assert search.is_empty is False

    def test_to_sql_where(self):
        """Test fields are OR-ed inside parentheses."""
        search = SearchParams.new("john", ["name", "email"])
        assert search.to_sql_where() == "(name ILIKE '%john%' OR email ILIKE '%john%')"

    def test_case_sensitive(self):
        """Test case-sensitive search uses LIKE."""
        search = SearchParams.new("John", ["name"]).with_case_sensitive()
        assert search.to_sql_where() == "(name LIKE '%John%')"

    def test_exact_match(self):
        """Test exact search uses the query without wildcards."""
        search = SearchParams.new("john", ["name"]).with_exact_match(True)
        assert search.to_sql_where() == "(name ILIKE 'john')"

    def test_modifiers_return_copies(self):
        """Test modifiers leave the original untouched."""
        search = SearchParams.new("john", ["name"])
        search.with_exact_match().with_case_sensitive()
        assert search.exact_match is False
        assert search.case_sensitive is False

    def test_surrealql(self):
        """Test SurrealQL search uses the fuzzy match operator."""
        search = SearchParams.new("john", ["name", "email"])
        assert search.to_surrealql_where() == "(name ~ '%john%' OR email ~ '%john%')"

    def test_sqlite_lowercases(self):
        """Test SQLite case-insensitive search uses LOWER()."""
        search = SearchParams.new("John", ["name"])
        assert search.render(Dialect.SQLITE) == "(LOWER(name) LIKE LOWER('%John%'))"

    def test_quotes_in_query(self):
        """Test quotes in the query are escaped."""
        search = SearchParams.new("O'Brien", ["name"])
        assert search.to_sql_where() == "(name ILIKE '%O''Brien%')"
        assert search.to_surrealql_where() == "(name ~ '%O\\'Brien%')"

    def test_no_fields(self):
        """Test a search without fields is empty."""
        search = SearchParams.new("john", [])
        assert search.is_empty is True
        assert search.to_sql_where() == "()"
