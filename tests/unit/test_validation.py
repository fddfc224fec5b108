"""Tests for field-name and params validation."""

import pytest

from paginator.errors import InvalidFieldNameError, InvalidPageError, InvalidPerPageError
from paginator.models import Filter, FilterOperator, PaginationParams, SearchParams
from paginator.pagination import Cursor
from paginator.validation import validate_field_name, validate_param_fields, validate_params


def _unclamped(page: int, per_page: int) -> PaginationParams:
    return PaginationParams.model_construct(
        page=page, per_page=per_page, filters=[], sort_by=None, sort_direction=None,
        search=None, cursor=None, disable_total_count=False
    )


class TestValidateFieldName:
    """Test field name validation."""

    @pytest.mark.parametrize("field", ["id", "created_at", "users.email", "Col9"])
    def test_valid(self, field):
        """Test letters, digits, underscores and dots pass."""
        assert validate_field_name(field) == field

    @pytest.mark.parametrize("field,bad", [
        ("name; DROP TABLE users", ";"),
        ("name--", "-"),
        ("a b", " "),
        ("na'me", "'"),
        ("naïve", "ï"),
    ])
    def test_invalid(self, field, bad):
        """Test the first offending character is reported."""
        with pytest.raises(InvalidFieldNameError) as exc_info:
            validate_field_name(field)

        assert exc_info.value.detail == f"Invalid field name '{field}': contains unsafe character '{bad}'"
        assert exc_info.value.status == 400

    def test_empty(self):
        """Test empty names are rejected."""
        with pytest.raises(InvalidFieldNameError):
            validate_field_name("")


class TestValidateParams:
    """Test page validation of constructed params."""

    def test_valid(self):
        """Test clamped params pass."""
        params = PaginationParams.new(1, 100)
        assert validate_params(params) is params

    def test_page_zero(self):
        """Test page 0 is rejected."""
        with pytest.raises(InvalidPageError) as exc_info:
            validate_params(_unclamped(0, 10))

        assert exc_info.value.page == 0

    @pytest.mark.parametrize("per_page", [0, 101])
    def test_per_page_out_of_range(self, per_page):
        """Test per_page outside [1, 100] is rejected."""
        with pytest.raises(InvalidPerPageError) as exc_info:
            validate_params(_unclamped(1, per_page))

        assert exc_info.value.detail == f"Invalid per_page value: {per_page}. Must be between 1 and 100"


class TestValidateParamFields:
    """Test validation of every field a params object names."""

    @pytest.mark.parametrize("params", [
        PaginationParams(filters=[Filter("bad field", FilterOperator.EQ, 1)]),
        PaginationParams(search=SearchParams.new("x", ["ok", "bad-field"])),
        PaginationParams(sort_by="bad)"),
        PaginationParams(cursor=Cursor.after("bad'", 1)),
    ])
    def test_each_location_checked(self, params):
        """Test filters, search fields, sort and cursor are all checked."""
        with pytest.raises(InvalidFieldNameError):
            validate_param_fields(params)

    def test_valid(self, filtered_params):
        """Test valid params pass through."""
        assert validate_param_fields(filtered_params) is filtered_params
