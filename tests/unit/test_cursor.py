"""Tests for cursor tokens."""

import base64
import json

import pytest
from pydantic import ValidationError

from paginator.errors import InvalidCursorError
from paginator.models import CursorDirection, FloatValue, IntValue, SortDirection, StringValue
from paginator.pagination import (
    Cursor,
    cursor_from_row,
    cursor_value_of,
    decode_cursor,
    encode_cursor,
    paginate_query_results,
    resolve_cursor_operator
)


def _b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


class TestCursorEncoding:
    """Test encoding and decoding of cursor tokens."""

    def test_round_trip(self):
        """Test decode inverts encode for every value kind."""
        for cursor in (
            Cursor.after("id", 12345),
            Cursor.before("name", "O'Brien"),
            Cursor.new("score", 9.75, CursorDirection.AFTER),
            Cursor.after("uuid", "550e8400-e29b-41d4-a716-446655440000"),
        ):
            assert Cursor.decode(cursor.encode()) == cursor

    def test_encoding_is_base64_json(self):
        """Test the token is standard base64 over the tagged JSON form."""
        token = encode_cursor(Cursor.after("id", 12345))
        payload = json.loads(base64.b64decode(token))

        assert payload == {
            "field": "id",
            "value": {"kind": "int", "value": 12345},
            "direction": "after"
        }

    def test_value_types(self):
        """Test raw values are wrapped in the matching variant."""
        assert Cursor.after("id", 1).value == IntValue(1)
        assert Cursor.after("id", 1.5).value == FloatValue(1.5)
        assert Cursor.after("id", "a").value == StringValue("a")

    def test_default_direction(self):
        """Test cursors point forward unless told otherwise."""
        assert Cursor(field="id", value=1).direction is CursorDirection.AFTER

    def test_bool_value_rejected(self):
        """Test booleans are not valid cursor values."""
        with pytest.raises(ValidationError):
            Cursor.after("active", True)

    def test_untagged_value_accepted(self):
        """Test tokens carrying a bare JSON value still decode."""
        token = _b64('{"field":"id","value":42,"direction":"before"}')
        cursor = decode_cursor(token)

        assert cursor.value == IntValue(42)
        assert cursor.direction is CursorDirection.BEFORE

    def test_invalid_base64(self):
        """Test a token that is not base64 is rejected."""
        with pytest.raises(InvalidCursorError) as exc_info:
            decode_cursor("not-valid-base64!!")

        assert exc_info.value.status == 400
        assert "Invalid cursor encoding" in exc_info.value.detail

    def test_not_json(self):
        """Test base64 of something other than JSON is rejected."""
        with pytest.raises(InvalidCursorError) as exc_info:
            decode_cursor(_b64("not json"))

        assert "Invalid cursor format" in exc_info.value.detail

    def test_wrong_shape(self):
        """Test JSON that does not describe a cursor is rejected."""
        with pytest.raises(InvalidCursorError):
            decode_cursor(_b64('{"field":"id"}'))
        with pytest.raises(InvalidCursorError):
            decode_cursor(_b64('{"field":"id","value":1,"direction":"sideways"}'))

    def test_not_utf8(self):
        """Test bytes that are not UTF-8 are rejected."""
        token = base64.b64encode(b"\xff\xfe\xfd").decode("ascii")
        with pytest.raises(InvalidCursorError):
            decode_cursor(token)

    def test_empty(self):
        """Test an empty token is rejected."""
        with pytest.raises(InvalidCursorError) as exc_info:
            decode_cursor("")

        assert exc_info.value.detail == "Empty cursor provided"


class TestCursorOperator:
    """Test comparison operator selection."""

    @pytest.mark.parametrize("direction,sort,expected", [
        (CursorDirection.AFTER, SortDirection.ASC, ">"),
        (CursorDirection.AFTER, SortDirection.DESC, "<"),
        (CursorDirection.AFTER, None, ">"),
        (CursorDirection.BEFORE, SortDirection.ASC, "<"),
        (CursorDirection.BEFORE, SortDirection.DESC, ">"),
        (CursorDirection.BEFORE, None, "<"),
    ])
    def test_resolve_cursor_operator(self, direction, sort, expected):
        """Test all direction and sort combinations."""
        assert resolve_cursor_operator(direction, sort) == expected


class TestCursorResults:
    """Test building cursors from result rows."""

    def test_cursor_value_of(self):
        """Test the cursor value unwraps to a plain value."""
        assert cursor_value_of(Cursor.after("id", 7)) == 7

    def test_cursor_from_row(self):
        """Test a cursor is built from the row's field."""
        token = cursor_from_row({"id": 10}, "id", CursorDirection.AFTER)
        assert decode_cursor(token) == Cursor.after("id", 10)

    def test_cursor_from_row_without_value(self):
        """Test rows without a usable value produce no cursor."""
        assert cursor_from_row({"id": None}, "id", CursorDirection.AFTER) is None
        assert cursor_from_row({}, "id", CursorDirection.AFTER) is None
        assert cursor_from_row({"id": object()}, "id", CursorDirection.AFTER) is None

    def test_paginate_query_results_with_more(self):
        """Test an over-fetched row signals a next page and is dropped."""
        rows = [{"id": i} for i in range(1, 12)]

        page, next_cursor, prev_cursor, has_next = paginate_query_results(
            rows, 10, "id", had_cursor=True
        )

        assert len(page) == 10
        assert has_next is True
        assert decode_cursor(next_cursor) == Cursor.after("id", 10)
        assert decode_cursor(prev_cursor) == Cursor.before("id", 1)

    def test_paginate_query_results_last_page(self):
        """Test the last page has no next cursor."""
        rows = [{"id": i} for i in range(1, 6)]

        page, next_cursor, prev_cursor, has_next = paginate_query_results(rows, 10, "id")

        assert len(page) == 5
        assert has_next is False
        assert next_cursor is None
        assert prev_cursor is None
