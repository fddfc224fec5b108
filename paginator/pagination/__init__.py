"""Cursor tokens for cursor-based pagination."""

from .cursor import (
    Cursor,
    encode_cursor,
    decode_cursor,
    resolve_cursor_operator,
    cursor_value_of,
    cursor_from_row,
    paginate_query_results
)

__all__ = [
    "Cursor",
    "encode_cursor",
    "decode_cursor",
    "resolve_cursor_operator",
    "cursor_value_of",
    "cursor_from_row",
    "paginate_query_results"
]
