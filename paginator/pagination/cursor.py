"""Opaque cursor tokens for cursor-based pagination."""

import base64
import binascii
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors.problem_details import InvalidCursorError
from ..models.enums import CursorDirection, SortDirection
from ..models.values import CursorValue, python_value, to_cursor_value

logger = logging.getLogger(__name__)


class Cursor(BaseModel):
    """Bookmark of a position in an ordered result set.

    ``field`` is the column the result set is ordered by and ``value`` the
    boundary value in that column; ``direction`` says whether the wanted
    page lies after or before it.
    """

    model_config = ConfigDict(frozen=True)

    field: str = Field(description="Column the cursor is positioned on")
    value: CursorValue = Field(description="Boundary value in that column")
    direction: CursorDirection = Field(default=CursorDirection.AFTER)

    @field_validator("value", mode="before")
    @classmethod
    def wrap_raw_value(cls, v):
        """Accept plain strings, UUIDs and numbers."""
        if isinstance(v, dict):
            return v
        try:
            return to_cursor_value(v)
        except TypeError as e:
            raise ValueError(str(e))

    @classmethod
    def new(cls, field: str, value: Any, direction: CursorDirection) -> "Cursor":
        return cls(field=field, value=value, direction=direction)

    @classmethod
    def after(cls, field: str, value: Any) -> "Cursor":
        return cls(field=field, value=value, direction=CursorDirection.AFTER)

    @classmethod
    def before(cls, field: str, value: Any) -> "Cursor":
        return cls(field=field, value=value, direction=CursorDirection.BEFORE)

    def encode(self) -> str:
        """Encode as base64 (standard alphabet, padded) of the JSON form."""
        return encode_cursor(self)

    @classmethod
    def decode(cls, token: str) -> "Cursor":
        """Inverse of :meth:`encode`.

        Raises:
            InvalidCursorError: If the token is not valid base64, UTF-8,
                JSON or does not describe a cursor
        """
        return decode_cursor(token)


def encode_cursor(cursor: Cursor) -> str:
    """Encode a cursor as an opaque token.

    Args:
        cursor: The cursor to encode

    Returns:
        Base64 encoded cursor string
    """
    cursor_json = cursor.model_dump_json()
    return base64.b64encode(cursor_json.encode("utf-8")).decode("ascii")


def decode_cursor(token: str) -> Cursor:
    """Decode an opaque cursor token.

    Args:
        token: Base64 encoded cursor string

    Returns:
        Decoded cursor

    Raises:
        InvalidCursorError: If the token is invalid or malformed
    """
    if not token:
        raise InvalidCursorError("Empty cursor provided")

    try:
        cursor_bytes = base64.b64decode(token, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidCursorError(f"Invalid cursor encoding: {e}")

    try:
        cursor_json = cursor_bytes.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidCursorError(f"Invalid cursor text: {e}")

    try:
        return Cursor.model_validate_json(cursor_json)
    except ValidationError as e:
        logger.debug(f"Rejected cursor payload: {cursor_json!r}")
        raise InvalidCursorError(f"Invalid cursor format: {e.errors()[0]['msg']}")


def resolve_cursor_operator(
    direction: CursorDirection,
    sort_direction: Optional[SortDirection] = None
) -> str:
    """Comparison operator that selects rows on the cursor's side.

    An unset sort direction counts as ascending.

    ======== ========== ========
    cursor   sort       operator
    ======== ========== ========
    after    asc / None ``>``
    after    desc       ``<``
    before   asc / None ``<``
    before   desc       ``>``
    ======== ========== ========
    """
    descending = sort_direction is SortDirection.DESC
    if direction is CursorDirection.AFTER:
        return "<" if descending else ">"
    return ">" if descending else "<"


def cursor_value_of(cursor: Cursor) -> Any:
    """Plain Python value of the cursor boundary, for parameter binding."""
    return python_value(cursor.value)


def cursor_from_row(
    row: Mapping[str, Any],
    field: str,
    direction: CursorDirection
) -> Optional[str]:
    """Build an encoded cursor pointing at ``row[field]``.

    Returns None when the row lacks the field or holds a value that
    cannot be carried by a cursor (e.g. NULL).
    """
    value = row.get(field)
    if value is None:
        return None
    try:
        return Cursor(field=field, value=value, direction=direction).encode()
    except ValidationError:
        logger.debug(f"Cannot build cursor from {type(value).__name__} value in '{field}'")
        return None


def paginate_query_results(
    items: List[Dict[str, Any]],
    limit: int,
    cursor_field: Optional[str] = None,
    had_cursor: bool = False
) -> Tuple[List[Dict[str, Any]], Optional[str], Optional[str], bool]:
    """Process an over-fetched result set for cursor pagination.

    Args:
        items: Rows from a query that asked for ``limit + 1`` rows
        limit: Requested page size
        cursor_field: Column cursors are built from
        had_cursor: Whether the request itself carried a cursor

    Returns:
        Tuple of (page_items, next_cursor, prev_cursor, has_next)
    """
    has_next = len(items) > limit
    page_items = items[:limit]

    next_cursor = None
    prev_cursor = None
    if cursor_field and page_items:
        if has_next:
            next_cursor = cursor_from_row(page_items[-1], cursor_field, CursorDirection.AFTER)
        if had_cursor:
            prev_cursor = cursor_from_row(page_items[0], cursor_field, CursorDirection.BEFORE)

    return page_items, next_cursor, prev_cursor, has_next
