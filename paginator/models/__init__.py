"""Pydantic models for pagination requests and responses."""

from .enums import FilterOperator, SortDirection, CursorDirection
from .values import (
    FilterValue,
    CursorValue,
    StringValue,
    IntValue,
    FloatValue,
    BoolValue,
    ArrayValue,
    NullValue,
    to_filter_value,
    to_cursor_value,
    python_value
)
from .filters import Filter
from .search import SearchParams
from .params import PaginationParams
from .response import PaginatorResponse, PaginatorResponseMeta

__all__ = [
    "FilterOperator",
    "SortDirection",
    "CursorDirection",
    "FilterValue",
    "CursorValue",
    "StringValue",
    "IntValue",
    "FloatValue",
    "BoolValue",
    "ArrayValue",
    "NullValue",
    "to_filter_value",
    "to_cursor_value",
    "python_value",
    "Filter",
    "SearchParams",
    "PaginationParams",
    "PaginatorResponse",
    "PaginatorResponseMeta"
]
