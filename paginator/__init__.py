"""Pagination parameters, filters, search and cursors for SQL and SurrealQL backends."""

from .models import (
    FilterOperator,
    SortDirection,
    CursorDirection,
    FilterValue,
    CursorValue,
    StringValue,
    IntValue,
    FloatValue,
    BoolValue,
    ArrayValue,
    NullValue,
    Filter,
    SearchParams,
    PaginationParams,
    PaginatorResponse,
    PaginatorResponseMeta
)
from .pagination import Cursor
from .query import Dialect
from .builders import Paginator, FilterBuilder, SearchBuilder, CursorBuilder
from .errors import (
    PaginatorError,
    InvalidPageError,
    InvalidPerPageError,
    InvalidCursorError,
    InvalidFieldNameError,
    QueryBuildError,
    QueryExecutionError,
    SerializationError
)

__version__ = "0.1.0"

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
    "Filter",
    "SearchParams",
    "PaginationParams",
    "PaginatorResponse",
    "PaginatorResponseMeta",
    "Cursor",
    "Dialect",
    "Paginator",
    "FilterBuilder",
    "SearchBuilder",
    "CursorBuilder",
    "PaginatorError",
    "InvalidPageError",
    "InvalidPerPageError",
    "InvalidCursorError",
    "InvalidFieldNameError",
    "QueryBuildError",
    "QueryExecutionError",
    "SerializationError"
]
