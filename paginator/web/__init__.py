"""FastAPI integration: query parsing, dependency and response helpers."""

from .parser import parse_scalar, parse_filter, parse_sort_direction, parse_search
from .query import pagination_params, Pagination
from .response import (
    pagination_headers,
    create_link_header,
    apply_pagination_headers,
    paginated_response
)

__all__ = [
    "parse_scalar",
    "parse_filter",
    "parse_sort_direction",
    "parse_search",
    "pagination_params",
    "Pagination",
    "pagination_headers",
    "create_link_header",
    "apply_pagination_headers",
    "paginated_response"
]
