"""Parameter-bound SQL built from pagination params.

Values never enter the SQL text: each one becomes a placeholder for the
target dialect (``$1`` for PostgreSQL/asyncpg, ``?`` for SQLite and MySQL
drivers, ``$p1`` variables for SurrealQL) and is returned in an argument
list. Field names are validated before they are interpolated.
"""

import logging
from typing import Any, List, NamedTuple, Optional, Tuple

from ..models.enums import FilterOperator, SortDirection
from ..models.values import ArrayValue, NullValue, python_value
from ..pagination.cursor import resolve_cursor_operator
from ..validation import validate_field_name, validate_param_fields
from .dialect import Dialect
from .render import COMPARISONS, search_pattern

logger = logging.getLogger(__name__)


class Binder:
    """Hands out placeholders and collects the values bound to them."""

    def __init__(self, dialect: Dialect, start_index: int = 1):
        self.dialect = dialect
        self.index = start_index
        self.args: List[Any] = []

    def bind(self, value: Any) -> str:
        placeholder = self.dialect.placeholder(self.index)
        self.index += 1
        self.args.append(value)
        return placeholder

    def bind_value(self, value) -> str:
        """Bind a FilterValue; NULL stays a literal."""
        if isinstance(value, NullValue):
            return "NULL"
        return self.bind(python_value(value))


class PageQueries(NamedTuple):
    """Count and data queries for one page, with their arguments."""

    count_query: Optional[str]
    count_args: List[Any]
    data_query: str
    data_args: List[Any]


def _bind_filter(flt, binder: Binder) -> str:
    field, op, value = flt.field, flt.operator, flt.value
    dialect = binder.dialect
    surreal = dialect is Dialect.SURREALQL

    if op in COMPARISONS:
        return f"{field} {COMPARISONS[op]} {binder.bind_value(value)}"
    if op is FilterOperator.IS_NULL:
        return f"{field} IS NULL"
    if op is FilterOperator.IS_NOT_NULL:
        return f"{field} IS NOT NULL"

    if op in (FilterOperator.LIKE, FilterOperator.ILIKE):
        placeholder = binder.bind_value(value)
        if surreal:
            return f"{field} ~ {placeholder}"
        if op is FilterOperator.LIKE:
            return f"{field} LIKE {placeholder}"
        if dialect.supports_ilike:
            return f"{field} ILIKE {placeholder}"
        return f"LOWER({field}) LIKE LOWER({placeholder})"

    if op in (FilterOperator.IN, FilterOperator.NOT_IN):
        negate = op is FilterOperator.NOT_IN
        items = value.items if isinstance(value, ArrayValue) else [value]
        if surreal:
            keyword = "NOT INSIDE" if negate else "INSIDE"
            return f"{field} {keyword} {binder.bind([python_value(item) for item in items])}"
        if not items:
            # Empty list: nothing is IN it, everything is NOT IN it
            return "TRUE" if negate else "FALSE"
        placeholders = ", ".join(binder.bind_value(item) for item in items)
        keyword = "NOT IN" if negate else "IN"
        return f"{field} {keyword} ({placeholders})"

    if op is FilterOperator.BETWEEN:
        if isinstance(value, ArrayValue) and len(value.items) == 2:
            low = binder.bind_value(value.items[0])
            high = binder.bind_value(value.items[1])
            if surreal:
                return f"{field} >= {low} AND {field} <= {high}"
            return f"{field} BETWEEN {low} AND {high}"
        return f"{field} = {binder.bind_value(value)}"

    keyword = "CONTAINS" if surreal else "@>"
    return f"{field} {keyword} {binder.bind_value(value)}"


def _bind_search(search, binder: Binder) -> str:
    pattern = search_pattern(search)
    dialect = binder.dialect

    conditions = []
    for field in search.fields:
        placeholder = binder.bind(pattern)
        if dialect is Dialect.SURREALQL:
            conditions.append(f"{field} ~ {placeholder}")
        elif search.case_sensitive:
            conditions.append(f"{field} LIKE {placeholder}")
        elif dialect.supports_ilike:
            conditions.append(f"{field} ILIKE {placeholder}")
        else:
            conditions.append(f"LOWER({field}) LIKE LOWER({placeholder})")

    return "(" + " OR ".join(conditions) + ")"


def build_where_clause(
    params,
    dialect: Dialect = Dialect.POSTGRES,
    start_index: int = 1
) -> Tuple[Optional[str], List[Any]]:
    """Build the bound WHERE body for filters and search.

    Args:
        params: Pagination parameters
        dialect: Target dialect, which decides placeholders and ILIKE
        start_index: Number of the first placeholder

    Returns:
        Tuple of (where_clause or None, parameters)

    Raises:
        InvalidFieldNameError: If any field name is unsafe
    """
    validate_param_fields(params)
    binder = Binder(dialect, start_index)

    conditions = [_bind_filter(flt, binder) for flt in params.filters]
    if params.has_search:
        conditions.append(_bind_search(params.search, binder))

    if not conditions:
        return None, []
    return " AND ".join(conditions), binder.args


def build_cursor_clause(
    params,
    dialect: Dialect = Dialect.POSTGRES,
    start_index: int = 1
) -> Tuple[Optional[str], List[Any]]:
    """Build the ``field <op> value`` condition for the params' cursor.

    Returns:
        Tuple of (condition or None when there is no cursor, parameters)
    """
    cursor = params.cursor
    if cursor is None:
        return None, []

    validate_field_name(cursor.field)
    binder = Binder(dialect, start_index)
    operator = resolve_cursor_operator(cursor.direction, params.sort_direction)
    return f"{cursor.field} {operator} {binder.bind_value(cursor.value)}", binder.args


def build_order_clause(params) -> str:
    """Build ORDER BY clause, empty when no sort field is set."""
    if not params.sort_by:
        return ""
    validate_field_name(params.sort_by)
    direction = "DESC" if params.sort_direction is SortDirection.DESC else "ASC"
    return f"ORDER BY {params.sort_by} {direction}"


def build_page_queries(
    base_query: str,
    params,
    dialect: Dialect = Dialect.POSTGRES
) -> PageQueries:
    """Wrap ``base_query`` into a count query and a page query.

    The base query is used as a subquery, so it may carry its own WHERE,
    joins or a leading WITH. The count query sees filters and search but
    not the cursor; it is None when ``disable_total_count`` is set. In cursor mode
    and in count-suppressed mode the page query asks for one extra row so
    the caller can tell whether a next page exists.
    """
    base_query = base_query.strip().rstrip(";")
    source = f"FROM ({base_query}) AS _base"

    where_clause, where_args = build_where_clause(params, dialect)
    cursor_clause, cursor_args = build_cursor_clause(params, dialect, 1 + len(where_args))

    count_query = None
    count_args: List[Any] = []
    if not params.disable_total_count:
        count_query = f"SELECT COUNT(*) {source}"
        if where_clause:
            count_query += f" WHERE {where_clause}"
        count_args = list(where_args)

    conditions = [c for c in (where_clause, cursor_clause) if c]
    data_query = f"SELECT * {source}"
    if conditions:
        data_query += " WHERE " + " AND ".join(conditions)

    order_clause = build_order_clause(params)
    if order_clause:
        data_query += f" {order_clause}"

    binder = Binder(dialect, 1 + len(where_args) + len(cursor_args))
    if params.cursor is not None:
        data_query += f" LIMIT {binder.bind(params.limit() + 1)}"
    elif params.disable_total_count:
        data_query += f" LIMIT {binder.bind(params.limit() + 1)} OFFSET {binder.bind(params.offset())}"
    else:
        data_query += f" LIMIT {binder.bind(params.limit())} OFFSET {binder.bind(params.offset())}"

    logger.debug(f"Built page query: {data_query}")
    return PageQueries(count_query, count_args, data_query, where_args + cursor_args + binder.args)
