"""Apply pagination params to SQLAlchemy Core selects.

Values travel as bound parameters and case-insensitive matching follows
SQLAlchemy's ``ilike()``, which compiles to ``ILIKE`` on PostgreSQL and to
``lower(x) LIKE lower(y)`` elsewhere.
"""

from typing import Any, Mapping

from sqlalchemy import ColumnElement, Select, and_, func, or_, select

from ..errors.problem_details import InvalidFieldNameError
from ..models.enums import FilterOperator, SortDirection
from ..models.filters import Filter
from ..models.params import PaginationParams
from ..models.values import ArrayValue, python_value
from ..pagination.cursor import resolve_cursor_operator
from ..query.render import search_pattern
from ..validation import validate_params


def _column(columns: Mapping[str, Any], name: str):
    try:
        return columns[name]
    except KeyError:
        raise InvalidFieldNameError(f"Unknown field '{name}'", field=name)


def filter_to_clause(column, filter: Filter) -> ColumnElement:
    """Translate one Filter into a SQLAlchemy boolean clause on ``column``."""
    op = filter.operator
    value = python_value(filter.value)

    if op is FilterOperator.EQ:
        return column == value
    if op is FilterOperator.NE:
        return column != value
    if op is FilterOperator.GT:
        return column > value
    if op is FilterOperator.LT:
        return column < value
    if op is FilterOperator.GTE:
        return column >= value
    if op is FilterOperator.LTE:
        return column <= value
    if op is FilterOperator.LIKE:
        return column.like(value)
    if op is FilterOperator.ILIKE:
        return column.ilike(value)
    if op in (FilterOperator.IN, FilterOperator.NOT_IN):
        values = value if isinstance(filter.value, ArrayValue) else [value]
        return column.in_(values) if op is FilterOperator.IN else column.not_in(values)
    if op is FilterOperator.IS_NULL:
        return column.is_(None)
    if op is FilterOperator.IS_NOT_NULL:
        return column.is_not(None)
    if op is FilterOperator.BETWEEN:
        if isinstance(filter.value, ArrayValue) and len(value) == 2:
            return column.between(value[0], value[1])
        return column == value
    # CONTAINS: containment as the column type defines it (ARRAY/JSONB use @>)
    return column.contains(value)


def apply_filters(stmt: Select, params: PaginationParams, columns: Mapping[str, Any]) -> Select:
    """Add filter and search conditions, without cursor, order or window."""
    conditions = [filter_to_clause(_column(columns, flt.field), flt) for flt in params.filters]

    if params.has_search:
        search = params.search
        pattern = search_pattern(search)
        matches = []
        for field in search.fields:
            column = _column(columns, field)
            matches.append(column.like(pattern) if search.case_sensitive else column.ilike(pattern))
        conditions.append(or_(*matches))

    if conditions:
        stmt = stmt.where(and_(*conditions))
    return stmt


def apply_pagination(stmt: Select, params: PaginationParams, columns: Mapping[str, Any]) -> Select:
    """Turn ``stmt`` into the select for one page.

    Args:
        stmt: Base select
        params: Pagination parameters
        columns: Name-to-column mapping, typically ``table.c``

    Returns:
        Select with conditions, cursor, ordering and the row window.
        Cursor mode and count-suppressed mode fetch one extra row.

    Raises:
        InvalidFieldNameError: If a field has no column in ``columns``
    """
    validate_params(params)
    stmt = apply_filters(stmt, params, columns)

    cursor = params.cursor
    if cursor is not None:
        column = _column(columns, cursor.field)
        boundary = python_value(cursor.value)
        if resolve_cursor_operator(cursor.direction, params.sort_direction) == ">":
            stmt = stmt.where(column > boundary)
        else:
            stmt = stmt.where(column < boundary)

    if params.sort_by:
        column = _column(columns, params.sort_by)
        stmt = stmt.order_by(column.desc() if params.sort_direction is SortDirection.DESC else column.asc())

    if cursor is not None:
        return stmt.limit(params.limit() + 1)
    if params.disable_total_count:
        return stmt.limit(params.limit() + 1).offset(params.offset())
    return stmt.limit(params.limit()).offset(params.offset())


def count_query(stmt: Select) -> Select:
    """Wrap a select so that it returns its row count."""
    inner = stmt.order_by(None).limit(None).offset(None).subquery()
    return select(func.count()).select_from(inner)
