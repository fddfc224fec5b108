"""Literal predicate rendering for every supported dialect.

These renderers interpolate values as escaped literals and field names
verbatim. Use them only with trusted field names; prefer
:mod:`paginator.query.bound` wherever the driver supports bind parameters.
"""

from typing import Iterable, Optional

from ..models.enums import FilterOperator
from ..models.values import ArrayValue, StringValue
from .dialect import Dialect

COMPARISONS = {
    FilterOperator.EQ: "=",
    FilterOperator.NE: "!=",
    FilterOperator.GT: ">",
    FilterOperator.LT: "<",
    FilterOperator.GTE: ">=",
    FilterOperator.LTE: "<=",
}


def string_literal(text: str, dialect: Dialect = Dialect.POSTGRES) -> str:
    """Quote ``text`` as a string literal.

    SQL doubles single quotes; SurrealQL uses backslash escapes.
    """
    if dialect is Dialect.SURREALQL:
        return "'" + text.replace("\\", "\\\\").replace("'", "\\'") + "'"
    return "'" + text.replace("'", "''") + "'"


def render_value(value, dialect: Dialect = Dialect.POSTGRES) -> str:
    """Render a FilterValue as a literal."""
    if isinstance(value, StringValue):
        return string_literal(value.value, dialect)
    if dialect is Dialect.SURREALQL and isinstance(value, ArrayValue):
        return "[" + ", ".join(render_value(item, dialect) for item in value.items) + "]"
    return value.to_sql_string()


def _list_literal(value, dialect: Dialect) -> str:
    if isinstance(value, ArrayValue):
        return render_value(value, dialect)
    return render_value(ArrayValue([value]), dialect)


def _case_insensitive_like(field: str, pattern: str, dialect: Dialect) -> str:
    if dialect.supports_ilike:
        return f"{field} ILIKE {pattern}"
    return f"LOWER({field}) LIKE LOWER({pattern})"


def render_filter(flt, dialect: Dialect) -> str:
    """Render a single Filter as a predicate fragment."""
    field, op, value = flt.field, flt.operator, flt.value

    if op in COMPARISONS:
        return f"{field} {COMPARISONS[op]} {render_value(value, dialect)}"
    if op is FilterOperator.IS_NULL:
        return f"{field} IS NULL"
    if op is FilterOperator.IS_NOT_NULL:
        return f"{field} IS NOT NULL"

    if op is FilterOperator.BETWEEN:
        if isinstance(value, ArrayValue) and len(value.items) == 2:
            low = render_value(value.items[0], dialect)
            high = render_value(value.items[1], dialect)
            if dialect is Dialect.SURREALQL:
                return f"{field} >= {low} AND {field} <= {high}"
            return f"{field} BETWEEN {low} AND {high}"
        return f"{field} = {render_value(value, dialect)}"

    if dialect is Dialect.SURREALQL:
        if op in (FilterOperator.LIKE, FilterOperator.ILIKE):
            return f"{field} ~ {render_value(value, dialect)}"
        if op is FilterOperator.IN:
            return f"{field} INSIDE {_list_literal(value, dialect)}"
        if op is FilterOperator.NOT_IN:
            return f"{field} NOT INSIDE {_list_literal(value, dialect)}"
        return f"{field} CONTAINS {render_value(value, dialect)}"

    if op is FilterOperator.LIKE:
        return f"{field} LIKE {render_value(value, dialect)}"
    if op is FilterOperator.ILIKE:
        return _case_insensitive_like(field, render_value(value, dialect), dialect)
    if op is FilterOperator.IN:
        return f"{field} IN {_list_literal(value, dialect)}"
    if op is FilterOperator.NOT_IN:
        return f"{field} NOT IN {_list_literal(value, dialect)}"
    # CONTAINS: PostgreSQL array/JSON containment
    return f"{field} @> {render_value(value, dialect)}"


def search_pattern(search) -> str:
    """Raw match pattern for a search: verbatim or wrapped in ``%``."""
    return search.query if search.exact_match else f"%{search.query}%"


def render_search(search, dialect: Dialect) -> str:
    """Render a SearchParams as a parenthesised OR-group.

    Precondition: ``search.fields`` is non-empty, otherwise the result is
    the vacuous ``()``.
    """
    pattern = string_literal(search_pattern(search), dialect)

    conditions = []
    for field in search.fields:
        if dialect is Dialect.SURREALQL:
            conditions.append(f"{field} ~ {pattern}")
        elif search.case_sensitive:
            conditions.append(f"{field} LIKE {pattern}")
        else:
            conditions.append(_case_insensitive_like(field, pattern, dialect))

    return "(" + " OR ".join(conditions) + ")"


def render_where(filters: Iterable, search, dialect: Dialect) -> Optional[str]:
    """Join filter fragments, then the search fragment, with ``AND``.

    Returns None when there is nothing to render. A search without
    fields counts as absent.
    """
    conditions = [render_filter(flt, dialect) for flt in filters]

    if search is not None and search.fields:
        conditions.append(render_search(search, dialect))

    if not conditions:
        return None
    return " AND ".join(conditions)
