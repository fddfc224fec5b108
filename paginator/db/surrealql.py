"""SurrealQL query construction for SurrealDB.

Only query text is built here; running it is left to the SurrealDB client.
"""

import logging
import re
from typing import List, Optional, Tuple

from ..errors.problem_details import QueryBuildError
from ..models.params import PaginationParams
from ..pagination.cursor import resolve_cursor_operator
from ..query.bound import build_order_clause
from ..query.dialect import Dialect
from ..query.render import render_value
from ..validation import validate_field_name, validate_param_fields, validate_params

logger = logging.getLogger(__name__)

_FROM = re.compile(r"\bFROM\b", re.IGNORECASE)
_WHERE = re.compile(r"\sWHERE\s", re.IGNORECASE)


def _append_condition(query: str, condition: str) -> str:
    match = _WHERE.search(query)
    if match is None:
        return f"{query} WHERE {condition}"
    # Keep an OR in the existing clause from escaping the added condition
    return f"{query[:match.end()]}({query[match.end():]}) AND ({condition})"


def build_surrealql_queries(
    base_query: str,
    params: PaginationParams
) -> Tuple[Optional[str], str]:
    """Build the count and data queries for one page.

    Conditions are appended to ``base_query`` with WHERE, or with AND if
    it already has a WHERE clause. Values are inlined as literals.

    Args:
        base_query: ``SELECT ... FROM ...`` statement
        params: Pagination parameters

    Returns:
        Tuple of (count_query or None when the count is disabled, data_query)

    Raises:
        QueryBuildError: If the base query is not a SELECT with a FROM
        InvalidFieldNameError: If a field name is unsafe
    """
    validate_params(params)
    validate_param_fields(params)

    base_query = base_query.strip().rstrip(";")
    if not base_query.upper().startswith("SELECT"):
        raise QueryBuildError("Query must start with SELECT")
    from_match = _FROM.search(base_query)
    if from_match is None:
        raise QueryBuildError("Invalid query: missing FROM clause")

    where_clause = params.to_surrealql_where()

    count_query = None
    if not params.disable_total_count:
        count_query = f"SELECT count() {base_query[from_match.start():]}"
        if where_clause:
            count_query = _append_condition(count_query, where_clause)
        count_query += " GROUP ALL"

    conditions = [where_clause] if where_clause else []
    cursor = params.cursor
    if cursor is not None:
        operator = resolve_cursor_operator(cursor.direction, params.sort_direction)
        value = render_value(cursor.value, Dialect.SURREALQL)
        conditions.append(f"{cursor.field} {operator} {value}")

    data_query = base_query
    if conditions:
        data_query = _append_condition(data_query, " AND ".join(conditions))

    order_clause = build_order_clause(params)
    if order_clause:
        data_query += f" {order_clause}"

    if cursor is not None:
        data_query += f" LIMIT {params.limit() + 1}"
    elif params.disable_total_count:
        data_query += f" LIMIT {params.limit() + 1} START {params.offset()}"
    else:
        data_query += f" LIMIT {params.limit()} START {params.offset()}"

    logger.debug(f"Built SurrealQL query: {data_query}")
    return count_query, data_query


def table_queries(
    table: str,
    params: PaginationParams,
    where: Optional[str] = None
) -> Tuple[Optional[str], str]:
    """Count and data queries paging through every record of ``table``.

    ``where`` is a trusted SurrealQL condition inlined as given.

    Raises:
        InvalidFieldNameError: If the table name is unsafe
    """
    validate_field_name(table)
    base_query = f"SELECT * FROM {table}"
    if where:
        base_query += f" WHERE {where}"
    return build_surrealql_queries(base_query, params)


def id_range_queries(
    table: str,
    params: PaginationParams,
    start_id: Optional[str] = None,
    end_id: Optional[str] = None
) -> Tuple[Optional[str], str]:
    """Count and data queries for records of ``table`` with ids in a range.

    Both bounds are inclusive record ids such as ``users:100``, inlined
    as given; either may be omitted.
    """
    conditions = []
    if start_id is not None:
        conditions.append(f"id >= {start_id}")
    if end_id is not None:
        conditions.append(f"id <= {end_id}")
    return table_queries(table, params, " AND ".join(conditions) or None)


class SurrealQueryBuilder:
    """Assembles a ``SELECT ... FROM ... WHERE ...`` base query.

    Conditions are trusted SurrealQL and joined with AND.

    Example:
        SurrealQueryBuilder().select("id, name").from_("users").where("age > 18").queries(params)
    """

    def __init__(self):
        self._select = "*"
        self._from: Optional[str] = None
        self._conditions: List[str] = []

    def select(self, fields: str) -> "SurrealQueryBuilder":
        self._select = fields
        return self

    def from_(self, table: str) -> "SurrealQueryBuilder":
        self._from = table
        return self

    def where(self, condition: str) -> "SurrealQueryBuilder":
        self._conditions.append(condition)
        return self

    def and_(self, condition: str) -> "SurrealQueryBuilder":
        return self.where(condition)

    def build_query(self) -> str:
        """Build the base query.

        Raises:
            QueryBuildError: If no table was given
        """
        if not self._from:
            raise QueryBuildError("FROM clause is required")

        query = f"SELECT {self._select} FROM {self._from}"
        if len(self._conditions) == 1:
            query += f" WHERE {self._conditions[0]}"
        elif self._conditions:
            query += " WHERE " + " AND ".join(f"({c})" for c in self._conditions)
        return query

    def queries(self, params: PaginationParams) -> Tuple[Optional[str], str]:
        """Count and data queries for one page of the built query."""
        return build_surrealql_queries(self.build_query(), params)
