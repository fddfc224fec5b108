"""Run paginated queries against PostgreSQL through asyncpg."""

import logging
from typing import Any, Callable, Optional

import asyncpg

from ..errors.problem_details import QueryExecutionError
from ..models.params import PaginationParams
from ..models.response import PaginatorResponse, PaginatorResponseMeta
from ..pagination.cursor import paginate_query_results
from ..query.bound import build_page_queries
from ..query.dialect import Dialect
from ..validation import validate_params

logger = logging.getLogger(__name__)


def _cursor_field(params: PaginationParams) -> Optional[str]:
    if params.cursor is not None:
        return params.cursor.field
    return params.sort_by


async def paginate_query(
    conn,
    base_query: str,
    params: PaginationParams,
    row_factory: Callable[[Any], Any] = dict
) -> PaginatorResponse:
    """Fetch one page of ``base_query`` on an asyncpg connection.

    Args:
        conn: asyncpg connection (or anything with ``fetch``/``fetchval``)
        base_query: SELECT statement to paginate; it is wrapped as a
            subquery so it may carry its own WHERE or joins
        params: Pagination parameters
        row_factory: Applied to each returned record

    Returns:
        Page of rows with pagination metadata

    Raises:
        InvalidPageError: If params hold an unclamped page
        InvalidPerPageError: If params hold an unclamped page size
        InvalidFieldNameError: If a field name is unsafe
        QueryExecutionError: If the database rejects a query
    """
    validate_params(params)
    queries = build_page_queries(base_query, params, Dialect.POSTGRES)

    try:
        total = None
        if queries.count_query is not None:
            total = await conn.fetchval(queries.count_query, *queries.count_args)

        rows = await conn.fetch(queries.data_query, *queries.data_args)
    except asyncpg.PostgresError as e:
        logger.error(f"Database error during pagination: {e}")
        raise QueryExecutionError(str(e))

    if params.cursor is not None:
        page_rows, next_cursor, prev_cursor, has_next = paginate_query_results(
            rows,
            params.limit(),
            _cursor_field(params),
            had_cursor=True
        )
        meta = PaginatorResponseMeta.new_with_cursors(
            params.page,
            params.per_page,
            total,
            has_next,
            next_cursor=next_cursor,
            prev_cursor=prev_cursor
        )
    elif params.disable_total_count:
        has_next = len(rows) > params.limit()
        page_rows = rows[:params.limit()]
        meta = PaginatorResponseMeta.new_without_total(params.page, params.per_page, has_next)
    else:
        page_rows = rows
        meta = PaginatorResponseMeta.new(params.page, params.per_page, total or 0)

    logger.info(
        f"Fetched page {params.page} with {len(page_rows)} rows",
        extra={"per_page": params.per_page, "total": total, "has_next": meta.has_next}
    )

    return PaginatorResponse(data=[row_factory(row) for row in page_rows], meta=meta)
