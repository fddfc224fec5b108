"""FastAPI dependency that reads pagination params from the query string."""

import logging
from typing import Annotated, List, Optional

from fastapi import Depends, Query

from ..config import get_settings
from ..errors.problem_details import PaginatorError
from ..models.params import PaginationParams
from ..pagination.cursor import decode_cursor
from ..validation import validate_param_fields
from .parser import parse_filter, parse_search, parse_sort_direction

logger = logging.getLogger(__name__)


async def pagination_params(
    page: Annotated[int, Query(description="Page number, starting at 1")] = 1,
    per_page: Annotated[Optional[int], Query(description="Items per page, at most 100")] = None,
    sort_by: Annotated[Optional[str], Query(description="Field to sort by")] = None,
    sort_direction: Annotated[Optional[str], Query(description="Sort direction: asc or desc")] = None,
    filters: Annotated[
        Optional[List[str]],
        Query(alias="filter", description="Filter as field:operator:value, repeatable")
    ] = None,
    search: Annotated[Optional[str], Query(description="Search text")] = None,
    search_fields: Annotated[Optional[str], Query(description="Comma-separated fields to search")] = None,
    cursor: Annotated[Optional[str], Query(description="Cursor for pagination")] = None
) -> PaginationParams:
    """Build PaginationParams from query parameters.

    ``page`` and ``per_page`` are clamped rather than rejected. Filters
    that do not parse are skipped, or rejected when strict filtering is
    enabled.

    Raises:
        PaginatorError: If a filter does not parse in strict mode
        InvalidCursorError: If the cursor cannot be decoded
        InvalidFieldNameError: If a field name is unsafe
    """
    settings = get_settings()

    parsed_filters = []
    for text in filters or []:
        flt = parse_filter(text)
        if flt is None:
            if settings.strict_filters:
                raise PaginatorError(
                    f"Invalid filter '{text}'. Expected field:operator:value",
                    title="Invalid Filter",
                    filter=text
                )
            logger.debug(f"Ignoring unparseable filter {text!r}")
            continue
        parsed_filters.append(flt)

    params = PaginationParams(
        page=page,
        per_page=per_page if per_page is not None else settings.default_per_page,
        sort_by=sort_by,
        sort_direction=parse_sort_direction(sort_direction),
        filters=parsed_filters,
        search=parse_search(search, search_fields),
        cursor=decode_cursor(cursor) if cursor else None
    )

    return validate_param_fields(params)


Pagination = Annotated[PaginationParams, Depends(pagination_params)]
