"""Pagination of in-memory sequences."""

import logging
from typing import Sequence, TypeVar

from pydantic_core import PydanticSerializationError

from .errors.problem_details import SerializationError
from .models.params import PaginationParams
from .models.response import PaginatorResponse, PaginatorResponseMeta
from .validation import validate_params

logger = logging.getLogger(__name__)

T = TypeVar("T")


def paginate_items(items: Sequence[T], params: PaginationParams) -> PaginatorResponse:
    """Slice one page out of ``items``.

    Filters, search and cursor in ``params`` are not applied here; only the
    page window is. With ``disable_total_count`` the total is left out and
    ``has_next`` comes from looking one item past the page.

    Raises:
        InvalidPageError: If params hold an unclamped page
        InvalidPerPageError: If params hold an unclamped page size
    """
    validate_params(params)
    start = params.offset()
    end = start + params.limit()

    if params.disable_total_count:
        window = list(items[start:end + 1])
        meta = PaginatorResponseMeta.new_without_total(
            params.page, params.per_page, len(window) > params.limit()
        )
        return PaginatorResponse(data=window[:params.limit()], meta=meta)

    meta = PaginatorResponseMeta.new(params.page, params.per_page, len(items))
    return PaginatorResponse(data=list(items[start:end]), meta=meta)


def to_json(response: PaginatorResponse) -> str:
    """Serialize a response to JSON.

    Raises:
        SerializationError: If an item cannot be serialized
    """
    try:
        return response.model_dump_json()
    except PydanticSerializationError as e:
        logger.error(f"Failed to serialize paginated response: {e}")
        raise SerializationError(str(e))
