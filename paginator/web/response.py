"""Response headers and envelopes for paginated endpoints."""

from typing import Any, Dict, Optional, Sequence
from urllib.parse import urlencode

from fastapi import Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from ..models.params import PaginationParams
from ..models.response import PaginatorResponse, PaginatorResponseMeta


def pagination_headers(meta: PaginatorResponseMeta) -> Dict[str, str]:
    """Build X-* pagination headers; totals only when they are known."""
    headers = {}
    if meta.total is not None:
        headers["X-Total-Count"] = str(meta.total)
    if meta.total_pages is not None:
        headers["X-Total-Pages"] = str(meta.total_pages)
    headers["X-Current-Page"] = str(meta.page)
    headers["X-Per-Page"] = str(meta.per_page)
    return headers


def _link(base_url: str, rel: str, **query: Any) -> str:
    return f'<{base_url}?{urlencode(query)}>; rel="{rel}"'


def create_link_header(
    base_url: str,
    params: PaginationParams,
    meta: PaginatorResponseMeta
) -> str:
    """Create Link header for pagination as per RFC 8288.

    ``first`` is always present, ``prev`` and ``next`` follow ``has_prev``
    and ``has_next``, and ``last`` needs a known page count. When the
    metadata carries cursors, ``prev``/``next`` point at them instead of
    at page numbers.

    Args:
        base_url: URL of the resource, without query string
        params: Params of the current request
        meta: Metadata of the current response

    Returns:
        Link header value
    """
    per_page = params.per_page
    links = [_link(base_url, "first", page=1, per_page=per_page)]

    if meta.has_prev:
        if meta.prev_cursor:
            links.append(_link(base_url, "prev", cursor=meta.prev_cursor, per_page=per_page))
        else:
            links.append(_link(base_url, "prev", page=params.page - 1, per_page=per_page))

    if meta.has_next:
        if meta.next_cursor:
            links.append(_link(base_url, "next", cursor=meta.next_cursor, per_page=per_page))
        else:
            links.append(_link(base_url, "next", page=params.page + 1, per_page=per_page))

    if meta.total_pages is not None:
        links.append(_link(base_url, "last", page=meta.total_pages, per_page=per_page))

    return ", ".join(links)


def apply_pagination_headers(
    response: Response,
    meta: PaginatorResponseMeta,
    params: Optional[PaginationParams] = None,
    base_url: Optional[str] = None
) -> Response:
    """Set X-* headers on ``response``, plus ``Link`` when a base URL is given."""
    response.headers.update(pagination_headers(meta))
    if base_url is not None and params is not None:
        response.headers["Link"] = create_link_header(base_url, params, meta)
    return response


def paginated_response(
    data: Sequence[Any],
    params: PaginationParams,
    total: Optional[int] = None,
    base_url: Optional[str] = None
) -> JSONResponse:
    """Wrap one page of items in a JSON response with pagination headers.

    With ``total`` the metadata is complete. Without it, ``data`` is
    expected to hold up to one item more than the page size, which only
    signals that a next page exists and is not returned.
    """
    items = list(data)
    if total is not None:
        meta = PaginatorResponseMeta.new(params.page, params.per_page, total)
    else:
        meta = PaginatorResponseMeta.new_without_total(
            params.page, params.per_page, len(items) > params.limit()
        )
        items = items[:params.limit()]

    body = PaginatorResponse(data=items, meta=meta)
    response = JSONResponse(content=jsonable_encoder(body.model_dump(mode="json")))
    return apply_pagination_headers(response, meta, params, base_url)
