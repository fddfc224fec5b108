"""Paginated response envelope and its metadata."""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field, SerializerFunctionWrapHandler, model_serializer

DataType = TypeVar("DataType")

# Omitted from serialized output when unset
OPTIONAL_META_FIELDS = ("total", "total_pages", "next_cursor", "prev_cursor")


def total_pages_for(total: int, per_page: int) -> int:
    """``ceil(total / per_page)`` in integer arithmetic; 0 for a page size below 1."""
    if per_page < 1:
        return 0
    return -(-total // per_page)


class PaginatorResponseMeta(BaseModel):
    """Pagination metadata for one response.

    Built through one of three constructors, one per pagination mode:

    * :meth:`new` for offset pagination with a total count,
    * :meth:`new_without_total` for offset pagination with the count
      suppressed, where ``has_next`` comes from over-fetching one row,
    * :meth:`new_with_cursors` for cursor pagination.
    """

    page: int = Field(description="Current page number")
    per_page: int = Field(description="Items per page")
    total: Optional[int] = Field(default=None, description="Total number of items")
    total_pages: Optional[int] = Field(default=None, description="Total number of pages")
    has_next: bool = Field(description="Whether a following page exists")
    has_prev: bool = Field(description="Whether a preceding page exists")
    next_cursor: Optional[str] = Field(default=None, description="Cursor for the next page")
    prev_cursor: Optional[str] = Field(default=None, description="Cursor for the previous page")

    @model_serializer(mode="wrap")
    def drop_unset(self, handler: SerializerFunctionWrapHandler):
        data = handler(self)
        for key in OPTIONAL_META_FIELDS:
            if key in data and data[key] is None:
                del data[key]
        return data

    @classmethod
    def new(cls, page: int, per_page: int, total: int) -> "PaginatorResponseMeta":
        """Offset mode with a known total."""
        total_pages = total_pages_for(total, per_page)
        return cls(
            page=page,
            per_page=per_page,
            total=total,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1
        )

    @classmethod
    def new_without_total(cls, page: int, per_page: int, has_next: bool) -> "PaginatorResponseMeta":
        """Offset mode with the count query skipped."""
        return cls(
            page=page,
            per_page=per_page,
            has_next=has_next,
            has_prev=page > 1
        )

    @classmethod
    def new_with_cursors(
        cls,
        page: int,
        per_page: int,
        total: Optional[int],
        has_next: bool,
        next_cursor: Optional[str] = None,
        prev_cursor: Optional[str] = None
    ) -> "PaginatorResponseMeta":
        """Cursor mode.

        ``has_prev`` also holds when a previous cursor exists, since the
        page counter alone cannot tell whether earlier rows exist.
        """
        return cls(
            page=page,
            per_page=per_page,
            total=total,
            total_pages=total_pages_for(total, per_page) if total is not None else None,
            has_next=has_next,
            has_prev=page > 1 or prev_cursor is not None,
            next_cursor=next_cursor,
            prev_cursor=prev_cursor
        )


class PaginatorResponse(BaseModel, Generic[DataType]):
    """Standard envelope for paginated lists."""

    data: List[DataType] = Field(default_factory=list, description="Items on this page")
    meta: PaginatorResponseMeta

    model_config = {
        "arbitrary_types_allowed": True
    }
