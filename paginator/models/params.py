"""The pagination request: page window, sort, filters, search and cursor."""

from typing import Any, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config import get_settings
from ..pagination.cursor import Cursor
from ..query.dialect import Dialect
from ..query.render import render_where
from .enums import SortDirection
from .filters import Filter
from .search import SearchParams

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 20
MIN_PER_PAGE = 1
MAX_PER_PAGE = 100


def clamp_page(page: int) -> int:
    return max(DEFAULT_PAGE, page)


def clamp_per_page(per_page: int) -> int:
    return min(max(per_page, MIN_PER_PAGE), MAX_PER_PAGE)


class PaginationParams(BaseModel):
    """Everything a list endpoint needs to select one page of results.

    ``page`` is clamped to at least 1 and ``per_page`` to ``[1, 100]``
    whenever a value enters the model: construction, validation of
    query-string or JSON input, and attribute assignment.
    """

    model_config = ConfigDict(validate_assignment=True)

    page: int = Field(default=DEFAULT_PAGE, description="1-based page number")
    per_page: int = Field(default=DEFAULT_PER_PAGE, description="Items per page")
    sort_by: Optional[str] = Field(default=None, description="Field to order by")
    sort_direction: Optional[SortDirection] = Field(default=None, description="Order direction")
    filters: List[Filter] = Field(default_factory=list)
    search: Optional[SearchParams] = None
    disable_total_count: bool = Field(default=False, description="Skip the count query")
    cursor: Optional[Cursor] = None

    @field_validator("page", mode="after")
    @classmethod
    def clamp_page_value(cls, v: int) -> int:
        return clamp_page(v)

    @field_validator("per_page", mode="after")
    @classmethod
    def clamp_per_page_value(cls, v: int) -> int:
        return clamp_per_page(v)

    @classmethod
    def new(cls, page: int, per_page: int) -> "PaginationParams":
        return cls(page=page, per_page=per_page)

    def with_sort(self, field: str) -> "PaginationParams":
        return self.model_copy(update={"sort_by": field})

    def with_direction(self, direction: SortDirection) -> "PaginationParams":
        return self.model_copy(update={"sort_direction": SortDirection(direction)})

    def with_filter(self, filter: Filter) -> "PaginationParams":
        return self.model_copy(update={"filters": [*self.filters, filter]})

    def with_filters(self, filters: Iterable[Filter]) -> "PaginationParams":
        return self.model_copy(update={"filters": [*self.filters, *filters]})

    def with_search(self, search: SearchParams) -> "PaginationParams":
        return self.model_copy(update={"search": search})

    def with_cursor(self, cursor: Cursor) -> "PaginationParams":
        return self.model_copy(update={"cursor": cursor})

    def without_total_count(self) -> "PaginationParams":
        return self.model_copy(update={"disable_total_count": True})

    def offset(self) -> int:
        """Rows to skip: ``(page - 1) * per_page``."""
        return (self.page - 1) * self.per_page

    def limit(self) -> int:
        return self.per_page

    @property
    def has_search(self) -> bool:
        return self.search is not None and not self.search.is_empty

    @property
    def has_predicates(self) -> bool:
        return bool(self.filters) or self.has_search

    def to_where(self, dialect: Any = None) -> Optional[str]:
        """Literal WHERE body for ``dialect``, or None without predicates.

        ``dialect`` is a Dialect or its name and defaults to the configured
        ``sql_dialect``. Filters come first in insertion order, then the
        search group.
        """
        if dialect is None:
            dialect = get_settings().sql_dialect
        if not isinstance(dialect, Dialect):
            dialect = Dialect.from_name(dialect)
        return render_where(self.filters, self.search, dialect)

    def to_sql_where(self) -> Optional[str]:
        return self.to_where(Dialect.POSTGRES)

    def to_surrealql_where(self) -> Optional[str]:
        return self.to_where(Dialect.SURREALQL)
