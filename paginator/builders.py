"""Fluent builders for pagination params.

Each part builder (filters, search, cursor) works standalone, producing
its part through ``build()`` or a params object through ``to_params()``,
or attached to a :class:`Paginator` through ``Paginator.filter()`` and
friends, in which case ``apply()`` merges the part and hands the
paginator back::

    params = (
        Paginator()
        .page(2)
        .per_page(25)
        .sort_desc("created_at")
        .filter().eq("status", "active").gt("age", 18).apply()
        .search().query("john").fields(["name", "email"]).apply()
        .build()
    )

Values may be plain Python values or FilterValue/CursorValue variants.
"""

from typing import Any, Iterable, List, Optional, Union

from .models.enums import CursorDirection, FilterOperator, SortDirection
from .models.filters import Filter
from .models.params import PaginationParams
from .models.search import SearchParams
from .pagination.cursor import Cursor


class _PartBuilder:
    def __init__(self, parent: Optional["Paginator"] = None):
        self._parent = parent

    def _merge_into(self, params: PaginationParams) -> None:
        raise NotImplementedError

    def apply(self) -> "Paginator":
        """Merge into the paginator this builder was opened from."""
        if self._parent is None:
            raise RuntimeError(f"{type(self).__name__}.apply() called without a parent Paginator")
        self._merge_into(self._parent._params)
        return self._parent

    def to_params(self) -> PaginationParams:
        """Default params carrying only this builder's part."""
        params = PaginationParams()
        self._merge_into(params)
        return params


class FilterBuilder(_PartBuilder):
    """Collects filters in insertion order."""

    def __init__(self, parent: Optional["Paginator"] = None):
        super().__init__(parent)
        self._filters: List[Filter] = []

    def _push(self, field: str, operator: FilterOperator, value: Any = None) -> "FilterBuilder":
        self._filters.append(Filter(field=field, operator=operator, value=value))
        return self

    def eq(self, field: str, value: Any) -> "FilterBuilder":
        return self._push(field, FilterOperator.EQ, value)

    def ne(self, field: str, value: Any) -> "FilterBuilder":
        return self._push(field, FilterOperator.NE, value)

    def gt(self, field: str, value: Any) -> "FilterBuilder":
        return self._push(field, FilterOperator.GT, value)

    def lt(self, field: str, value: Any) -> "FilterBuilder":
        return self._push(field, FilterOperator.LT, value)

    def gte(self, field: str, value: Any) -> "FilterBuilder":
        return self._push(field, FilterOperator.GTE, value)

    def lte(self, field: str, value: Any) -> "FilterBuilder":
        return self._push(field, FilterOperator.LTE, value)

    def like(self, field: str, pattern: str) -> "FilterBuilder":
        return self._push(field, FilterOperator.LIKE, pattern)

    def ilike(self, field: str, pattern: str) -> "FilterBuilder":
        return self._push(field, FilterOperator.ILIKE, pattern)

    def in_(self, field: str, values: Iterable[Any]) -> "FilterBuilder":
        return self._push(field, FilterOperator.IN, list(values))

    def not_in(self, field: str, values: Iterable[Any]) -> "FilterBuilder":
        return self._push(field, FilterOperator.NOT_IN, list(values))

    def between(self, field: str, low: Any, high: Any) -> "FilterBuilder":
        return self._push(field, FilterOperator.BETWEEN, [low, high])

    def is_null(self, field: str) -> "FilterBuilder":
        return self._push(field, FilterOperator.IS_NULL)

    def is_not_null(self, field: str) -> "FilterBuilder":
        return self._push(field, FilterOperator.IS_NOT_NULL)

    def contains(self, field: str, value: Any) -> "FilterBuilder":
        return self._push(field, FilterOperator.CONTAINS, value)

    def build(self) -> List[Filter]:
        return list(self._filters)

    def _merge_into(self, params: PaginationParams) -> None:
        params.filters = [*params.filters, *self._filters]


class SearchBuilder(_PartBuilder):
    """Builds a SearchParams; nothing is produced without a query and fields."""

    def __init__(self, parent: Optional["Paginator"] = None):
        super().__init__(parent)
        self._query: Optional[str] = None
        self._fields: List[str] = []
        self._exact = False
        self._case_sensitive = False

    def query(self, query: str) -> "SearchBuilder":
        self._query = query
        return self

    def fields(self, fields: Iterable[str]) -> "SearchBuilder":
        self._fields = list(fields)
        return self

    def exact(self, exact: bool = True) -> "SearchBuilder":
        self._exact = exact
        return self

    def case_sensitive(self, sensitive: bool = True) -> "SearchBuilder":
        self._case_sensitive = sensitive
        return self

    def build(self) -> Optional[SearchParams]:
        if not self._query or not self._fields:
            return None
        return SearchParams(
            query=self._query,
            fields=self._fields,
            exact_match=self._exact,
            case_sensitive=self._case_sensitive
        )

    def _merge_into(self, params: PaginationParams) -> None:
        search = self.build()
        if search is not None:
            params.search = search


class CursorBuilder(_PartBuilder):
    """Sets the cursor from a field/value pair or an encoded token."""

    def __init__(self, parent: Optional["Paginator"] = None):
        super().__init__(parent)
        self._cursor: Optional[Cursor] = None

    def after(self, field: str, value: Any) -> "CursorBuilder":
        self._cursor = Cursor(field=field, value=value, direction=CursorDirection.AFTER)
        return self

    def before(self, field: str, value: Any) -> "CursorBuilder":
        self._cursor = Cursor(field=field, value=value, direction=CursorDirection.BEFORE)
        return self

    def from_encoded(self, token: str) -> "CursorBuilder":
        """Decode ``token``; raises InvalidCursorError if it is malformed."""
        self._cursor = Cursor.decode(token)
        return self

    def build(self) -> Optional[Cursor]:
        return self._cursor

    def _merge_into(self, params: PaginationParams) -> None:
        if self._cursor is not None:
            params.cursor = self._cursor


class Paginator:
    """Builds a complete PaginationParams."""

    def __init__(self):
        self._params = PaginationParams()

    def page(self, page: int) -> "Paginator":
        self._params.page = page
        return self

    def per_page(self, per_page: int) -> "Paginator":
        self._params.per_page = per_page
        return self

    def sort_asc(self, field: str) -> "Paginator":
        self._params.sort_by = field
        self._params.sort_direction = SortDirection.ASC
        return self

    def sort_desc(self, field: str) -> "Paginator":
        self._params.sort_by = field
        self._params.sort_direction = SortDirection.DESC
        return self

    def filter(self) -> FilterBuilder:
        return FilterBuilder(self)

    def search(self) -> SearchBuilder:
        return SearchBuilder(self)

    def cursor(self) -> CursorBuilder:
        return CursorBuilder(self)

    def filters(self, filters: Union[FilterBuilder, Iterable[Filter]]) -> "Paginator":
        """Append filters from a standalone builder or a list."""
        if isinstance(filters, FilterBuilder):
            filters = filters.build()
        self._params.filters = [*self._params.filters, *filters]
        return self

    def with_search(self, search: Union[SearchBuilder, SearchParams, None]) -> "Paginator":
        if isinstance(search, SearchBuilder):
            search = search.build()
        if search is not None:
            self._params.search = search
        return self

    def with_cursor(self, cursor: Union[CursorBuilder, Cursor, None]) -> "Paginator":
        if isinstance(cursor, CursorBuilder):
            cursor = cursor.build()
        if cursor is not None:
            self._params.cursor = cursor
        return self

    def disable_total_count(self) -> "Paginator":
        self._params.disable_total_count = True
        return self

    def build(self) -> PaginationParams:
        return self._params.model_copy(deep=True)
