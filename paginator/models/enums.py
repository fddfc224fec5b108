"""Enumerations shared by the pagination models."""

from enum import Enum


class FilterOperator(str, Enum):
    """Comparison operators; the value is the query-string tag."""

    EQ = "eq"
    NE = "ne"
    GT = "gt"
    LT = "lt"
    GTE = "gte"
    LTE = "lte"
    LIKE = "like"
    ILIKE = "ilike"
    IN = "in"
    NOT_IN = "not_in"
    IS_NULL = "is_null"
    IS_NOT_NULL = "is_not_null"
    BETWEEN = "between"
    CONTAINS = "contains"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class CursorDirection(str, Enum):
    """Which side of the cursor boundary a page lies on."""

    AFTER = "after"
    BEFORE = "before"
