"""Parsing of pagination query-string values.

Filters arrive as ``field:operator:value`` strings, e.g.
``status:eq:active``, ``age:gt:18``, ``role:in:admin,editor`` or
``price:between:10,100``.
"""

import math
import re
from typing import Optional

from ..models.enums import FilterOperator, SortDirection
from ..models.filters import Filter
from ..models.search import SearchParams
from ..models.values import (
    ArrayValue, BoolValue, FilterValue, FloatValue, IntValue, NullValue, StringValue
)

_INT = re.compile(r"[+-]?[0-9]+")
_INT64_MIN, _INT64_MAX = -(2 ** 63), 2 ** 63 - 1

_LIST_OPERATORS = (FilterOperator.IN, FilterOperator.NOT_IN, FilterOperator.BETWEEN)


def _parse_number(text: str) -> Optional[FilterValue]:
    if _INT.fullmatch(text):
        number = int(text)
        if _INT64_MIN <= number <= _INT64_MAX:
            return IntValue(number)
    # float() also takes padding and digit separators; neither counts as a number here
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return FloatValue(number)


def parse_scalar(text: str, parse_bool: bool = True) -> FilterValue:
    """Parse one filter value: integer, then float, then bool, else string.

    Only lowercase ``true``/``false`` count as booleans.
    """
    number = _parse_number(text)
    if number is not None:
        return number
    if parse_bool and text in ("true", "false"):
        return BoolValue(text == "true")
    return StringValue(text)


def parse_filter(text: str) -> Optional[Filter]:
    """Parse a ``field:operator:value`` filter string.

    Only the first two colons split, so the value may contain colons.
    List operators split the value on commas and trim each element;
    ``between`` elements never become booleans.

    Returns:
        The filter, or None with fewer than three parts or an unknown
        operator
    """
    parts = text.split(":", 2)
    if len(parts) < 3:
        return None

    field, operator_name, raw_value = parts
    try:
        operator = FilterOperator(operator_name)
    except ValueError:
        return None

    if operator in (FilterOperator.IS_NULL, FilterOperator.IS_NOT_NULL):
        value = NullValue()
    elif operator in _LIST_OPERATORS:
        parse_bool = operator is not FilterOperator.BETWEEN
        value = ArrayValue(
            items=[parse_scalar(item.strip(), parse_bool) for item in raw_value.split(",")]
        )
    else:
        value = parse_scalar(raw_value)

    return Filter(field=field, operator=operator, value=value)


def parse_sort_direction(text: Optional[str]) -> Optional[SortDirection]:
    """``asc``/``desc`` in any case; anything else is None."""
    if text is None:
        return None
    try:
        return SortDirection(text.lower())
    except ValueError:
        return None


def parse_search(query: Optional[str], fields: Optional[str]) -> Optional[SearchParams]:
    """Build a search from ``search`` and comma-separated ``search_fields``.

    A search is only produced when both are present and at least one
    non-empty field remains after trimming.
    """
    if not query or not fields:
        return None
    field_list = [field.strip() for field in fields.split(",") if field.strip()]
    if not field_list:
        return None
    return SearchParams.new(query, field_list)
