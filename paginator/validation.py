"""Validation for values that end up interpolated into queries."""

import logging
import re

from .errors.problem_details import InvalidFieldNameError, InvalidPageError, InvalidPerPageError
from .models.params import MAX_PER_PAGE, MIN_PER_PAGE, PaginationParams

logger = logging.getLogger(__name__)

FIELD_NAME_PATTERN = re.compile(r"[A-Za-z0-9_.]+")


def validate_field_name(field: str) -> str:
    """Ensure a field name is safe to interpolate into a query.

    Only ASCII letters, digits, underscores and dots (for qualified names
    such as ``users.id``) are allowed.

    Args:
        field: Field name taken from a filter, search or sort parameter

    Returns:
        The field name, unchanged

    Raises:
        InvalidFieldNameError: If the name is empty or has other characters
    """
    if not field:
        raise InvalidFieldNameError("Field name cannot be empty")

    if not FIELD_NAME_PATTERN.fullmatch(field):
        bad = next(c for c in field if not FIELD_NAME_PATTERN.fullmatch(c))
        logger.info(f"Rejected unsafe field name {field!r}")
        raise InvalidFieldNameError(
            f"Invalid field name '{field}': contains unsafe character '{bad}'",
            field=field
        )

    return field


def validate_params(params: PaginationParams) -> PaginationParams:
    """Reject page values that bypassed clamping.

    Params built through ``model_construct`` or ``model_copy`` skip the
    clamping validators; executors call this before trusting them.

    Raises:
        InvalidPageError: If ``page`` is below 1
        InvalidPerPageError: If ``per_page`` is outside ``[1, 100]``
    """
    if params.page < 1:
        raise InvalidPageError(params.page)
    if not MIN_PER_PAGE <= params.per_page <= MAX_PER_PAGE:
        raise InvalidPerPageError(params.per_page, MIN_PER_PAGE, MAX_PER_PAGE)
    return params


def validate_param_fields(params: PaginationParams) -> PaginationParams:
    """Validate every field name a set of params would put into a query.

    Raises:
        InvalidFieldNameError: On the first unsafe name
    """
    for flt in params.filters:
        validate_field_name(flt.field)
    if params.search is not None:
        for field in params.search.fields:
            validate_field_name(field)
    if params.sort_by is not None:
        validate_field_name(params.sort_by)
    if params.cursor is not None:
        validate_field_name(params.cursor.field)
    return params
