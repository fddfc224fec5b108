"""Error handling for the paginator."""

from .problem_details import (
    ProblemDetail,
    ProblemDetailException,
    BadRequestError,
    UnprocessableEntityError,
    InternalServerError,
    PaginatorError,
    InvalidPageError,
    InvalidPerPageError,
    InvalidCursorError,
    InvalidFieldNameError,
    QueryBuildError,
    QueryExecutionError,
    SerializationError,
    create_problem_response
)
from .handlers import register_exception_handlers

__all__ = [
    "ProblemDetail",
    "ProblemDetailException",
    "BadRequestError",
    "UnprocessableEntityError",
    "InternalServerError",
    "PaginatorError",
    "InvalidPageError",
    "InvalidPerPageError",
    "InvalidCursorError",
    "InvalidFieldNameError",
    "QueryBuildError",
    "QueryExecutionError",
    "SerializationError",
    "create_problem_response",
    "register_exception_handlers"
]
