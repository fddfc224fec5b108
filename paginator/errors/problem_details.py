"""Problem Details (RFC 9457) errors raised by the paginator."""

from typing import Optional, Any
from pydantic import BaseModel, Field
from fastapi import Request
from fastapi.responses import JSONResponse


class ProblemDetail(BaseModel):
    """Problem Details as defined in RFC 9457."""

    type: str = Field(default="about:blank", description="A URI reference that identifies the problem type")
    title: str = Field(description="A short, human-readable summary of the problem type")
    status: int = Field(description="The HTTP status code")
    detail: Optional[str] = Field(default=None, description="A human-readable explanation specific to this occurrence")
    instance: Optional[str] = Field(default=None, description="A URI reference that identifies the specific occurrence")

    # Extension members are carried as extra fields
    model_config = {"extra": "allow"}


class ProblemDetailException(Exception):
    """Base exception rendered as a Problem Details response."""

    def __init__(
        self,
        status: int,
        title: str,
        detail: Optional[str] = None,
        type_uri: str = "about:blank",
        instance: Optional[str] = None,
        **extensions: Any
    ):
        self.status = status
        self.title = title
        self.detail = detail
        self.type_uri = type_uri
        self.instance = instance
        self.extensions = extensions
        super().__init__(detail or title)

    def to_problem_detail(self, request: Optional[Request] = None) -> ProblemDetail:
        """Convert to ProblemDetail model."""
        instance = self.instance
        if instance is None and request:
            instance = str(request.url.path)

        problem = ProblemDetail(
            type=self.type_uri,
            title=self.title,
            status=self.status,
            detail=self.detail,
            instance=instance
        )

        for key, value in self.extensions.items():
            setattr(problem, key, value)

        return problem

    def to_response(self, request: Optional[Request] = None) -> JSONResponse:
        """Convert to JSONResponse with Problem Details format."""
        problem = self.to_problem_detail(request)
        return JSONResponse(
            status_code=self.status,
            content=problem.model_dump(exclude_none=True),
            headers={"Content-Type": "application/problem+json"}
        )


class BadRequestError(ProblemDetailException):
    """400 Bad Request error."""

    def __init__(self, detail: str, **extensions: Any):
        super().__init__(
            status=400,
            title="Bad Request",
            detail=detail,
            **extensions
        )


class UnprocessableEntityError(ProblemDetailException):
    """422 Unprocessable Entity error."""

    def __init__(self, detail: str, **extensions: Any):
        super().__init__(
            status=422,
            title="Unprocessable Entity",
            detail=detail,
            **extensions
        )


class InternalServerError(ProblemDetailException):
    """500 Internal Server Error."""

    def __init__(self, detail: str = "Internal server error", **extensions: Any):
        super().__init__(
            status=500,
            title="Internal Server Error",
            detail=detail,
            **extensions
        )


class PaginatorError(ProblemDetailException):
    """Base class for every error raised by the paginator.

    Used directly it is the catch-all kind for adapter-level failures;
    the subclasses below narrow it to a specific cause and status.
    """

    def __init__(
        self,
        detail: str,
        status: int = 400,
        title: str = "Pagination Error",
        **extensions: Any
    ):
        super().__init__(
            status=status,
            title=title,
            detail=detail,
            **extensions
        )


class InvalidPageError(PaginatorError):
    """Page number below 1."""

    def __init__(self, page: int, **extensions: Any):
        self.page = page
        super().__init__(
            f"Invalid page number: {page}. Page must be >= 1",
            title="Invalid Page",
            page=page,
            **extensions
        )


class InvalidPerPageError(PaginatorError):
    """Page size outside the allowed range."""

    def __init__(self, per_page: int, min_value: int = 1, max_value: int = 100, **extensions: Any):
        self.per_page = per_page
        super().__init__(
            f"Invalid per_page value: {per_page}. Must be between {min_value} and {max_value}",
            title="Invalid Page Size",
            per_page=per_page,
            **extensions
        )


class InvalidCursorError(PaginatorError):
    """Cursor token that cannot be decoded."""

    def __init__(self, detail: str, **extensions: Any):
        super().__init__(detail, title="Invalid Cursor", **extensions)


class InvalidFieldNameError(PaginatorError):
    """Field name unsafe for interpolation into a query."""

    def __init__(self, detail: str, **extensions: Any):
        super().__init__(detail, title="Invalid Field Name", **extensions)


class QueryBuildError(PaginatorError):
    """Base query that cannot be extended with pagination clauses."""

    def __init__(self, detail: str, **extensions: Any):
        super().__init__(detail, title="Invalid Query", **extensions)


class QueryExecutionError(PaginatorError):
    """Count or data query failed in the database."""

    def __init__(self, detail: str, **extensions: Any):
        super().__init__(
            detail,
            status=500,
            title="Query Execution Failed",
            **extensions
        )


class SerializationError(PaginatorError):
    """Paginated response could not be encoded."""

    def __init__(self, detail: str, **extensions: Any):
        super().__init__(
            f"Serialization error: {detail}",
            status=500,
            title="Serialization Error",
            **extensions
        )


def create_problem_response(
    status: int,
    title: str,
    detail: Optional[str] = None,
    type_uri: str = "about:blank",
    instance: Optional[str] = None,
    request: Optional[Request] = None,
    **extensions: Any
) -> JSONResponse:
    """Create a Problem Details response."""
    if instance is None and request:
        instance = str(request.url.path)

    problem = ProblemDetail(
        type=type_uri,
        title=title,
        status=status,
        detail=detail,
        instance=instance
    )

    for key, value in extensions.items():
        setattr(problem, key, value)

    return JSONResponse(
        status_code=status,
        content=problem.model_dump(exclude_none=True),
        headers={"Content-Type": "application/problem+json"}
    )
