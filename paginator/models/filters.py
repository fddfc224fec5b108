"""Filter predicates: a field, an operator and a value."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..query.dialect import Dialect
from ..query.render import render_filter
from .enums import FilterOperator
from .values import FilterValue, NullValue, to_filter_value


class Filter(BaseModel):
    """A single ``field <operator> value`` condition.

    Construction never fails on content: the field name is free text and
    must go through :func:`paginator.validation.validate_field_name` before
    a user-supplied name is interpolated into a query. For ``between`` the
    value should be a two-element array; anything else renders as an
    equality comparison. ``is_null``/``is_not_null`` ignore the value.
    """

    model_config = ConfigDict(frozen=True)

    field: str = Field(description="Column or attribute name")
    operator: FilterOperator
    value: FilterValue = Field(default_factory=NullValue)

    def __init__(self, field: Any = None, operator: Any = None, value: Any = None, /, **data: Any):
        if field is not None:
            data["field"] = field
        if operator is not None:
            data["operator"] = operator
        if value is not None:
            data["value"] = value
        super().__init__(**data)

    @field_validator("value", mode="before")
    @classmethod
    def wrap_raw_value(cls, v):
        """Accept plain Python values alongside FilterValue variants."""
        if isinstance(v, dict):
            return v
        try:
            return to_filter_value(v)
        except TypeError as e:
            raise ValueError(str(e))

    def render(self, dialect: Dialect) -> str:
        """Render as a literal predicate in the given dialect."""
        return render_filter(self, dialect)

    def to_sql_where(self) -> str:
        """Render as a generic-SQL (PostgreSQL) predicate."""
        return render_filter(self, Dialect.POSTGRES)

    def to_surrealql_where(self) -> str:
        """Render as a SurrealQL predicate."""
        return render_filter(self, Dialect.SURREALQL)
