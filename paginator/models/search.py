"""Free-text search across several fields."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from ..query.dialect import Dialect
from ..query.render import render_search


class SearchParams(BaseModel):
    """Text search applied to every field in ``fields`` and OR-ed together.

    With ``exact_match`` the query must equal the field value, otherwise it
    may appear anywhere in it. A search with no fields is treated as absent
    wherever presence matters.
    """

    model_config = ConfigDict(frozen=True)

    query: str = Field(description="Text to look for")
    fields: List[str] = Field(default_factory=list, description="Fields searched, OR-ed together")
    case_sensitive: bool = False
    exact_match: bool = False

    @classmethod
    def new(cls, query: str, fields: List[str]) -> "SearchParams":
        return cls(query=query, fields=list(fields))

    def with_case_sensitive(self, sensitive: bool = True) -> "SearchParams":
        return self.model_copy(update={"case_sensitive": sensitive})

    def with_exact_match(self, exact: bool = True) -> "SearchParams":
        return self.model_copy(update={"exact_match": exact})

    @property
    def is_empty(self) -> bool:
        return not self.fields

    def render(self, dialect: Dialect) -> str:
        return render_search(self, dialect)

    def to_sql_where(self) -> str:
        """Render as a generic-SQL OR-group, e.g. ``(name ILIKE '%jo%')``."""
        return render_search(self, Dialect.POSTGRES)

    def to_surrealql_where(self) -> str:
        return render_search(self, Dialect.SURREALQL)
