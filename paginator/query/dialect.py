"""Target query languages for predicate rendering."""

from enum import Enum


class Dialect(str, Enum):
    """Query language a predicate is rendered for.

    ``POSTGRES`` is the generic-SQL dialect behind ``to_sql_where``.
    Dialects without a native ``ILIKE`` get every case-insensitive match,
    whether from an ``ilike`` filter or a case-insensitive search,
    rewritten to ``LOWER(field) LIKE LOWER(pattern)``.
    """

    POSTGRES = "postgres"
    SQLITE = "sqlite"
    MYSQL = "mysql"
    SURREALQL = "surrealql"

    @classmethod
    def from_name(cls, name: str) -> "Dialect":
        """Look up a dialect by its settings name (case-insensitive)."""
        try:
            return cls(name.lower())
        except ValueError:
            valid = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown dialect '{name}', expected one of: {valid}")

    @property
    def supports_ilike(self) -> bool:
        return self is Dialect.POSTGRES

    @property
    def is_sql(self) -> bool:
        return self is not Dialect.SURREALQL

    def placeholder(self, index: int) -> str:
        """Bind-parameter placeholder for the 1-based ``index``."""
        if self is Dialect.POSTGRES:
            return f"${index}"
        if self is Dialect.SURREALQL:
            return f"$p{index}"
        return "?"
