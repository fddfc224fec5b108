"""Database executors and query builders."""

from .postgres import paginate_query
from .surrealql import SurrealQueryBuilder, build_surrealql_queries, id_range_queries, table_queries
from .sqlalchemy import apply_filters, apply_pagination, count_query, filter_to_clause
from .connection import DatabaseManager, db_manager, get_db_pool

__all__ = [
    "paginate_query",
    "build_surrealql_queries",
    "table_queries",
    "id_range_queries",
    "SurrealQueryBuilder",
    "apply_filters",
    "apply_pagination",
    "count_query",
    "filter_to_clause",
    "DatabaseManager",
    "db_manager",
    "get_db_pool"
]
