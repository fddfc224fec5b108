"""Database connection utilities for the paginator."""

from typing import Optional

import asyncpg
from asyncpg import Pool

from ..config import get_settings
from ..models.params import PaginationParams
from ..models.response import PaginatorResponse
from .postgres import paginate_query


class DatabaseManager:
    """Manages database connections and pool."""

    def __init__(self, database_url: Optional[str] = None):
        self.pool: Optional[Pool] = None
        self._database_url = database_url or get_settings().database_url

    async def initialize(self) -> None:
        """Initialize the database connection pool."""
        if self.pool is None:
            settings = get_settings()
            self.pool = await asyncpg.create_pool(
                self._database_url,
                min_size=settings.db_pool_min_size,
                max_size=settings.db_pool_max_size,
                command_timeout=settings.db_command_timeout
            )

    async def close(self) -> None:
        """Close the database connection pool."""
        if self.pool:
            await self.pool.close()
            self.pool = None

    async def acquire(self):
        """Get a connection context manager from the pool."""
        if not self.pool:
            await self.initialize()
        return self.pool.acquire()

    async def paginate(self, base_query: str, params: PaginationParams) -> PaginatorResponse:
        """Paginate ``base_query`` on a pooled connection."""
        async with await self.acquire() as conn:
            return await paginate_query(conn, base_query, params)


# Global database manager instance
db_manager = DatabaseManager()


async def get_db_pool() -> Pool:
    """Get the database connection pool."""
    if not db_manager.pool:
        await db_manager.initialize()
    return db_manager.pool
