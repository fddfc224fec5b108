"""Pytest configuration and shared fixtures for the paginator tests."""

import logging
from typing import Any, Dict, List

import pytest
from fastapi import APIRouter
from fastapi.testclient import TestClient

from paginator.config import Settings
from paginator.main import create_app
from paginator.models import Filter, FilterOperator, PaginationParams, SearchParams, SortDirection
from paginator.web import Pagination, paginated_response


# Disable logging for cleaner test output
logging.getLogger("asyncio").setLevel(logging.WARNING)
logging.getLogger("asyncpg").setLevel(logging.WARNING)


@pytest.fixture
def test_settings() -> Settings:
    """Settings used by the test application."""
    return Settings(
        app_name="Paginator Test API",
        log_level="ERROR"
    )


@pytest.fixture
def users() -> List[Dict[str, Any]]:
    """Twenty-five user rows with ascending ids."""
    return [
        {"id": i, "name": f"user{i}", "email": f"user{i}@example.com", "age": 18 + i}
        for i in range(1, 26)
    ]


@pytest.fixture
def filtered_params() -> PaginationParams:
    """Params with two filters, a search and a sort."""
    return PaginationParams(
        page=2,
        per_page=10,
        sort_by="created_at",
        sort_direction=SortDirection.DESC,
        filters=[
            Filter("status", FilterOperator.EQ, "active"),
            Filter("age", FilterOperator.GT, 18)
        ],
        search=SearchParams.new("john", ["name", "email"])
    )


@pytest.fixture
def users_router(users) -> APIRouter:
    """Router listing the ``users`` fixture through the pagination dependency."""
    router = APIRouter()

    @router.get("/users")
    async def list_users(params: Pagination):
        page = users[params.offset():params.offset() + params.limit()]
        return paginated_response(page, params, total=len(users), base_url="/users")

    @router.get("/params")
    async def echo_params(params: Pagination):
        return params.model_dump(mode="json")

    return router


@pytest.fixture
def client(users_router, test_settings) -> TestClient:
    """Test client for an app serving ``users_router``."""
    app = create_app(users_router, settings=test_settings)
    return TestClient(app, raise_server_exceptions=False)
