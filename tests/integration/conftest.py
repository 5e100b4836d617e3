"""
Integration Test Fixtures.

Fixtures for integration tests - the real application over a real
(in-memory) SQLite database. These build on the root conftest.py
database fixtures.
"""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from modules.backend.core.database import Database
from modules.backend.main import create_app


# =============================================================================
# API Client Fixtures
# =============================================================================


@pytest.fixture
async def client(database: Database) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client bound to the test database.

    The storage handle is passed to create_app, so requests go through the
    real get_db_session dependency.

    Usage:
        async def test_list(client: AsyncClient):
            response = await client.get("/todos")
            assert response.status_code == 200
    """
    app = create_app(database=database)

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client


# =============================================================================
# API Response Assertion Helpers
# =============================================================================


class ApiAssertions:
    """Helper class for API response assertions."""

    @staticmethod
    def assert_headers(response: Any) -> None:
        """Assert the JSON and CORS headers every response carries."""
        assert response.headers["content-type"] == "application/json"
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["access-control-allow-methods"] == "GET, POST, DELETE, OPTIONS"
        assert response.headers["access-control-allow-headers"] == "Content-Type"

    @staticmethod
    def assert_success(response: Any, expected_status: int = 200) -> Any:
        """
        Assert API response is successful.

        Returns:
            Response JSON data
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        ApiAssertions.assert_headers(response)
        return response.json()

    @staticmethod
    def assert_error(
        response: Any,
        expected_status: int,
        expected_message: str,
    ) -> dict[str, Any]:
        """
        Assert API response is an error with the given message.

        Returns:
            Response JSON data
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        ApiAssertions.assert_headers(response)
        data = response.json()
        assert data == {"error": expected_message}
        return data


@pytest.fixture
def api() -> ApiAssertions:
    """Provide API assertion helpers."""
    return ApiAssertions()


@pytest.fixture
def create_todo(client: AsyncClient):
    """
    Create a todo through the API and return its id.

    Usage:
        async def test_x(create_todo):
            todo_id = await create_todo("Buy milk")
    """

    async def _create(text: str) -> int:
        response = await client.post("/todos", json={"todo": text})
        assert response.status_code == 201, response.text
        return response.json()["id"]

    return _create
