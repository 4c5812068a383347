from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from httpx import ASGITransport, AsyncClient

from moviebase.infrastructure.api.app import app


@pytest.mark.asyncio
async def test_health_check_endpoint():
    """Test standard health check endpoint."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data
    assert data["service"] == "MovieBase"
    assert response.headers["X-Request-ID"].startswith("req_")


@pytest.mark.asyncio
async def test_liveness_check_endpoint():
    """Test liveness probe endpoint."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.get("/live")

    assert response.status_code == 200
    assert response.json()["status"] == "alive"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("connected", "status_code", "status"),
    [(True, 200, "ready"), (False, 503, "not_ready")],
)
async def test_readiness_check_endpoint(connected, status_code, status):
    """Readiness reflects the database connection check."""
    db = MagicMock()
    db.check_connection = AsyncMock(return_value=connected)

    with patch(
        "moviebase.infrastructure.persistence.database.get_db_manager",
        return_value=db,
    ):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            response = await ac.get("/ready")

    assert response.status_code == status_code
    assert response.json()["status"] == status


@pytest.mark.asyncio
async def test_api_root():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.get("/api/v1")

    assert response.status_code == 200
    assert response.json()["name"] == "MovieBase"
