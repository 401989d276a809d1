"""
Health endpoint tests using pytest-asyncio and httpx.AsyncClient.
"""

import pytest

from infiniti_cms.services import health_service


@pytest.fixture
def patched_session_maker(monkeypatch, test_session_maker):
    monkeypatch.setattr(health_service, "get_session_maker", lambda: test_session_maker)


async def test_health_endpoint(test_client, patched_session_maker):
    """Test the health check endpoint returns expected structure."""
    response = await test_client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()

    assert data["status"] == "ok"
    assert data["service"] == "Infiniti CMS"
    assert data["version"] == "0.1.0"
    assert data["uptime"].startswith("PT")
    assert data["checks"] == {"database": "ok"}


async def test_root_health_endpoint(test_client, patched_session_maker):
    response = await test_client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] in ["ok", "degraded"]


async def test_health_is_degraded_when_database_check_fails(test_client, patched_session_maker, monkeypatch):
    async def failing_check(self):
        return False

    monkeypatch.setattr(health_service.HealthRepository, "check_database", failing_check)

    response = await test_client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "degraded"
    assert data["checks"] == {"database": "error"}
