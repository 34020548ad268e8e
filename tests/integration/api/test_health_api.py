"""Integration tests for health endpoints and application-wide behavior."""

import pytest


class StubDatabase:
    def __init__(self, healthy: bool) -> None:
        self.healthy = healthy

    async def check_connection(self) -> bool:
        return self.healthy


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
@pytest.mark.parametrize("healthy,status_code", [(True, 200), (False, 503)])
async def test_ready(client, monkeypatch, healthy, status_code):
    monkeypatch.setattr(
        "talentfolio.infrastructure.api.app.get_db_manager", lambda: StubDatabase(healthy)
    )

    response = await client.get("/ready")

    assert response.status_code == status_code


@pytest.mark.asyncio
async def test_correlation_id_is_echoed(client):
    response = await client.get("/health", headers={"X-Correlation-ID": "cid_test123"})

    assert response.headers["X-Correlation-ID"] == "cid_test123"


@pytest.mark.asyncio
async def test_correlation_id_is_generated(client):
    response = await client.get("/health")

    assert response.headers["X-Correlation-ID"].startswith("cid_")
