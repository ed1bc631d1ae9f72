"""Bloglist API - Health and Middleware Smoke Tests"""

import pytest


@pytest.mark.asyncio
async def test_health_reports_database(test_client):
    response = await test_client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "connected"


@pytest.mark.asyncio
async def test_request_id_is_echoed(test_client):
    response = await test_client.get("/api/blogs", headers={"X-Request-ID": "abc123"})

    assert response.headers["X-Request-ID"] == "abc123"


@pytest.mark.asyncio
async def test_error_body_carries_request_id(test_client):
    response = await test_client.get("/api/blogs/not-a-uuid", headers={"X-Request-ID": "req42"})

    assert response.status_code == 400
    assert response.json()["request_id"] == "req42"
