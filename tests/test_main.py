import pytest
from tiktok_downloader.config.settings import config


@pytest.mark.asyncio
async def test_health_check(client):
    """Test public health endpoint"""
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_root_reports_service(client):
    response = await client.get("/")
    assert response.status_code == 200
    body = response.json()
    assert body["service"] == config.api.title
    assert body["version"] == config.api.version


@pytest.mark.asyncio
async def test_request_id_header(client):
    response = await client.get("/health", headers={"X-Request-ID": "abc123"})
    assert response.headers["x-request-id"] == "abc123"


@pytest.mark.asyncio
async def test_options_returns_fixed_cors_headers(client, upstream):
    """Bare OPTIONS hits the preflight handler"""
    response = await client.options("/download")
    assert response.status_code == 200
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-methods"] == "POST, GET, OPTIONS"
    assert response.headers["access-control-allow-headers"] == "Content-Type"
    assert upstream.requests == []


@pytest.mark.asyncio
async def test_browser_preflight_allows_post(client):
    response = await client.options(
        "/download",
        headers={
            "Origin": "http://example.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert "POST" in response.headers["access-control-allow-methods"]
