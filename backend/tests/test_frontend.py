"""
Tests for the static fallback, health check and generic error shape.
"""
import pytest


@pytest.mark.asyncio
async def test_index_served_at_root(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert "Payroll" in resp.text


@pytest.mark.asyncio
async def test_unknown_path_serves_index(client):
    resp = await client.get("/employees/some/page")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")


@pytest.mark.asyncio
async def test_static_file_served(client):
    resp = await client.get("/index.html")
    assert resp.status_code == 200


@pytest.mark.asyncio
async def test_unknown_api_path_is_json_404(client):
    resp = await client.get("/api/unknown")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not found"}


@pytest.mark.asyncio
async def test_wrong_method_has_error_body(client):
    resp = await client.delete("/api/employees")
    assert resp.status_code == 405
    assert "error" in resp.json()


@pytest.mark.asyncio
async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
