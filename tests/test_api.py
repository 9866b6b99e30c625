"""Tests for the HTTP surface — metadata, tool listing and invocation."""
from unittest.mock import AsyncMock, patch

import httpx
import pytest
import pytest_asyncio

from onboard.config import settings
from onboard.main import app


@pytest_asyncio.fixture
async def client():
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


class TestHealthAndMetadata:
    @pytest.mark.asyncio
    async def test_health(self, client):
        resp = await client.get("/health")
        assert resp.json() == {"ok": True}

    @pytest.mark.asyncio
    async def test_metadata(self, client):
        resp = await client.get("/metadata")
        assert resp.status_code == 200
        body = resp.json()
        assert body["title"] == "Onboard Scheduler DAIN Service"
        assert body["exampleQueries"][0]["queries"] == [
            "Good morning!", "Add a new employee.", "Remove an employee.",
        ]

    @pytest.mark.asyncio
    async def test_list_tools(self, client):
        resp = await client.get("/tools")
        ids = {t["id"] for t in resp.json()}
        assert "create-employee" in ids
        assert "get-weather" in ids

    @pytest.mark.asyncio
    async def test_describe_unknown_tool(self, client):
        resp = await client.get("/tools/nope")
        assert resp.status_code == 404


class TestInvokeTool:
    @pytest.mark.asyncio
    async def test_roster_round_trip(self, client, db):
        resp = await client.post("/tools/create-employee", json={"id": 1, "name": "Alice"})
        assert resp.status_code == 200
        assert resp.json()["data"] == {"id": 1, "name": "Alice", "availability": "None"}

        resp = await client.post("/tools/view-employee-userbase", json={})
        assert resp.json()["data"]["database"] == [{"id": 1, "name": "Alice", "availability": "None"}]
        assert resp.json()["ui"]["type"] == "table"

        resp = await client.post("/tools/remove-employee", json={"name": "Alice"})
        assert resp.json()["data"] == {"id": 0, "name": "removed"}

        resp = await client.post("/tools/view-employee-userbase")
        assert resp.json()["data"]["database"] == []

    @pytest.mark.asyncio
    async def test_validation_error_422(self, client):
        resp = await client.post("/tools/create-employee", json={"id": 1})
        assert resp.status_code == 422
        assert resp.json()["detail"][0]["loc"] == ["name"]

    @pytest.mark.asyncio
    async def test_unknown_tool_404(self, client):
        resp = await client.post("/tools/nope", json={})
        assert resp.status_code == 404

    @pytest.mark.asyncio
    async def test_handler_failure_500(self, client):
        with patch("onboard.store.select_employees", new_callable=AsyncMock,
                   side_effect=RuntimeError("store down")):
            resp = await client.post("/tools/view-employee-userbase", json={})
        assert resp.status_code == 500


class TestApiKey:
    @pytest.mark.asyncio
    async def test_missing_key_rejected(self, client, monkeypatch):
        monkeypatch.setattr(settings, "dain_api_key", "secret-key")
        resp = await client.get("/tools")
        assert resp.status_code == 401

    @pytest.mark.asyncio
    async def test_valid_key_accepted(self, client, monkeypatch):
        monkeypatch.setattr(settings, "dain_api_key", "secret-key")
        resp = await client.get("/tools", headers={"x-dain-api-key": "secret-key"})
        assert resp.status_code == 200

    @pytest.mark.asyncio
    async def test_health_open(self, client, monkeypatch):
        monkeypatch.setattr(settings, "dain_api_key", "secret-key")
        resp = await client.get("/health")
        assert resp.status_code == 200
