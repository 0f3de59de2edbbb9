"""
Integration tests for admin key management API.

Usage:
    pytest tests/integration/api/test_key_routes.py
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from gardien.config.settings import Settings
from gardien.di.container import DIContainer, set_container
from gardien.main import create_app


class TestKeyRoutes:
    """Integration tests for /keys endpoints with bearer auth."""

    # ================================================================
    # Authentication
    # ================================================================

    @pytest.mark.parametrize(
        "headers",
        [{}, {"Authorization": "Bearer wrong"}, {"Authorization": "Basic abc"}],
    )
    async def test_list_requires_token(self, client, headers):
        """Test missing or wrong bearer token returns 401."""
        response = await client.get("/keys", headers=headers)

        assert response.status_code == 401
        assert response.json()["code"] == "ADMIN_UNAUTHORIZED"
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert "a" * 64 not in response.text

    async def test_add_requires_token(self, client, secret_store):
        response = await client.post(
            "/keys/add", json={"ipid": "content-9", "key": "k", "iv": "i"}
        )

        assert response.status_code == 401
        assert not secret_store.contains("content-9")

    async def test_delete_requires_token(self, client, ipid, secret_store):
        response = await client.delete(f"/keys/delete/{ipid}")

        assert response.status_code == 401
        assert secret_store.contains(ipid)

    # ================================================================
    # CRUD
    # ================================================================

    async def test_list(self, client, admin_headers, secrets):
        response = await client.get("/keys", headers=admin_headers)

        assert response.status_code == 200
        entries = {entry["ipid"]: entry for entry in response.json()}
        assert set(entries) == set(secrets)
        for ipid, secret in secrets.items():
            assert entries[ipid]["key"] == secret.key
            assert entries[ipid]["iv"] == secret.iv

    async def test_add_explicit(self, client, admin_headers, secret_store):
        """Test added secret is visible to later reads."""
        response = await client.post(
            "/keys/add",
            json={"ipid": "content-9", "key": "k9", "iv": "i9"},
            headers=admin_headers,
        )

        assert response.status_code == 201
        assert response.json() == {"success": True, "ipid": "content-9"}
        assert secret_store.get("content-9").key == "k9"

    async def test_add_generated(self, client, admin_headers, secret_store):
        """Test omitted key/IV are generated."""
        response = await client.post(
            "/keys/add", json={"ipid": "content-9"}, headers=admin_headers
        )

        assert response.status_code == 201
        assert len(secret_store.get("content-9").key) == 64

    async def test_add_enables_ping(self, client, admin_headers):
        """Test add is immediately visible to the release path."""
        assert (await client.post("/ping", json={"ipid": "content-9"})).status_code == 500

        await client.post("/keys/add", json={"ipid": "content-9"}, headers=admin_headers)

        assert (await client.post("/ping", json={"ipid": "content-9"})).status_code == 200

    async def test_add_half_secret(self, client, admin_headers):
        response = await client.post(
            "/keys/add", json={"ipid": "content-9", "key": "k"}, headers=admin_headers
        )

        assert response.status_code == 400
        assert response.json()["code"] == "BAD_REQUEST"

    async def test_add_missing_ipid(self, client, admin_headers):
        response = await client.post("/keys/add", json={}, headers=admin_headers)

        assert response.status_code == 400

    async def test_delete(self, client, admin_headers, ipid, secret_store):
        response = await client.delete(f"/keys/delete/{ipid}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"success": True, "ipid": ipid}
        assert not secret_store.contains(ipid)

    async def test_delete_unknown(self, client, admin_headers):
        response = await client.delete("/keys/delete/unknown", headers=admin_headers)

        assert response.status_code == 404
        assert response.json()["code"] == "ENTITY_NOT_FOUND"


class TestKeyRoutesAuthDisabled:
    """Integration tests for /keys endpoints with admin auth disabled."""

    @pytest_asyncio.fixture
    async def open_client(self, program_id, secret_store, ledger_lookup):
        settings = Settings(
            ENV="test",
            SOLANA_RPC_URL="http://localhost:8899",
            PROGRAM_ID=program_id,
            ADMIN_AUTH_MODE="disabled",
            LOG_LEVEL="WARNING",
        )
        container = DIContainer(
            settings=settings,
            secret_store=secret_store,
            ledger_lookup=ledger_lookup,
        )
        app = create_app(container=container)

        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as client:
            yield client

        set_container(None)

    async def test_list_without_token(self, open_client):
        response = await open_client.get("/keys")

        assert response.status_code == 200
        assert len(response.json()) == 2
