"""
Test fixtures and configuration.
"""

from typing import AsyncGenerator, Dict
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from gardien.config.settings import Settings
from gardien.di.container import DIContainer, set_container
from gardien.domain.services.i_ledger_account_lookup import (
    AccountInfo,
    ILedgerAccountLookup,
)
from gardien.domain.value_objects.secret import Secret
from gardien.infrastructure.storage.in_memory_secret_store import (
    InMemorySecretStore,
)
from gardien.main import create_app
from tests.helpers.sign_message import new_address, new_keypair, wallet_address

ADMIN_TOKEN = "test-admin-token"


@pytest.fixture
def program_id() -> str:
    """Content program ID for the test run."""
    return new_address()


@pytest.fixture
def ipid() -> str:
    """Configured content identifier."""
    return new_address()


@pytest.fixture
def other_ipid() -> str:
    """Second configured content identifier."""
    return new_address()


@pytest.fixture
def buyer():
    """Buyer signing key."""
    return new_keypair()


@pytest.fixture
def buyer_address(buyer) -> str:
    """Buyer wallet address."""
    return wallet_address(buyer)


@pytest.fixture
def secrets(ipid: str, other_ipid: str) -> Dict[str, Secret]:
    """Secrets configured in the store."""
    return {
        ipid: Secret(key="a" * 64, iv="b" * 32),
        other_ipid: Secret(key="c" * 64, iv="d" * 32),
    }


@pytest.fixture
def secret_store(secrets: Dict[str, Secret]) -> InMemorySecretStore:
    """In-memory store preloaded with test secrets."""
    return InMemorySecretStore(secrets)


@pytest.fixture
def purchase_account() -> AccountInfo:
    """A present purchase account."""
    return AccountInfo(
        address="placeholder",
        lamports=1_000_000,
        owner="placeholder",
        data=b"\x01" * 8,
    )


@pytest.fixture
def ledger_lookup(purchase_account: AccountInfo) -> AsyncMock:
    """Ledger fake that reports a purchase for every address."""
    lookup = AsyncMock(spec=ILedgerAccountLookup)
    lookup.get_account.return_value = purchase_account
    return lookup


@pytest.fixture
def settings(program_id: str) -> Settings:
    """Settings for tests (bearer admin auth)."""
    return Settings(
        ENV="test",
        SOLANA_RPC_URL="http://localhost:8899",
        PROGRAM_ID=program_id,
        LEDGER_TIMEOUT_SECONDS=1.0,
        ADMIN_AUTH_MODE="bearer",
        ADMIN_TOKEN=ADMIN_TOKEN,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def container(
    settings: Settings,
    secret_store: InMemorySecretStore,
    ledger_lookup: AsyncMock,
) -> DIContainer:
    """DI container wired with the in-memory store and ledger fake."""
    return DIContainer(
        settings=settings,
        secret_store=secret_store,
        ledger_lookup=ledger_lookup,
    )


@pytest_asyncio.fixture
async def client(container: DIContainer) -> AsyncGenerator[AsyncClient, None]:
    """Provide HTTP client for API testing."""
    app = create_app(container=container)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client

    set_container(None)


@pytest.fixture
def admin_headers() -> Dict[str, str]:
    """Authorization header for admin endpoints."""
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}
