"""
Solana account lookup implementation.

Queries account existence via Solana JSON-RPC with proper lifecycle
management.
"""

import asyncio
import base64
from typing import Any, Dict, Optional

import httpx

from gardien.domain.exceptions import LedgerNetworkError
from gardien.domain.services.i_ledger_account_lookup import (
    AccountInfo,
    ILedgerAccountLookup,
)
from gardien.infrastructure.monitoring import get_logger

logger = get_logger(__name__)


class SolanaAccountLookup(ILedgerAccountLookup):
    """
    Read-only Solana account queries over JSON-RPC.

    Design:
    - Client is lazily initialized on first use
    - Lock ensures single client per instance
    - No retries: a failed lookup surfaces as LedgerNetworkError
    """

    def __init__(
        self,
        rpc_url: str,
        commitment: str = "confirmed",
        timeout: float = 10.0,
    ):
        """
        Initialize Solana account lookup.

        Args:
            rpc_url: Solana RPC endpoint URL
            commitment: Commitment level for reads
            timeout: Request timeout in seconds
        """
        self.rpc_url = rpc_url
        self.commitment = commitment
        self.timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None
        self._lock = asyncio.Lock()

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        timeout=self.timeout,
                        limits=httpx.Limits(
                            max_connections=100,
                            max_keepalive_connections=20,
                        ),
                    )
        return self._client

    async def get_account(self, address: str) -> Optional[AccountInfo]:
        """
        Fetch account info for an address.

        Args:
            address: Account address (base58)

        Returns:
            AccountInfo if the account exists, None otherwise

        Raises:
            LedgerNetworkError: On transport failure, RPC error or
                malformed response
        """
        payload = {
            "jsonrpc": "2.0",
            "id": 1,
            "method": "getAccountInfo",
            "params": [
                address,
                {"encoding": "base64", "commitment": self.commitment},
            ],
        }

        try:
            client = await self._ensure_client()
            response = await client.post(self.rpc_url, json=payload)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise LedgerNetworkError(
                f"RPC returned HTTP {e.response.status_code}", address=address
            )
        except httpx.RequestError as e:
            raise LedgerNetworkError(f"RPC connection error: {e}", address=address)
        except ValueError as e:
            raise LedgerNetworkError(f"RPC returned invalid JSON: {e}", address=address)

        if not isinstance(data, dict):
            raise LedgerNetworkError("Malformed RPC response", address=address)

        if "error" in data:
            raise LedgerNetworkError(f"RPC error: {data['error']}", address=address)

        return self._parse_account(address, data.get("result"))

    @staticmethod
    def _parse_account(
        address: str, result: Optional[Dict[str, Any]]
    ) -> Optional[AccountInfo]:
        """
        Parse getAccountInfo result.

        Args:
            address: Queried address
            result: RPC "result" object

        Returns:
            AccountInfo or None if value is null
        """
        if not isinstance(result, dict) or "value" not in result:
            raise LedgerNetworkError("Malformed getAccountInfo response", address=address)

        value = result["value"]
        if value is None:
            return None

        try:
            encoded, encoding = value["data"]
            if encoding != "base64":
                raise ValueError(f"unexpected data encoding {encoding}")
            return AccountInfo(
                address=address,
                lamports=int(value["lamports"]),
                owner=str(value["owner"]),
                data=base64.b64decode(encoded),
                executable=bool(value.get("executable", False)),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise LedgerNetworkError(f"Malformed account data: {e}", address=address)

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.info("Solana RPC client closed")
