"""
Ledger account lookup interface.

Defines the read-only account query the purchase gate consumes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class AccountInfo:
    """
    Ledger account record.

    Only existence matters to the purchase gate; the remaining fields are
    carried for logging and never interpreted.
    """

    address: str
    lamports: int
    owner: str
    data: bytes
    executable: bool = False


class ILedgerAccountLookup(ABC):
    """
    Abstract interface for querying accounts on the ledger.
    """

    @abstractmethod
    async def get_account(self, address: str) -> Optional[AccountInfo]:
        """
        Fetch the account stored at an address.

        Args:
            address: Account address (base58)

        Returns:
            AccountInfo if an account exists, None otherwise

        Raises:
            LedgerNetworkError: If the query fails
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections."""
