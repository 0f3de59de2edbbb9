"""
Blockchain-related exceptions.

Defines exceptions for address derivation and ledger queries.
"""

from gardien.domain.exceptions.base import GardienException


class BlockchainError(GardienException):
    """Base exception for blockchain operations."""


class DerivationError(BlockchainError):
    """Raised when no program-derived address can be computed."""

    def __init__(self, message: str):
        super().__init__(message, code="DERIVATION_ERROR")


class LedgerNetworkError(BlockchainError):
    """Raised when the ledger lookup fails or times out."""

    def __init__(self, message: str, address: str | None = None):
        """
        Initialize ledger error.

        Args:
            message: Error message
            address: Account address being queried, if known
        """
        super().__init__(message, code="LEDGER_ERROR")
        self.address = address
