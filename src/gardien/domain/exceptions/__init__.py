"""
Domain exceptions package.
"""

# Auth exceptions
from gardien.domain.exceptions.auth import AdminAuthenticationError

# Base exceptions
from gardien.domain.exceptions.base import (
    ConfigurationError,
    GardienException,
    MissingFieldError,
)

# Blockchain exceptions
from gardien.domain.exceptions.blockchain import (
    BlockchainError,
    DerivationError,
    LedgerNetworkError,
)

# Gate exceptions
from gardien.domain.exceptions.gate import (
    InvalidSignatureError,
    PurchaseNotFoundError,
    SecretNotConfiguredError,
    SecretNotFoundError,
)

__all__ = [
    # Base
    "GardienException",
    "MissingFieldError",
    "ConfigurationError",
    # Auth
    "AdminAuthenticationError",
    # Blockchain
    "BlockchainError",
    "DerivationError",
    "LedgerNetworkError",
    # Gate
    "SecretNotConfiguredError",
    "SecretNotFoundError",
    "InvalidSignatureError",
    "PurchaseNotFoundError",
]
