"""
Signature verifier service interface.
"""

from abc import ABC, abstractmethod


class ISignatureVerifier(ABC):
    """
    Abstract service interface for buyer signature verification.

    Buyer signs an arbitrary message with their wallet private key;
    the backend checks the detached signature against the claimed key.
    """

    @abstractmethod
    def verify(self, message: bytes, signature: bytes, public_key: bytes) -> bool:
        """
        Verify a detached signature.

        Args:
            message: Signed message bytes
            signature: Raw 64-byte signature
            public_key: Raw 32-byte public key

        Returns:
            True if signature is valid, False otherwise (never raises)
        """

    @abstractmethod
    def verify_base58(self, message: str, signature: str, public_key: str) -> bool:
        """
        Verify a detached signature in transport encoding.

        Args:
            message: Signed message (UTF-8 text)
            signature: Signature (base58 encoded)
            public_key: Wallet public key (base58 encoded)

        Returns:
            True if signature is valid, False otherwise (never raises)
        """
