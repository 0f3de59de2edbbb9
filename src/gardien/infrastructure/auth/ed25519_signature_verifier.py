"""
Solana wallet signature verifier.

Implements detached Ed25519 signature verification.
"""

import base58
from nacl.exceptions import BadSignatureError
from nacl.signing import VerifyKey

from gardien.domain.services.i_signature_verifier import ISignatureVerifier

PUBLIC_KEY_LENGTH = 32
SIGNATURE_LENGTH = 64


class Ed25519SignatureVerifier(ISignatureVerifier):
    """
    Solana wallet signature verification using Ed25519.

    Verifies the buyer controls the claimed keypair. Malformed input
    is reported as an invalid signature, never as an exception.
    """

    def verify(self, message: bytes, signature: bytes, public_key: bytes) -> bool:
        """
        Verify a detached Ed25519 signature.

        Args:
            message: Signed message bytes (may be empty)
            signature: Raw 64-byte signature
            public_key: Raw 32-byte public key

        Returns:
            True if signature is valid, False otherwise
        """
        if len(public_key) != PUBLIC_KEY_LENGTH:
            return False

        if len(signature) != SIGNATURE_LENGTH:
            return False

        try:
            VerifyKey(public_key).verify(message, signature)
            return True
        except (BadSignatureError, ValueError, TypeError):
            return False

    def verify_base58(self, message: str, signature: str, public_key: str) -> bool:
        """
        Verify a Solana wallet signature in transport encoding.

        Args:
            message: Original message that was signed
            signature: Signature (base58 encoded)
            public_key: Wallet address (base58 encoded)

        Returns:
            True if signature is valid, False otherwise
        """
        try:
            public_key_bytes = base58.b58decode(public_key)
            signature_bytes = base58.b58decode(signature)
        except ValueError:
            return False

        return self.verify(message.encode("utf-8"), signature_bytes, public_key_bytes)
