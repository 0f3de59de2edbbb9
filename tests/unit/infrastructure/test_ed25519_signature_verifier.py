"""
Unit tests for Ed25519SignatureVerifier.

Tests detached signature verification and malformed input handling.

Usage:
    pytest tests/unit/infrastructure/test_ed25519_signature_verifier.py
"""

import base58
import pytest
from nacl.signing import SigningKey

from gardien.infrastructure.auth.ed25519_signature_verifier import (
    Ed25519SignatureVerifier,
)
from tests.helpers.sign_message import (
    new_keypair,
    sign_message,
    tamper,
    wallet_address,
)


class TestEd25519SignatureVerifier:
    """Unit tests for Ed25519SignatureVerifier."""

    @pytest.fixture
    def verifier(self) -> Ed25519SignatureVerifier:
        return Ed25519SignatureVerifier()

    @pytest.fixture
    def signer(self) -> SigningKey:
        return new_keypair()

    # ================================================================
    # Raw bytes verification
    # ================================================================

    @pytest.mark.parametrize("length", [0, 1, 32, 1000])
    def test_valid_signature_accepted(self, verifier, signer, length):
        """Test signature from the claimed key verifies for any message length."""
        message = bytes(range(256)) * 4
        message = message[:length]
        signature = signer.sign(message).signature

        assert verifier.verify(message, signature, bytes(signer.verify_key)) is True

    @pytest.mark.parametrize("length", [0, 1, 32, 1000])
    def test_signature_from_other_key_rejected(self, verifier, signer, length):
        """Test signature produced under a different keypair is rejected."""
        message = b"x" * length
        other = new_keypair()
        signature = other.sign(message).signature

        assert verifier.verify(message, signature, bytes(signer.verify_key)) is False

    def test_modified_message_rejected(self, verifier, signer):
        """Test signature does not verify a different message."""
        signature = signer.sign(b"original").signature

        assert verifier.verify(b"modified", signature, bytes(signer.verify_key)) is False

    def test_wrong_length_public_key_rejected(self, verifier, signer):
        """Test 31-byte public key returns False instead of raising."""
        signature = signer.sign(b"msg").signature

        assert verifier.verify(b"msg", signature, bytes(signer.verify_key)[:31]) is False

    def test_wrong_length_signature_rejected(self, verifier, signer):
        """Test truncated signature returns False instead of raising."""
        signature = signer.sign(b"msg").signature

        assert verifier.verify(b"msg", signature[:63], bytes(signer.verify_key)) is False

    # ================================================================
    # Base58 verification
    # ================================================================

    def test_base58_valid_signature(self, verifier, signer):
        """Test base58 transport form verifies."""
        message = "Unlock content"
        signature = sign_message(message, signer)

        assert verifier.verify_base58(message, signature, wallet_address(signer))

    def test_base58_tampered_signature(self, verifier, signer):
        """Test one flipped signature byte is rejected."""
        message = "Unlock content"
        signature = tamper(sign_message(message, signer), index=10)

        assert not verifier.verify_base58(message, signature, wallet_address(signer))

    def test_base58_utf8_message(self, verifier, signer):
        """Test non-ASCII messages are signed as UTF-8."""
        message = "解密请求 ✓"
        signature = sign_message(message, signer)

        assert verifier.verify_base58(message, signature, wallet_address(signer))

    @pytest.mark.parametrize(
        "signature,public_key",
        [
            ("not-base58!", None),
            (None, "0OIl"),
            ("", None),
            (None, ""),
        ],
    )
    def test_base58_malformed_input_rejected(
        self, verifier, signer, signature, public_key
    ):
        """Test undecodable or empty input returns False."""
        message = "msg"
        signature = signature if signature is not None else sign_message(message, signer)
        public_key = public_key if public_key is not None else wallet_address(signer)

        assert verifier.verify_base58(message, signature, public_key) is False

    def test_base58_short_public_key_rejected(self, verifier, signer):
        """Test decodable but short public key returns False."""
        message = "msg"
        short_key = base58.b58encode(bytes(signer.verify_key)[:16]).decode()

        assert not verifier.verify_base58(message, sign_message(message, signer), short_key)
