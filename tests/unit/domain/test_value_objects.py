"""
Unit tests for domain value objects.

Usage:
    pytest tests/unit/domain/test_value_objects.py
"""

import dataclasses

import pytest

from gardien.domain.value_objects import (
    AdminAuthMode,
    AuthModeKind,
    DerivedAddress,
    Secret,
)


class TestSecret:
    """Unit tests for Secret."""

    def test_to_dict(self):
        """Test response representation is unmodified."""
        secret = Secret(key="k" * 64, iv="i" * 32)

        assert secret.to_dict() == {"key": "k" * 64, "iv": "i" * 32}

    @pytest.mark.parametrize("key,iv", [("", "iv"), ("key", "")])
    def test_empty_rejected(self, key, iv):
        """Test empty key or IV is rejected."""
        with pytest.raises(ValueError):
            Secret(key=key, iv=iv)

    def test_immutable(self):
        """Test fields cannot be reassigned."""
        secret = Secret(key="k", iv="i")

        with pytest.raises(dataclasses.FrozenInstanceError):
            secret.key = "other"

    def test_repr_redacted(self):
        """Test repr never shows key material."""
        secret = Secret(key="topsecretkey", iv="topsecretiv")

        assert "topsecret" not in repr(secret)


class TestDerivedAddress:
    """Unit tests for DerivedAddress."""

    def test_to_bytes(self):
        """Test base58 address decodes to 32 bytes."""
        derived = DerivedAddress(address="11111111111111111111111111111111", bump=255)

        assert derived.to_bytes() == b"\x00" * 32
        assert str(derived) == "11111111111111111111111111111111"

    @pytest.mark.parametrize("bump", [-1, 256])
    def test_bump_out_of_range(self, bump):
        """Test bump must fit in a byte."""
        with pytest.raises(ValueError, match="Bump"):
            DerivedAddress(address="11111111111111111111111111111111", bump=bump)


class TestAdminAuthMode:
    """Unit tests for AdminAuthMode."""

    def test_disabled(self):
        mode = AdminAuthMode.disabled()

        assert mode.is_disabled
        assert mode.token is None

    def test_bearer(self):
        mode = AdminAuthMode.bearer("token")

        assert mode.kind == AuthModeKind.BEARER
        assert not mode.is_disabled

    def test_bearer_without_token(self):
        """Test bearer mode needs a token."""
        with pytest.raises(ValueError, match="requires"):
            AdminAuthMode(kind=AuthModeKind.BEARER, token="")

    def test_disabled_with_token(self):
        """Test disabled mode with a token is ambiguous."""
        with pytest.raises(ValueError, match="disabled"):
            AdminAuthMode(kind=AuthModeKind.DISABLED, token="token")

    def test_repr_hides_token(self):
        assert "token-value" not in repr(AdminAuthMode.bearer("token-value"))
