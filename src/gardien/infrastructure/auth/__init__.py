"""
Authentication adapters.
"""

from gardien.infrastructure.auth.admin_token import check_admin_token
from gardien.infrastructure.auth.ed25519_signature_verifier import (
    Ed25519SignatureVerifier,
)

__all__ = ["Ed25519SignatureVerifier", "check_admin_token"]
