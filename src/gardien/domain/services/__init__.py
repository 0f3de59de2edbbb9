"""
Domain service interfaces.
"""

from gardien.domain.services.i_ledger_account_lookup import (
    AccountInfo,
    ILedgerAccountLookup,
)
from gardien.domain.services.i_secret_store import ISecretStore
from gardien.domain.services.i_signature_verifier import ISignatureVerifier

__all__ = [
    "AccountInfo",
    "ILedgerAccountLookup",
    "ISecretStore",
    "ISignatureVerifier",
]
