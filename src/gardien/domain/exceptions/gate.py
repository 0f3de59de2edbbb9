"""
Secret release exceptions.

Raised by the purchase gate while deciding whether to disclose a secret.
None of them ever carries secret material.
"""

from gardien.domain.exceptions.base import GardienException


class SecretNotConfiguredError(GardienException):
    """Raised when no secret is configured for a content identifier."""

    def __init__(self, ipid: str):
        super().__init__(
            f"No decryption key configured for IPID: {ipid}",
            code="NOT_CONFIGURED",
        )
        self.ipid = ipid


class SecretNotFoundError(GardienException):
    """Raised when an admin operation targets an unknown content identifier."""

    def __init__(self, ipid: str):
        super().__init__(f"IPID {ipid} not found", code="ENTITY_NOT_FOUND")
        self.ipid = ipid


class InvalidSignatureError(GardienException):
    """Raised when the buyer signature does not verify."""

    def __init__(self, public_key: str):
        super().__init__(
            "Signature verification failed, request origin unknown",
            code="UNAUTHORIZED",
        )
        self.public_key = public_key


class PurchaseNotFoundError(GardienException):
    """Raised when no purchase record exists for the buyer."""

    def __init__(self, public_key: str, ipid: str):
        super().__init__("No purchase record found", code="PURCHASE_NOT_FOUND")
        self.public_key = public_key
        self.ipid = ipid
