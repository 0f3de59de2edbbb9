"""
Secret value object - Immutable content decryption material.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Secret:
    """
    Value object holding the symmetric key and IV for one IPID.

    Business rules:
    - Key and IV are opaque strings, never transformed by the gate
    - Both must be non-empty
    - Immutable once created
    """

    key: str
    iv: str

    def __post_init__(self):
        """Validate secret on creation."""
        if not self.key:
            raise ValueError("Secret key cannot be empty")

        if not self.iv:
            raise ValueError("Secret IV cannot be empty")

    def to_dict(self) -> dict:
        """Convert to the public response representation."""
        return {"key": self.key, "iv": self.iv}

    def __repr__(self) -> str:
        """Redacted representation, safe for logs."""
        return "Secret(key=<redacted>, iv=<redacted>)"
