"""
DerivedAddress value object - Program-derived address with its bump seed.
"""

from dataclasses import dataclass

import base58


@dataclass(frozen=True)
class DerivedAddress:
    """
    Program-derived address (PDA) and the bump that produced it.

    Recomputed on every request and never persisted.
    """

    address: str
    bump: int

    def __post_init__(self):
        """Validate bump range."""
        if not 0 <= self.bump <= 255:
            raise ValueError(f"Bump must fit in one byte, got {self.bump}")

    def to_bytes(self) -> bytes:
        """Return the raw 32-byte address, for use as a seed."""
        return base58.b58decode(self.address)

    def __str__(self) -> str:
        return self.address
