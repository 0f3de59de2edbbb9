"""
AdminAuthMode value object - Explicit admin authentication mode.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class AuthModeKind(str, Enum):
    """Supported admin authentication modes."""

    DISABLED = "disabled"
    BEARER = "bearer"


@dataclass(frozen=True)
class AdminAuthMode:
    """
    Admin surface authentication mode.

    Business rules:
    - DISABLED never carries a token
    - BEARER always carries a non-empty token
    """

    kind: AuthModeKind
    token: Optional[str] = None

    def __post_init__(self):
        """Reject ambiguous combinations."""
        if self.kind == AuthModeKind.BEARER and not self.token:
            raise ValueError("Bearer admin auth requires a non-empty token")

        if self.kind == AuthModeKind.DISABLED and self.token:
            raise ValueError("Admin auth is disabled but a token was supplied")

    @classmethod
    def disabled(cls) -> "AdminAuthMode":
        return cls(kind=AuthModeKind.DISABLED)

    @classmethod
    def bearer(cls, token: str) -> "AdminAuthMode":
        return cls(kind=AuthModeKind.BEARER, token=token)

    @property
    def is_disabled(self) -> bool:
        return self.kind == AuthModeKind.DISABLED

    def __repr__(self) -> str:
        return f"AdminAuthMode(kind={self.kind.value})"
