"""
Authentication domain exceptions.
"""

from gardien.domain.exceptions.base import GardienException


class AdminAuthenticationError(GardienException):
    """Raised when an admin request carries a missing or wrong token."""

    def __init__(self, message: str = "Admin authentication failed"):
        super().__init__(message, code="ADMIN_UNAUTHORIZED")
