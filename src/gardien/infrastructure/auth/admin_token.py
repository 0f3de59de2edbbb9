"""
Admin bearer token check.
"""

import hmac
from typing import Optional

from gardien.domain.exceptions import AdminAuthenticationError
from gardien.domain.value_objects.auth_mode import AdminAuthMode


def check_admin_token(mode: AdminAuthMode, authorization: Optional[str]) -> None:
    """
    Enforce the configured admin authentication mode.

    Args:
        mode: Configured admin auth mode
        authorization: Raw Authorization header value

    Raises:
        AdminAuthenticationError: If bearer mode and the token is wrong
    """
    if mode.is_disabled:
        return

    if not authorization:
        raise AdminAuthenticationError("Missing Authorization header")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise AdminAuthenticationError("Authorization header must be a Bearer token")

    if not hmac.compare_digest(token.strip().encode(), mode.token.encode()):
        raise AdminAuthenticationError("Invalid admin token")
