"""
FastAPI dependency injection.

Provides dependencies for FastAPI routes using the DI container.
"""

from typing import Optional

from fastapi import Header

from gardien.application.use_cases.check_secret_configured import (
    CheckSecretConfigured,
)
from gardien.application.use_cases.manage_secrets import (
    AddSecret,
    DeleteSecret,
    ListSecrets,
)
from gardien.application.use_cases.release_secret import ReleaseSecret
from gardien.di.container import get_container
from gardien.infrastructure.auth.admin_token import check_admin_token

# ================================================================
# Auth Dependencies
# ================================================================


def require_admin(authorization: Optional[str] = Header(default=None)) -> None:
    """
    Enforce admin authentication per configured mode.

    Raises:
        AdminAuthenticationError: If bearer mode and token is wrong
    """
    check_admin_token(get_container().admin_auth_mode, authorization)


# ================================================================
# Use Case Dependencies
# ================================================================


def get_release_secret() -> ReleaseSecret:
    """Get ReleaseSecret use case dependency."""
    return get_container().get_release_secret()


def get_check_secret_configured() -> CheckSecretConfigured:
    """Get CheckSecretConfigured use case dependency."""
    return get_container().get_check_secret_configured()


def get_list_secrets() -> ListSecrets:
    """Get ListSecrets use case dependency."""
    return get_container().get_list_secrets()


def get_add_secret() -> AddSecret:
    """Get AddSecret use case dependency."""
    return get_container().get_add_secret()


def get_delete_secret() -> DeleteSecret:
    """Get DeleteSecret use case dependency."""
    return get_container().get_delete_secret()
