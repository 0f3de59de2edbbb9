"""
Dependency Injection module for Gardien.

Provides container and dependency functions for FastAPI routes.
"""

from gardien.di.container import (
    DIContainer,
    get_container,
    initialize_container,
    set_container,
    shutdown_container,
)
from gardien.di.dependencies import (
    get_add_secret,
    get_check_secret_configured,
    get_delete_secret,
    get_list_secrets,
    get_release_secret,
    require_admin,
)

__all__ = [
    # Container
    "DIContainer",
    "get_container",
    "initialize_container",
    "set_container",
    "shutdown_container",
    # Dependencies
    "get_release_secret",
    "get_check_secret_configured",
    "get_list_secrets",
    "get_add_secret",
    "get_delete_secret",
    "require_admin",
]
