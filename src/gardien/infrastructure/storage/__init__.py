"""
Secret storage adapters.
"""

from gardien.infrastructure.storage.in_memory_secret_store import (
    InMemorySecretStore,
)

__all__ = ["InMemorySecretStore"]
