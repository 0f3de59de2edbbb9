"""
API routes.
"""

from gardien.presentation.api.routes import decrypt, health, keys

__all__ = ["decrypt", "health", "keys"]
