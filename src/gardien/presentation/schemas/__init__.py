"""
API request/response schemas.
"""

from gardien.presentation.schemas.decrypt_schemas import (
    DecryptRequest,
    DecryptResponse,
    PingRequest,
    PingResponse,
)
from gardien.presentation.schemas.key_schemas import (
    AddKeyRequest,
    KeyEntry,
    KeyMutationResponse,
)

__all__ = [
    "AddKeyRequest",
    "DecryptRequest",
    "DecryptResponse",
    "KeyEntry",
    "KeyMutationResponse",
    "PingRequest",
    "PingResponse",
]
