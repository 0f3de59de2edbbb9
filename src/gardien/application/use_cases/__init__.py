"""
Application use cases.
"""

from gardien.application.use_cases.check_secret_configured import (
    CheckSecretConfigured,
)
from gardien.application.use_cases.manage_secrets import (
    AddSecret,
    DeleteSecret,
    ListSecrets,
)
from gardien.application.use_cases.release_secret import (
    ReleaseSecret,
    ReleaseSecretResult,
)

__all__ = [
    "AddSecret",
    "CheckSecretConfigured",
    "DeleteSecret",
    "ListSecrets",
    "ReleaseSecret",
    "ReleaseSecretResult",
]
