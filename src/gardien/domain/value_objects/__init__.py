"""
Domain value objects.
"""

from gardien.domain.value_objects.auth_mode import AdminAuthMode, AuthModeKind
from gardien.domain.value_objects.derived_address import DerivedAddress
from gardien.domain.value_objects.secret import Secret

__all__ = [
    "AdminAuthMode",
    "AuthModeKind",
    "DerivedAddress",
    "Secret",
]
