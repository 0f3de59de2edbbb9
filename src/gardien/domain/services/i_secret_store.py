"""
Secret store interface.

Maps content identifiers (IPIDs) to their decryption secrets.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from gardien.domain.value_objects.secret import Secret


class ISecretStore(ABC):
    """
    Abstract interface for the IPID -> Secret map.

    The purchase gate only reads; mutations belong to the admin surface.
    Implementations must make a completed mutation visible to every
    subsequent read.
    """

    @abstractmethod
    def get(self, ipid: str) -> Optional[Secret]:
        """Return the secret for an IPID, or None if not configured."""

    @abstractmethod
    def contains(self, ipid: str) -> bool:
        """Check whether an IPID has a secret configured."""

    @abstractmethod
    def put(self, ipid: str, secret: Secret) -> None:
        """Create or replace the secret for an IPID."""

    @abstractmethod
    def delete(self, ipid: str) -> bool:
        """
        Remove the secret for an IPID.

        Returns:
            True if an entry was removed, False if none existed
        """

    @abstractmethod
    def list_all(self) -> Dict[str, Secret]:
        """Return a snapshot copy of all entries."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of configured IPIDs."""
