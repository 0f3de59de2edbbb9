"""
Check Secret Configured use case.

Pre-flight check used by clients before asking for a signature.
"""

from gardien.domain.services.i_secret_store import ISecretStore


class CheckSecretConfigured:
    """Report whether an IPID has a secret configured."""

    def __init__(self, secret_store: ISecretStore):
        self.secret_store = secret_store

    def execute(self, ipid: str) -> bool:
        """
        Check configuration for an IPID.

        Args:
            ipid: Content identifier

        Returns:
            True if a secret is configured
        """
        if not ipid:
            return False
        return self.secret_store.contains(ipid)
