"""
Secret management use cases.

Admin operations over the secret store: list, add, delete.
"""

from typing import Dict, Optional

from gardien.domain.exceptions import MissingFieldError, SecretNotFoundError
from gardien.domain.services.i_secret_store import ISecretStore
from gardien.domain.value_objects.secret import Secret
from gardien.infrastructure.crypto.content_cipher import generate_secret
from gardien.infrastructure.monitoring import get_logger

logger = get_logger(__name__)


class ListSecrets:
    """List all configured IPIDs with their secrets."""

    def __init__(self, secret_store: ISecretStore):
        self.secret_store = secret_store

    def execute(self) -> Dict[str, Secret]:
        return self.secret_store.list_all()


class AddSecret:
    """
    Create or replace the secret for an IPID.

    Business rules:
    - IPID is required
    - Key and IV are either both given or both omitted
    - When omitted, a fresh AES-256-CBC key/IV pair is generated
    """

    def __init__(self, secret_store: ISecretStore):
        self.secret_store = secret_store

    def execute(
        self,
        ipid: Optional[str],
        key: Optional[str] = None,
        iv: Optional[str] = None,
    ) -> Secret:
        """
        Store a secret.

        Args:
            ipid: Content identifier
            key: Optional key
            iv: Optional IV

        Returns:
            Stored Secret

        Raises:
            MissingFieldError: If ipid is missing or only one of key/iv given
        """
        if not ipid:
            raise MissingFieldError(["ipid"])

        if bool(key) != bool(iv):
            raise MissingFieldError(["iv"] if key else ["key"])

        secret = Secret(key=key, iv=iv) if key else generate_secret()
        replaced = self.secret_store.contains(ipid)
        self.secret_store.put(ipid, secret)

        logger.info(f"{'Replaced' if replaced else 'Added'} secret for IPID {ipid}")
        return secret


class DeleteSecret:
    """Remove the secret for an IPID."""

    def __init__(self, secret_store: ISecretStore):
        self.secret_store = secret_store

    def execute(self, ipid: str) -> None:
        """
        Delete a secret.

        Raises:
            SecretNotFoundError: If IPID is not configured
        """
        if not self.secret_store.delete(ipid):
            raise SecretNotFoundError(ipid)

        logger.info(f"Deleted secret for IPID {ipid}")
