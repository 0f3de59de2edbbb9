"""
In-memory secret store.

Volatile IPID -> Secret map shared by the purchase gate and the admin
surface. Contents are lost on restart.
"""

import threading
from typing import Dict, Mapping, Optional

from gardien.domain.services.i_secret_store import ISecretStore
from gardien.domain.value_objects.secret import Secret
from gardien.infrastructure.monitoring import metrics


class InMemorySecretStore(ISecretStore):
    """
    Thread-safe in-process secret store.

    Every operation takes the same lock, so a completed put/delete is
    visible to any later get.
    """

    def __init__(self, initial: Optional[Mapping[str, Secret]] = None):
        """
        Initialize store.

        Args:
            initial: Optional secrets to preload
        """
        self._secrets: Dict[str, Secret] = dict(initial or {})
        self._lock = threading.Lock()
        metrics.configured_secrets.set(len(self._secrets))

    def get(self, ipid: str) -> Optional[Secret]:
        with self._lock:
            return self._secrets.get(ipid)

    def contains(self, ipid: str) -> bool:
        with self._lock:
            return ipid in self._secrets

    def put(self, ipid: str, secret: Secret) -> None:
        if not ipid:
            raise ValueError("IPID cannot be empty")

        with self._lock:
            self._secrets[ipid] = secret
            metrics.configured_secrets.set(len(self._secrets))

    def delete(self, ipid: str) -> bool:
        with self._lock:
            removed = self._secrets.pop(ipid, None) is not None
            metrics.configured_secrets.set(len(self._secrets))
            return removed

    def list_all(self) -> Dict[str, Secret]:
        with self._lock:
            return dict(self._secrets)

    def count(self) -> int:
        with self._lock:
            return len(self._secrets)
