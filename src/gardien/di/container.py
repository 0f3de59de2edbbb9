"""
Dependency Injection Container for Gardien.

Manages all service instances and their dependencies.
"""

from typing import Optional

from gardien.application.use_cases.check_secret_configured import (
    CheckSecretConfigured,
)
from gardien.application.use_cases.manage_secrets import (
    AddSecret,
    DeleteSecret,
    ListSecrets,
)
from gardien.application.use_cases.release_secret import ReleaseSecret
from gardien.config.settings import Settings, get_settings
from gardien.domain.services.i_ledger_account_lookup import ILedgerAccountLookup
from gardien.domain.services.i_secret_store import ISecretStore
from gardien.domain.services.i_signature_verifier import ISignatureVerifier
from gardien.domain.value_objects.auth_mode import AdminAuthMode
from gardien.infrastructure.auth.ed25519_signature_verifier import (
    Ed25519SignatureVerifier,
)
from gardien.infrastructure.blockchain.solana_account_lookup import (
    SolanaAccountLookup,
)
from gardien.infrastructure.monitoring import get_logger
from gardien.infrastructure.storage.in_memory_secret_store import (
    InMemorySecretStore,
)

logger = get_logger(__name__)


class DIContainer:
    """
    Dependency Injection Container.

    Manages singleton instances of all services.
    Any service may be supplied up front (tests inject fakes).
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        secret_store: Optional[ISecretStore] = None,
        signature_verifier: Optional[ISignatureVerifier] = None,
        ledger_lookup: Optional[ILedgerAccountLookup] = None,
    ):
        """
        Initialize container.

        Args:
            settings: Settings (defaults to global settings)
            secret_store: Optional secret store override
            signature_verifier: Optional verifier override
            ledger_lookup: Optional ledger lookup override
        """
        self._settings = settings
        self._secret_store = secret_store
        self._signature_verifier = signature_verifier
        self._ledger_lookup = ledger_lookup

    async def initialize(self) -> None:
        """Initialize services eagerly and report configuration."""
        store = self.secret_store
        logger.info(f"Secret store ready with {store.count()} configured IPIDs")

        if self.admin_auth_mode.is_disabled:
            logger.warning(
                "Admin authentication is DISABLED (ADMIN_AUTH_MODE=disabled); "
                "key management endpoints are open"
            )
        else:
            logger.info("Admin authentication mode: bearer")

    async def shutdown(self) -> None:
        """Cleanup resources and close connections."""
        if self._ledger_lookup:
            await self._ledger_lookup.close()

    # Infrastructure Getters

    @property
    def settings(self) -> Settings:
        """Get settings."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def admin_auth_mode(self) -> AdminAuthMode:
        """Get resolved admin auth mode."""
        return self.settings.admin_auth_mode()

    @property
    def secret_store(self) -> ISecretStore:
        """Get secret store, seeded from KEYS_JSON / IVS_JSON."""
        if self._secret_store is None:
            self._secret_store = InMemorySecretStore(self.settings.initial_secrets())
        return self._secret_store

    @property
    def signature_verifier(self) -> ISignatureVerifier:
        """Get signature verifier."""
        if self._signature_verifier is None:
            self._signature_verifier = Ed25519SignatureVerifier()
        return self._signature_verifier

    @property
    def ledger_lookup(self) -> ILedgerAccountLookup:
        """Get Solana account lookup."""
        if self._ledger_lookup is None:
            self._ledger_lookup = SolanaAccountLookup(
                rpc_url=self.settings.SOLANA_RPC_URL,
                commitment=self.settings.SOLANA_COMMITMENT,
                timeout=self.settings.LEDGER_TIMEOUT_SECONDS,
            )
        return self._ledger_lookup

    # Use Case Getters

    def get_release_secret(self) -> ReleaseSecret:
        """Get release secret use case."""
        return ReleaseSecret(
            secret_store=self.secret_store,
            signature_verifier=self.signature_verifier,
            ledger_lookup=self.ledger_lookup,
            program_id=self.settings.PROGRAM_ID,
            ledger_timeout=self.settings.LEDGER_TIMEOUT_SECONDS,
        )

    def get_check_secret_configured(self) -> CheckSecretConfigured:
        """Get check secret configured use case."""
        return CheckSecretConfigured(secret_store=self.secret_store)

    def get_list_secrets(self) -> ListSecrets:
        """Get list secrets use case."""
        return ListSecrets(secret_store=self.secret_store)

    def get_add_secret(self) -> AddSecret:
        """Get add secret use case."""
        return AddSecret(secret_store=self.secret_store)

    def get_delete_secret(self) -> DeleteSecret:
        """Get delete secret use case."""
        return DeleteSecret(secret_store=self.secret_store)


# Global container instance
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """Get global DI container instance."""
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def set_container(container: Optional[DIContainer]) -> None:
    """Replace global DI container (application factory and tests)."""
    global _container
    _container = container


async def initialize_container() -> DIContainer:
    """Initialize and return DI container."""
    container = get_container()
    await container.initialize()
    return container


async def shutdown_container() -> None:
    """Shutdown DI container."""
    container = get_container()
    await container.shutdown()
