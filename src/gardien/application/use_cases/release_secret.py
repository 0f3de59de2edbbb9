"""
Release Secret use case.

Discloses the decryption secret for a piece of content to a buyer who
proves wallet ownership and holds an on-chain purchase record.
"""

import asyncio
import time
from dataclasses import dataclass
from typing import Optional

from gardien.domain.exceptions import (
    DerivationError,
    InvalidSignatureError,
    LedgerNetworkError,
    MissingFieldError,
    PurchaseNotFoundError,
    SecretNotConfiguredError,
)
from gardien.domain.services.i_ledger_account_lookup import ILedgerAccountLookup
from gardien.domain.services.i_secret_store import ISecretStore
from gardien.domain.services.i_signature_verifier import ISignatureVerifier
from gardien.domain.value_objects.secret import Secret
from gardien.infrastructure.blockchain.program_address import (
    derive_purchase_addresses,
    parse_pubkey,
)
from gardien.infrastructure.monitoring import get_logger, metrics

logger = get_logger(__name__)


@dataclass
class ReleaseSecretResult:
    """Result of a granted secret release."""

    ipid: str
    buyer_public_key: str
    purchase_account: str
    secret: Secret


class ReleaseSecret:
    """
    Purchase-gated secret release.

    Business rules:
    - All four request fields must be present and non-empty
    - IPID must have a configured secret
    - Signature is verified BEFORE any ledger I/O
    - Listing PDA [b"ci", ipid] then purchase PDA [b"cp", buyer, listing]
    - Purchase account present on ledger => secret released unmodified
    - Nothing is disclosed on any other path
    """

    def __init__(
        self,
        secret_store: ISecretStore,
        signature_verifier: ISignatureVerifier,
        ledger_lookup: ILedgerAccountLookup,
        program_id: str,
        ledger_timeout: float = 10.0,
    ):
        """
        Initialize use case with dependencies.

        Args:
            secret_store: IPID -> Secret map (read only here)
            signature_verifier: Ed25519 detached signature verifier
            ledger_lookup: Account existence queries
            program_id: Content program ID (base58)
            ledger_timeout: Seconds before a lookup counts as failed
        """
        self.secret_store = secret_store
        self.signature_verifier = signature_verifier
        self.ledger_lookup = ledger_lookup
        self.program_id = parse_pubkey(program_id, "program id")
        self.ledger_timeout = ledger_timeout

    async def execute(
        self,
        buyer_public_key: Optional[str],
        signature: Optional[str],
        message: Optional[str],
        ipid: Optional[str],
    ) -> ReleaseSecretResult:
        """
        Execute secret release.

        Args:
            buyer_public_key: Buyer wallet address (base58)
            signature: Signature over message (base58)
            message: Signed message (UTF-8)
            ipid: Content identifier

        Returns:
            ReleaseSecretResult carrying the stored secret

        Raises:
            MissingFieldError: If any field is missing or empty
            SecretNotConfiguredError: If IPID has no secret
            InvalidSignatureError: If signature does not verify
            DerivationError: If PDA derivation fails
            LedgerNetworkError: If the ledger lookup fails or times out
            PurchaseNotFoundError: If no purchase account exists
        """
        # 1. Presence
        fields = {
            "buyerPublicKey": buyer_public_key,
            "signature": signature,
            "message": message,
            "ipid": ipid,
        }
        missing = [name for name, value in fields.items() if not value]
        if missing:
            metrics.secret_release_total.labels(outcome="bad_request").inc()
            raise MissingFieldError(missing)

        # 2. Configuration
        secret = self.secret_store.get(ipid)
        if secret is None:
            logger.info(f"No secret configured for IPID {ipid}")
            metrics.secret_release_total.labels(outcome="not_configured").inc()
            raise SecretNotConfiguredError(ipid)

        # 3. Signature (must precede ledger I/O)
        if not self.signature_verifier.verify_base58(
            message=message,
            signature=signature,
            public_key=buyer_public_key,
        ):
            logger.warning(
                f"Signature verification failed for {buyer_public_key}",
                extra={"buyer_public_key": buyer_public_key, "ipid": ipid},
            )
            metrics.secret_release_total.labels(outcome="unauthorized").inc()
            raise InvalidSignatureError(buyer_public_key)

        # 4. Derivation
        try:
            listing, purchase = derive_purchase_addresses(
                ipid=ipid,
                buyer_public_key=buyer_public_key,
                program_id=self.program_id,
            )
        except DerivationError as e:
            logger.error(f"Address derivation failed for {ipid}: {e.message}")
            metrics.secret_release_total.labels(outcome="error").inc()
            raise

        logger.debug(
            f"Derived listing {listing.address} (bump {listing.bump}), "
            f"purchase {purchase.address} (bump {purchase.bump})"
        )

        # 5. Ledger
        account = await self._lookup(purchase.address)

        if account is None:
            logger.info(f"No purchase record for buyer {buyer_public_key} on {ipid}")
            metrics.secret_release_total.labels(outcome="not_found").inc()
            raise PurchaseNotFoundError(buyer_public_key, ipid)

        # 6. Granted
        logger.info(
            f"Purchase verified for buyer {buyer_public_key}, releasing secret",
            extra={
                "buyer_public_key": buyer_public_key,
                "ipid": ipid,
                "purchase_account": purchase.address,
            },
        )
        metrics.secret_release_total.labels(outcome="granted").inc()

        return ReleaseSecretResult(
            ipid=ipid,
            buyer_public_key=buyer_public_key,
            purchase_account=purchase.address,
            secret=secret,
        )

    async def _lookup(self, address: str):
        """Query the purchase account under the configured timeout."""
        start_time = time.time()
        try:
            return await asyncio.wait_for(
                self.ledger_lookup.get_account(address),
                timeout=self.ledger_timeout,
            )
        except asyncio.TimeoutError:
            metrics.ledger_errors_total.labels(error_type="timeout").inc()
            metrics.secret_release_total.labels(outcome="error").inc()
            logger.error(f"Ledger lookup for {address} timed out")
            raise LedgerNetworkError(
                f"Ledger lookup timed out after {self.ledger_timeout}s",
                address=address,
            )
        except LedgerNetworkError as e:
            metrics.ledger_errors_total.labels(error_type="network").inc()
            metrics.secret_release_total.labels(outcome="error").inc()
            logger.error(f"Ledger lookup for {address} failed: {e.message}")
            raise
        finally:
            metrics.ledger_lookup_duration_seconds.observe(time.time() - start_time)
