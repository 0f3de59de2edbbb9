"""
Blockchain infrastructure: PDA derivation and Solana account queries.
"""

from gardien.infrastructure.blockchain.program_address import (
    derive_listing_address,
    derive_program_address,
    derive_purchase_addresses,
    parse_pubkey,
)
from gardien.infrastructure.blockchain.solana_account_lookup import (
    SolanaAccountLookup,
)

__all__ = [
    "SolanaAccountLookup",
    "derive_listing_address",
    "derive_program_address",
    "derive_purchase_addresses",
    "parse_pubkey",
]
