"""
Program-derived address utilities.

Helper functions for deriving the listing and purchase record addresses
owned by the content program.
"""

import hashlib
from typing import Sequence, Tuple

import base58
from solders.pubkey import Pubkey

from gardien.domain.exceptions import DerivationError
from gardien.domain.value_objects.derived_address import DerivedAddress

MAX_SEEDS = 16
MAX_SEED_LENGTH = 32

PDA_MARKER = b"ProgramDerivedAddress"

LISTING_SEED = b"ci"
PURCHASE_SEED = b"cp"


def parse_pubkey(value: str, label: str) -> Pubkey:
    """
    Parse a base58 public key.

    Args:
        value: Base58 encoded 32-byte key
        label: Name used in the error message

    Returns:
        Parsed Pubkey

    Raises:
        DerivationError: If value is not a valid 32-byte key
    """
    try:
        raw = base58.b58decode(value)
    except ValueError as e:
        raise DerivationError(f"Invalid {label} {value!r}: {e}")

    if len(raw) != 32:
        raise DerivationError(
            f"Invalid {label} {value!r}: expected 32 bytes, got {len(raw)}"
        )
    return Pubkey.from_bytes(raw)


def derive_program_address(
    seeds: Sequence[bytes],
    program_id: Pubkey,
) -> DerivedAddress:
    """
    Find the canonical program-derived address for a set of seeds.

    Tries bump seeds from 255 down to 0 and returns the first one whose
    hash falls off the Ed25519 curve.

    Args:
        seeds: Ordered seed byte strings
        program_id: Owning program

    Returns:
        DerivedAddress with address and bump

    Raises:
        DerivationError: If seeds are out of bounds or no bump yields an
            off-curve address
    """
    if len(seeds) >= MAX_SEEDS:
        raise DerivationError(
            f"Too many seeds: {len(seeds)} (max {MAX_SEEDS - 1} plus bump)"
        )

    for seed in seeds:
        if len(seed) > MAX_SEED_LENGTH:
            raise DerivationError(
                f"Seed length {len(seed)} exceeds {MAX_SEED_LENGTH} bytes"
            )

    for bump in range(255, -1, -1):
        hasher = hashlib.sha256()
        for seed in seeds:
            hasher.update(seed)
        hasher.update(bytes([bump]))
        hasher.update(bytes(program_id))
        hasher.update(PDA_MARKER)

        candidate = Pubkey.from_bytes(hasher.digest())
        if candidate.is_on_curve():
            continue
        return DerivedAddress(address=str(candidate), bump=bump)

    raise DerivationError("Unable to find a viable program address bump seed")


def derive_listing_address(ipid: str, program_id: Pubkey) -> DerivedAddress:
    """
    Derive the content listing PDA: [b"ci", ipid_pubkey].

    Args:
        ipid: Content identifier (base58 public key)
        program_id: Content program

    Returns:
        Listing DerivedAddress
    """
    ipid_key = parse_pubkey(ipid, "content identifier")
    return derive_program_address([LISTING_SEED, bytes(ipid_key)], program_id)


def derive_purchase_addresses(
    ipid: str,
    buyer_public_key: str,
    program_id: Pubkey,
) -> Tuple[DerivedAddress, DerivedAddress]:
    """
    Derive listing and purchase record PDAs for a buyer.

    Purchase PDA seeds: [b"cp", buyer_pubkey, listing_pda].

    Args:
        ipid: Content identifier (base58 public key)
        buyer_public_key: Buyer wallet address (base58)
        program_id: Content program

    Returns:
        Tuple of (listing_address, purchase_address)

    Raises:
        DerivationError: If any input is invalid or derivation fails
    """
    listing = derive_listing_address(ipid, program_id)
    buyer_key = parse_pubkey(buyer_public_key, "buyer public key")

    purchase = derive_program_address(
        [PURCHASE_SEED, bytes(buyer_key), listing.to_bytes()],
        program_id,
    )
    return listing, purchase
