"""
Content cipher.

AES-256-CBC with PKCS7 padding, the scheme content is published under.
Keys and IVs travel as lowercase hex strings.
"""

import os

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from gardien.domain.value_objects.secret import Secret

KEY_SIZE = 32
IV_SIZE = 16


def _decode(key_hex: str, iv_hex: str) -> tuple[bytes, bytes]:
    """Decode and size-check hex key material."""
    key = bytes.fromhex(key_hex)
    iv = bytes.fromhex(iv_hex)

    if len(key) != KEY_SIZE:
        raise ValueError(f"Key must be {KEY_SIZE} bytes, got {len(key)}")

    if len(iv) != IV_SIZE:
        raise ValueError(f"IV must be {IV_SIZE} bytes, got {len(iv)}")

    return key, iv


def generate_secret() -> Secret:
    """Generate a fresh random key/IV pair."""
    return Secret(key=os.urandom(KEY_SIZE).hex(), iv=os.urandom(IV_SIZE).hex())


def encrypt_content(plaintext: bytes, key_hex: str, iv_hex: str) -> bytes:
    """
    Encrypt content.

    Args:
        plaintext: Raw content bytes
        key_hex: 256-bit key (hex)
        iv_hex: 128-bit IV (hex)

    Returns:
        Ciphertext bytes

    Raises:
        ValueError: If key or IV are malformed
    """
    key, iv = _decode(key_hex, iv_hex)

    padder = padding.PKCS7(algorithms.AES.block_size).padder()
    padded = padder.update(plaintext) + padder.finalize()

    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    return encryptor.update(padded) + encryptor.finalize()


def decrypt_content(ciphertext: bytes, key_hex: str, iv_hex: str) -> bytes:
    """
    Decrypt content.

    Args:
        ciphertext: Encrypted content bytes
        key_hex: 256-bit key (hex)
        iv_hex: 128-bit IV (hex)

    Returns:
        Plaintext bytes

    Raises:
        ValueError: If key/IV are malformed or padding is invalid
    """
    key, iv = _decode(key_hex, iv_hex)

    decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
    padded = decryptor.update(ciphertext) + decryptor.finalize()

    unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
    return unpadder.update(padded) + unpadder.finalize()
