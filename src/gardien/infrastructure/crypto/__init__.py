"""
Content encryption helpers.
"""

from gardien.infrastructure.crypto.content_cipher import (
    decrypt_content,
    encrypt_content,
    generate_secret,
)

__all__ = ["decrypt_content", "encrypt_content", "generate_secret"]
