"""Message-level helpers built on top of the sBurger-256 block cipher.

These sit outside the cipher core: the core only ever sees one block of at
most 32 bytes and knows nothing about padding or passphrases.
"""

from __future__ import annotations

import logging

from Crypto.Hash import SHA256
from Crypto.Util.Padding import pad, unpad

from .cipher import SBurger256
from .errors import InvalidLengthError, MissingInputError
from .utils import chunk_blocks

logger = logging.getLogger(__name__)

BLOCK_SIZE = SBurger256.MAX_BLOCK_SIZE


def derive_key(passphrase: str, encoding: str = "utf-8") -> bytes:
    """Derive a 32-byte key from a passphrase with SHA-256.

    Args:
        passphrase: Arbitrary text
        encoding: Text encoding applied before hashing

    Returns:
        32-byte key
    """
    if passphrase is None:
        raise MissingInputError("Passphrase must not be None")
    return SHA256.new(passphrase.encode(encoding)).digest()


def new_cipher(key: bytes) -> SBurger256:
    """Create a cipher for ``key`` with its settings already derived."""
    cipher = SBurger256(key)
    cipher.derive_settings()
    return cipher


def pad_message(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """Apply PKCS#7 padding so the length becomes a multiple of block_size.

    An already aligned message gains a full block of padding.
    """
    return pad(bytes(data), block_size, style="pkcs7")


def unpad_message(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """Strip PKCS#7 padding.

    Raises:
        ValueError: If the padding is malformed
    """
    return unpad(bytes(data), block_size, style="pkcs7")


def encrypt_message(
    cipher: SBurger256,
    data: bytes,
    block_size: int = BLOCK_SIZE,
) -> bytes:
    """Pad and encrypt an arbitrary-length message block by block.

    Args:
        cipher: Cipher with settings derived
        data: Plaintext of any length (empty allowed)
        block_size: Block size in bytes (1..32)

    Returns:
        Ciphertext, a non-zero multiple of block_size long
    """
    if data is None:
        raise MissingInputError("Message must not be None")
    _check_block_size(block_size)

    padded = pad_message(data, block_size)
    out = bytearray()
    for block in chunk_blocks(padded, block_size):
        out += cipher.encrypt(bytearray(block))

    logger.debug("Encrypted %d bytes into %d blocks", len(data), len(padded) // block_size)
    return bytes(out)


def decrypt_message(
    cipher: SBurger256,
    data: bytes,
    block_size: int = BLOCK_SIZE,
) -> bytes:
    """Decrypt a padded ciphertext and strip the padding.

    Args:
        cipher: Cipher with settings derived
        data: Ciphertext produced by encrypt_message
        block_size: Block size used for encryption

    Returns:
        Original plaintext

    Raises:
        InvalidLengthError: If data length is not a non-zero multiple of block_size
        ValueError: If the decrypted padding is malformed (e.g. wrong key)
    """
    if data is None:
        raise MissingInputError("Ciphertext must not be None")
    _check_block_size(block_size)
    if len(data) == 0 or len(data) % block_size != 0:
        raise InvalidLengthError(
            f"Ciphertext length must be a non-zero multiple of {block_size}, got {len(data)}"
        )

    out = bytearray()
    for block in chunk_blocks(data, block_size):
        out += cipher.decrypt(bytearray(block))

    return unpad_message(bytes(out), block_size)


def _check_block_size(block_size: int) -> None:
    if not 1 <= block_size <= BLOCK_SIZE:
        raise ValueError(f"block_size must be 1..{BLOCK_SIZE}, got {block_size}")
