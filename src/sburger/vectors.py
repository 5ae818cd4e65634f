"""Known-answer vectors for sBurger-256."""

from .cipher import SBurger256


def validate_vector(vec: dict) -> tuple[bool, str]:
    """Check one known-answer vector in both directions.

    Args:
        vec: Dict with key, plaintext, ciphertext, b and f entries

    Returns:
        Tuple of (is_correct, error_detail)
    """
    cipher = SBurger256(vec["key"])
    settings = cipher.derive_settings()

    if settings.b != vec["b"] or settings.f != vec["f"]:
        return False, (
            f"Settings mismatch: expected b={vec['b']} f={vec['f']}, "
            f"got b={settings.b} f={settings.f}"
        )

    ciphertext = bytes(cipher.encrypt(bytearray(vec["plaintext"])))
    if ciphertext != vec["ciphertext"]:
        return False, (
            f"Ciphertext mismatch: expected {vec['ciphertext'].hex()}, "
            f"got {ciphertext.hex()}"
        )

    plaintext = bytes(cipher.decrypt(bytearray(ciphertext)))
    if plaintext != vec["plaintext"]:
        return False, (
            f"Plaintext mismatch: expected {vec['plaintext'].hex()}, "
            f"got {plaintext.hex()}"
        )

    return True, ""


KNOWN_ANSWER_VECTORS = [
    # Text key; no block reversal, six active byte steps
    {
        "name": "testkey_text",
        "key": b"TESTKEY_TESTKEY_TESTKEY_TESTKEY_",
        "b": (3, 6, 10, 2),
        "f": (6, 6, 6, 6),
        "plaintext": b"Hello, sBurger-256 cipher test!!",
        "ciphertext": bytes.fromhex(
            "ee87d6cab5ceb2f9e497c8c1bf90bfb8"
            "93d49ac5b392faefd4c2cec3a996b3ab"
        ),
    },
    # Byte sum 32 (< 1000): digits read as "0032"; only the key XOR is active
    {
        "name": "short_sum",
        "key": bytes([0x01] * 32),
        "b": (2, 2, 5, 3),
        "f": (8, 8, 8, 8),
        "plaintext": bytes(range(16)),
        "ciphertext": bytes.fromhex("010003020504070609080b0a0d0c0f0e"),
    },
    # Counting key; block reversed on entry, short block
    {
        "name": "counting_reversed",
        "key": bytes(range(32)),
        "b": (2, 6, 9, 6),
        "f": (2, 9, 1, 2),
        "plaintext": b"abcd",
        "ciphertext": bytes.fromhex("ce40c345"),
    },
]
