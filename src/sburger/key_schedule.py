"""
sBurger-256 key schedule.

Turns a 32-byte key into eight small integers that select which operations
the transformation network applies:

  b[0..3]  digit of the key-byte sum + count of a key-selected bit value
           in one 2-bit window of a pivot byte       (each 0..11)
  f[0..3]  leading decimal digit of the sum of one 8-byte key chunk
                                                     (each 0..9)

Derivation steps:
  1. total = sum(key), as decimal digits zero-padded to at least 4 places
  2. position = last digit + second-to-last digit        (0..18)
  3. pivot = key[position], split into 8 bits MSB first
  4. target bit value = 0 if pivot is odd, else 1
  5. b[i] = digits[i] + count(target in bits[2i], bits[2i+1])
  6. f[i] = first digit of sum(key[8i:8i+8])

Byte sums below 1000 have fewer than 4 digits; the missing leading digits
are treated as zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import InvalidLengthError, KeyNotSetError
from .primitives import byte_to_bits, count_bits, decimal_digits, sum_bytes

KEY_LENGTH = 32
CHUNK_SIZE = 8
PARAM_COUNT = 4

# Minimum number of digits read from the key-byte sum
SUM_DIGITS = 4


@dataclass(frozen=True)
class CipherSettings:
    """Parameters derived from one key; immutable once computed."""

    b: tuple[int, int, int, int]
    f: tuple[int, int, int, int]

    def __post_init__(self) -> None:
        """Validate parameter shapes and ranges."""
        if len(self.b) != PARAM_COUNT or len(self.f) != PARAM_COUNT:
            raise ValueError(
                f"Expected {PARAM_COUNT} b and f values, got {len(self.b)} and {len(self.f)}"
            )
        if not all(0 <= v <= 11 for v in self.b):
            raise ValueError(f"b values must be in 0..11, got {self.b}")
        if not all(0 <= v <= 9 for v in self.f):
            raise ValueError(f"f values must be in 0..9, got {self.f}")

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to dictionary for serialization."""
        return {"b": list(self.b), "f": list(self.f)}


def is_unset(key: bytes) -> bool:
    """True when every key byte is zero (the "never assigned" sentinel)."""
    return not any(key)


def pivot_position(total: int) -> int:
    """Index of the pivot byte: sum of the last two digits of ``total``."""
    digits = decimal_digits(total, SUM_DIGITS)
    return digits[-1] + digits[-2]


def derive_settings(key: bytes) -> CipherSettings:
    """
    Derive the network parameters from a 32-byte key.

    Args:
        key: 32-byte key

    Returns:
        CipherSettings with b and f populated

    Raises:
        InvalidLengthError: If key is not 32 bytes
        KeyNotSetError: If key is all zeroes
    """
    if len(key) != KEY_LENGTH:
        raise InvalidLengthError(f"Key must be {KEY_LENGTH} bytes, got {len(key)}")
    if is_unset(key):
        raise KeyNotSetError(
            "Key has not been set. Assign a 256-bit key before deriving settings."
        )

    total = sum_bytes(key)
    digits = decimal_digits(total, SUM_DIGITS)

    pivot = key[pivot_position(total)]
    bits = byte_to_bits(pivot)
    target = 0 if pivot % 2 != 0 else 1

    b = tuple(
        digits[i] + count_bits(bits, target, 2 * i, 2 * i + 1)
        for i in range(PARAM_COUNT)
    )

    f = tuple(
        decimal_digits(sum_bytes(key[CHUNK_SIZE * i:CHUNK_SIZE * (i + 1)]))[0]
        for i in range(PARAM_COUNT)
    )

    return CipherSettings(b=b, f=f)
