"""
Bit and byte primitives shared by the key schedule and the network.

All byte-valued functions take and return ints in [0..255].
"""

BYTE_MASK = 0xFF


def rotate_left(value: int, shift: int) -> int:
    """
    Rotate an 8-bit value left.

    Args:
        value: Byte value (0-255)
        shift: Number of positions (taken modulo 8)

    Returns:
        Rotated byte
    """
    shift %= 8
    return ((value << shift) | (value >> (8 - shift))) & BYTE_MASK


def rotate_right(value: int, shift: int) -> int:
    """
    Rotate an 8-bit value right.

    Args:
        value: Byte value (0-255)
        shift: Number of positions (taken modulo 8)

    Returns:
        Rotated byte
    """
    shift %= 8
    return ((value >> shift) | (value << (8 - shift))) & BYTE_MASK


def invert(value: int) -> int:
    """Bitwise NOT of a byte."""
    return ~value & BYTE_MASK


def xor(a: int, b: int) -> int:
    """XOR two bytes, truncating the result to 8 bits."""
    return (a ^ b) & BYTE_MASK


def byte_to_bits(value: int) -> list[int]:
    """
    Decompose a byte into its 8 bits, most significant first.

    Example:
        byte_to_bits(0x54) -> [0, 1, 0, 1, 0, 1, 0, 0]
    """
    return [(value >> (7 - b)) & 1 for b in range(8)]


def count_bits(bits: list[int], target: int, start: int, stop: int) -> int:
    """
    Count entries equal to ``target`` in ``bits[start..stop]`` (inclusive).
    """
    return sum(1 for bit in bits[start:stop + 1] if bit == target)


def sum_bytes(data: bytes) -> int:
    """Sum of all byte values."""
    return sum(data)


def decimal_digits(value: int, min_width: int = 1) -> list[int]:
    """
    Decimal digits of a non-negative integer, most significant first.

    Args:
        value: Non-negative integer
        min_width: Zero-pad on the left to at least this many digits

    Returns:
        List of digit values (0-9)
    """
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    return [int(ch) for ch in str(value).zfill(min_width)]
