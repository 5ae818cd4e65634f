"""
Utility functions for hex formatting and byte-block helpers.
"""


def hex_to_bytes(hex_str: str) -> bytes:
    """
    Convert hex string to bytes.

    Whitespace is ignored so spaced dumps such as "de ad be ef" are accepted.

    Args:
        hex_str: Hex string

    Returns:
        bytes
    """
    return bytes.fromhex("".join(hex_str.split()))


def bytes_to_hex(data: bytes) -> str:
    """
    Convert bytes to hex string.

    Args:
        data: bytes

    Returns:
        Lowercase hex string
    """
    return bytes(data).hex()


def format_block(data: bytes, group: int = 8) -> str:
    """
    Format a block as space-separated hex, grouped for readability.

    Returns single-line string like:
      ee87d6ca b5ceb2f9 e497c8c1 bf90bfb8
    """
    hex_str = bytes_to_hex(data)
    width = group * 2
    return " ".join(hex_str[i:i + width] for i in range(0, len(hex_str), width))


def chunk_blocks(data: bytes, block_size: int) -> list[bytes]:
    """
    Split data into consecutive blocks of ``block_size`` bytes.

    The last block may be shorter when len(data) is not a multiple.
    """
    if block_size <= 0:
        raise ValueError(f"block_size must be positive, got {block_size}")
    return [bytes(data[i:i + block_size]) for i in range(0, len(data), block_size)]
