"""Configuration for the sBurger-256 demo and message helpers."""

from __future__ import annotations

from dataclasses import dataclass

from .cipher import SBurger256


@dataclass
class DemoConfig:
    """Configuration object for the demo and message-level CLI commands.

    The cipher core itself takes no configuration.
    """

    # Passphrase hashed into the demo key
    passphrase: str = "my-secret-passphrase"

    # Message encrypted by the demo
    message: str = "Hello, sBurger-256! This is a secret message that will be encrypted."

    # Passphrase used to show what decryption under the wrong key yields
    wrong_passphrase: str = "wrong-passphrase"

    # Bytes handed to the cipher per call (1..32)
    block_size: int = SBurger256.MAX_BLOCK_SIZE

    # Text encoding for passphrases and messages
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not 1 <= self.block_size <= SBurger256.MAX_BLOCK_SIZE:
            raise ValueError(
                f"block_size must be 1..{SBurger256.MAX_BLOCK_SIZE}, got {self.block_size}"
            )
        if not self.passphrase:
            raise ValueError("passphrase must not be empty")
        if self.passphrase == self.wrong_passphrase:
            raise ValueError("wrong_passphrase must differ from passphrase")
        try:
            "".encode(self.encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {self.encoding}") from e

    @property
    def message_bytes(self) -> bytes:
        """Message encoded with the configured encoding."""
        return self.message.encode(self.encoding)
