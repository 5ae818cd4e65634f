"""
sBurger-256 cipher instance.

Key size: 256 bits (32 bytes). Block size: 1..32 bytes.

The instance owns a copy of the key and, once derived, the settings and the
compiled network. Its lifecycle is an explicit state machine:

  UNINITIALIZED --set_key--> KEY_ASSIGNED --derive_settings--> READY
                                  ^                              |
                                  +----------set_key-------------+

Only READY permits encrypt/decrypt. Assigning the all-zero key returns to
UNINITIALIZED. The instance does no internal locking.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Union

from .errors import InvalidLengthError, KeyNotSetError, MissingInputError, NotReadyError
from .key_schedule import KEY_LENGTH, CipherSettings, derive_settings, is_unset
from .network import TransformNetwork
from .trace import TraceRecorder

logger = logging.getLogger(__name__)

Block = Union[bytearray, bytes, memoryview]


class CipherState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    KEY_ASSIGNED = "key_assigned"
    READY = "ready"


@dataclass(frozen=True)
class _Unset:
    key: bytes = bytes(KEY_LENGTH)

    state = CipherState.UNINITIALIZED


@dataclass(frozen=True)
class _Keyed:
    key: bytes

    state = CipherState.KEY_ASSIGNED


@dataclass(frozen=True)
class _Ready:
    key: bytes
    settings: CipherSettings
    network: TransformNetwork

    state = CipherState.READY


class SBurger256:
    """
    sBurger-256 symmetric block cipher.

    Usage:
        cipher = SBurger256(key)
        cipher.derive_settings()
        cipher.encrypt(block)

    Setting a new key invalidates the derived settings; call
    derive_settings() again before encrypting or decrypting.
    """

    KEY_LENGTH = KEY_LENGTH
    MAX_BLOCK_SIZE = KEY_LENGTH

    def __init__(self, key: bytes | None = None):
        """
        Initialize the cipher.

        Args:
            key: Optional 32-byte key; when omitted the cipher starts
                UNINITIALIZED
        """
        self._state: _Unset | _Keyed | _Ready = _Unset()
        if key is not None:
            self.set_key(key)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(state={self.state.value!r})"

    # ---- key ----

    @property
    def key(self) -> bytes:
        """Copy of the currently held key (all zeroes when unset)."""
        return self._state.key

    @key.setter
    def key(self, value: bytes) -> None:
        self.set_key(value)

    def get_key(self) -> bytes:
        return self.key

    def set_key(self, key: bytes) -> None:
        """
        Assign a new 32-byte key.

        The bytes are copied, so later mutation of the caller's buffer has no
        effect. Any previously derived settings become stale.

        Raises:
            MissingInputError: If key is None
            TypeError: If key is not bytes-like
            InvalidLengthError: If key is not exactly 32 bytes
        """
        if key is None:
            raise MissingInputError("Key must not be None")
        if not isinstance(key, (bytes, bytearray, memoryview)):
            raise TypeError(f"Key must be bytes-like, got {type(key).__name__}")
        _check_view(key, "Key")
        if len(key) != KEY_LENGTH:
            raise InvalidLengthError(
                f"Key must be exactly {KEY_LENGTH} bytes long, but was {len(key)}"
            )

        copied = bytes(key)
        if is_unset(copied):
            self._state = _Unset()
        else:
            self._state = _Keyed(copied)
        logger.debug("Key assigned; state=%s", self._state.state.value)

    # ---- settings ----

    @property
    def state(self) -> CipherState:
        return self._state.state

    @property
    def is_ready(self) -> bool:
        return isinstance(self._state, _Ready)

    @property
    def settings(self) -> CipherSettings | None:
        """Settings derived for the current key, or None when not READY."""
        if isinstance(self._state, _Ready):
            return self._state.settings
        return None

    @property
    def network(self) -> TransformNetwork | None:
        """Compiled network for the current key, or None when not READY."""
        if isinstance(self._state, _Ready):
            return self._state.network
        return None

    def derive_settings(self) -> CipherSettings:
        """
        Derive the internal cipher settings from the current key.

        Must be called after setting the key and before any encrypt/decrypt
        call. Calling it again for the same key is harmless.

        Returns:
            The derived CipherSettings

        Raises:
            KeyNotSetError: If the key is unset (all zeroes)
        """
        if isinstance(self._state, _Unset):
            raise KeyNotSetError(
                "Key has not been set. Assign a 256-bit key before calling derive_settings()."
            )

        key = self._state.key
        settings = derive_settings(key)
        network = TransformNetwork.from_settings(settings)
        self._state = _Ready(key=key, settings=settings, network=network)
        logger.debug(
            "Settings derived: b=%s f=%s steps=%s",
            settings.b, settings.f, network.step_names,
        )
        return settings

    # ---- block transformation ----

    def encrypt(self, data: Block, tracer: TraceRecorder | None = None) -> Block:
        """
        Encrypt a data block in place.

        A bytearray or writable memoryview is modified in place and returned.
        Immutable bytes are accepted too; a new bytes object is returned.

        Args:
            data: Plaintext block, 1..32 bytes
            tracer: Optional trace recorder

        Returns:
            The ciphertext block (the same object for mutable input)

        Raises:
            MissingInputError: If data is None
            InvalidLengthError: If data is empty or longer than 32 bytes
            NotReadyError: If derive_settings() has not been called
        """
        ready = self._check_block(data)
        return _apply(data, lambda buf: ready.network.encrypt(buf, ready.key, tracer))

    def decrypt(self, data: Block, tracer: TraceRecorder | None = None) -> Block:
        """
        Decrypt a data block in place.

        Accepts the same inputs as encrypt().

        Args:
            data: Ciphertext block, 1..32 bytes
            tracer: Optional trace recorder

        Returns:
            The plaintext block (the same object for mutable input)

        Raises:
            MissingInputError: If data is None
            InvalidLengthError: If data is empty or longer than 32 bytes
            NotReadyError: If derive_settings() has not been called
        """
        ready = self._check_block(data)
        return _apply(data, lambda buf: ready.network.decrypt(buf, ready.key, tracer))

    def _check_block(self, data: Block) -> _Ready:
        if data is None:
            raise MissingInputError("Data block must not be None")
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"Data block must be bytes-like, got {type(data).__name__}")
        _check_view(data, "Data block")
        if isinstance(data, memoryview) and data.readonly:
            raise TypeError("Data block memoryview must be writable")
        if len(data) == 0 or len(data) > self.MAX_BLOCK_SIZE:
            raise InvalidLengthError(
                f"Data block must be between 1 and {self.MAX_BLOCK_SIZE} bytes, "
                f"but was {len(data)}"
            )
        if not isinstance(self._state, _Ready):
            raise NotReadyError(
                "Cipher settings have not been generated. Call derive_settings() first."
            )
        return self._state


def _check_view(data: Block, label: str) -> None:
    # len() of a memoryview counts items, not bytes
    if isinstance(data, memoryview) and (data.itemsize != 1 or not data.c_contiguous):
        raise TypeError(f"{label} memoryview must be a contiguous byte view")


def _apply(data: Block, transform) -> Block:
    if isinstance(data, bytearray):
        return transform(data)

    buf = transform(bytearray(data))
    if isinstance(data, memoryview):
        data[:] = buf
        return data
    return bytes(buf)
