"""sBurger-256 symmetric block cipher.

256-bit key, 1..32 byte blocks, key-dependent substitution-permutation
network with an explicit settings-derivation step after every key change.
"""

__version__ = "1.0.0"

from .errors import (
    SBurgerError,
    MissingInputError,
    InvalidLengthError,
    KeyNotSetError,
    NotReadyError,
)
from .key_schedule import CipherSettings, derive_settings
from .network import TransformNetwork
from .cipher import SBurger256, CipherState
from .trace import TraceRecorder

# Default demo values
DEFAULT_KEY = b"TESTKEY_TESTKEY_TESTKEY_TESTKEY_"
DEFAULT_PT = b"Hello, sBurger-256 cipher test!!"

__all__ = [
    "SBurger256",
    "CipherState",
    "CipherSettings",
    "TransformNetwork",
    "TraceRecorder",
    "derive_settings",
    "SBurgerError",
    "MissingInputError",
    "InvalidLengthError",
    "KeyNotSetError",
    "NotReadyError",
    "DEFAULT_KEY",
    "DEFAULT_PT",
]
