"""Exception hierarchy for the sBurger-256 cipher.

Every error derives from ``SBurgerError`` and also from the builtin a
caller would naturally catch for the same mistake.
"""


class SBurgerError(Exception):
    """Base class for all sBurger-256 errors."""


class MissingInputError(SBurgerError, TypeError):
    """Key or data buffer was ``None`` where a value is required."""


class InvalidLengthError(SBurgerError, ValueError):
    """Key is not 32 bytes, or a data block is empty or longer than 32 bytes."""


class KeyNotSetError(SBurgerError, RuntimeError):
    """Settings derivation was attempted while the key is still all zeroes."""


class NotReadyError(SBurgerError, RuntimeError):
    """A block transformation was attempted before settings were derived."""
