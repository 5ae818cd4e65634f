"""
sBurger-256 block transformation network.

One round per block. The derived settings enable or disable each operation
once per key; the enabled operations are then applied to every byte.

Encryption schedule:
  entry:     reverse whole block                 if f[1] is odd
  per byte:  XOR b[2]                            if b[2] is even
             invert                              if b[0] is odd
             rotate left  by f[0] % 8            if f[0] % 8 != 0
             XOR key[i]                          always
             invert                              if b[1] is odd
             rotate right by f[2] % 8            if f[2] % 8 != 0
             XOR b[3]                            if b[3] is even
  exit:      reverse whole block                 if f[3] is odd

Decryption walks the same schedule backwards using each step's inverse.
The key byte is always taken at the post-reversal position of the data byte.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Callable

from .key_schedule import CipherSettings
from .primitives import invert, rotate_left, rotate_right, xor
from .trace import TraceRecorder

# (byte value, key byte) -> byte value
ByteOp = Callable[[int, int], int]


def _xor_const(const: int, value: int, key_byte: int) -> int:
    return xor(value, const)


def _invert(value: int, key_byte: int) -> int:
    return invert(value)


def _rotl(shift: int, value: int, key_byte: int) -> int:
    return rotate_left(value, shift)


def _rotr(shift: int, value: int, key_byte: int) -> int:
    return rotate_right(value, shift)


def _xor_key(value: int, key_byte: int) -> int:
    return xor(value, key_byte)


@dataclass(frozen=True)
class Step:
    """A single per-byte operation together with its inverse."""

    name: str
    forward: ByteOp
    inverse: ByteOp


def xor_const_step(name: str, const: int) -> Step:
    op = partial(_xor_const, const & 0xFF)
    return Step(name, op, op)


def invert_step(name: str) -> Step:
    return Step(name, _invert, _invert)


def rotate_left_step(name: str, shift: int) -> Step:
    return Step(name, partial(_rotl, shift), partial(_rotr, shift))


def rotate_right_step(name: str, shift: int) -> Step:
    return Step(name, partial(_rotr, shift), partial(_rotl, shift))


def key_xor_step() -> Step:
    return Step("xor_key", _xor_key, _xor_key)


@dataclass(frozen=True)
class TransformNetwork:
    """Step list compiled from one set of derived settings."""

    reverse_on_entry: bool
    steps: tuple[Step, ...]
    reverse_on_exit: bool

    @classmethod
    def from_settings(cls, settings: CipherSettings) -> TransformNetwork:
        """
        Build the active step list for the given settings.

        Args:
            settings: Derived key-schedule parameters

        Returns:
            TransformNetwork holding only the enabled operations
        """
        b, f = settings.b, settings.f
        steps: list[Step] = []

        if b[2] % 2 == 0:
            steps.append(xor_const_step("xor_b2", b[2]))
        if b[0] % 2 != 0:
            steps.append(invert_step("invert_b0"))
        if f[0] % 8 != 0:
            steps.append(rotate_left_step(f"rotl_{f[0] % 8}", f[0] % 8))
        steps.append(key_xor_step())
        if b[1] % 2 != 0:
            steps.append(invert_step("invert_b1"))
        if f[2] % 8 != 0:
            steps.append(rotate_right_step(f"rotr_{f[2] % 8}", f[2] % 8))
        if b[3] % 2 == 0:
            steps.append(xor_const_step("xor_b3", b[3]))

        return cls(
            reverse_on_entry=f[1] % 2 != 0,
            steps=tuple(steps),
            reverse_on_exit=f[3] % 2 != 0,
        )

    @property
    def step_names(self) -> list[str]:
        """Names of the per-byte steps in encryption order."""
        return [step.name for step in self.steps]

    def encrypt(
        self,
        data: bytearray,
        key: bytes,
        tracer: TraceRecorder | None = None,
    ) -> bytearray:
        """
        Encrypt a block in place.

        Args:
            data: Mutable block (length already validated by the caller)
            key: 32-byte key
            tracer: Optional trace recorder

        Returns:
            The same ``data`` object, now holding ciphertext
        """
        if self.reverse_on_entry:
            _reverse(data, "reverse_entry", "encrypt", tracer)

        for i in range(len(data)):
            value = data[i]
            for step in self.steps:
                value = step.forward(value, key[i])
                if tracer:
                    tracer.record(direction="encrypt", index=i,
                                  operation=step.name, value=value)
            data[i] = value

        if self.reverse_on_exit:
            _reverse(data, "reverse_exit", "encrypt", tracer)

        return data

    def decrypt(
        self,
        data: bytearray,
        key: bytes,
        tracer: TraceRecorder | None = None,
    ) -> bytearray:
        """
        Decrypt a block in place; exact inverse of ``encrypt``.

        Args:
            data: Mutable block (length already validated by the caller)
            key: 32-byte key
            tracer: Optional trace recorder

        Returns:
            The same ``data`` object, now holding plaintext
        """
        if self.reverse_on_exit:
            _reverse(data, "reverse_exit", "decrypt", tracer)

        for i in range(len(data)):
            value = data[i]
            for step in reversed(self.steps):
                value = step.inverse(value, key[i])
                if tracer:
                    tracer.record(direction="decrypt", index=i,
                                  operation=step.name, value=value)
            data[i] = value

        if self.reverse_on_entry:
            _reverse(data, "reverse_entry", "decrypt", tracer)

        return data


def _reverse(
    data: bytearray,
    name: str,
    direction: str,
    tracer: TraceRecorder | None,
) -> None:
    data.reverse()
    if tracer:
        tracer.record(direction=direction, operation=name, block=bytes(data))
