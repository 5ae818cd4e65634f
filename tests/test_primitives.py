"""Tests for bit and byte primitives."""

import pytest

from sburger.primitives import (
    byte_to_bits,
    count_bits,
    decimal_digits,
    invert,
    rotate_left,
    rotate_right,
    sum_bytes,
    xor,
)


class TestRotation:
    """Tests for 8-bit rotations."""

    def test_rotate_left_known_values(self) -> None:
        assert rotate_left(0x64, 2) == 0x91
        assert rotate_left(0x80, 1) == 0x01
        assert rotate_left(0x01, 7) == 0x80

    def test_rotate_right_known_values(self) -> None:
        assert rotate_right(0x91, 1) == 0xC8
        assert rotate_right(0x01, 1) == 0x80
        assert rotate_right(0xBD, 2) == 0x6F

    def test_rotate_by_zero_and_eight_is_identity(self) -> None:
        for value in (0x00, 0x5A, 0xFF):
            assert rotate_left(value, 0) == value
            assert rotate_left(value, 8) == value
            assert rotate_right(value, 0) == value

    @pytest.mark.parametrize("shift", range(1, 8))
    def test_left_and_right_are_inverses(self, shift: int) -> None:
        """Rotating right undoes rotating left for every byte."""
        for value in range(256):
            assert rotate_right(rotate_left(value, shift), shift) == value

    def test_rotate_left_equals_rotate_right_complement(self) -> None:
        for value in range(256):
            assert rotate_left(value, 6) == rotate_right(value, 2)


class TestByteOps:
    """Tests for inversion and XOR."""

    def test_invert(self) -> None:
        assert invert(0x00) == 0xFF
        assert invert(0xBD) == 0x42
        assert all(invert(invert(v)) == v for v in range(256))

    def test_xor_truncates_to_byte(self) -> None:
        assert xor(0x48, 0x0A) == 0x42
        assert xor(0xFF, 0x1FF) == 0x00


class TestKeyAnalysis:
    """Tests for bit decomposition, counting, sums and digits."""

    def test_byte_to_bits_msb_first(self) -> None:
        assert byte_to_bits(0x54) == [0, 1, 0, 1, 0, 1, 0, 0]
        assert byte_to_bits(0x01) == [0, 0, 0, 0, 0, 0, 0, 1]
        assert byte_to_bits(0x80)[0] == 1

    def test_count_bits_inclusive_range(self) -> None:
        bits = [0, 1, 0, 0, 1, 0, 1, 1]
        assert count_bits(bits, 0, 0, 1) == 1
        assert count_bits(bits, 0, 2, 3) == 2
        assert count_bits(bits, 1, 6, 7) == 2
        assert count_bits(bits, 1, 0, 7) == 4

    def test_sum_bytes(self) -> None:
        assert sum_bytes(b"TESTKEY_") == 648
        assert sum_bytes(bytes([0xFF] * 32)) == 8160
        assert sum_bytes(b"") == 0

    def test_decimal_digits(self) -> None:
        assert decimal_digits(2592) == [2, 5, 9, 2]
        assert decimal_digits(0) == [0]

    def test_decimal_digits_zero_padded(self) -> None:
        assert decimal_digits(32, 4) == [0, 0, 3, 2]
        assert decimal_digits(8160, 4) == [8, 1, 6, 0]

    def test_decimal_digits_negative_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            decimal_digits(-1)
