"""Tests for the compressed byte layout."""

import pytest

from bytefloat.layout import (
    COMPRESS_MAX,
    EXACT_LIMIT,
    MAX_BYTE,
    MAX_DECODED,
    pack,
    unpack,
)


class TestConstants:
    """Test layout constants."""

    def test_compress_max(self) -> None:
        """Test COMPRESS_MAX is the top decoded value plus half a bucket."""
        assert COMPRESS_MAX == 516095
        assert COMPRESS_MAX == MAX_DECODED + (1 << 13) - 1
        assert COMPRESS_MAX == 31 << 14 | ((1 << 13) - 1)

    def test_max_decoded(self) -> None:
        """Test largest decoded value."""
        assert MAX_DECODED == 507904

    def test_exact_limit(self) -> None:
        """Test values below 32 are exact."""
        assert EXACT_LIMIT == 32


class TestPack:
    """Test packing fields into a byte."""

    def test_shift_in_high_nibble(self) -> None:
        """Test shift occupies bits 7-4."""
        assert pack(0xA, 0) == 0xA0

    def test_mantissa_in_low_nibble(self) -> None:
        """Test mantissa occupies bits 3-0."""
        assert pack(0, 0x5) == 0x05

    def test_pack_extremes(self) -> None:
        """Test all-zero and all-one fields."""
        assert pack(0, 0) == 0x00
        assert pack(15, 15) == MAX_BYTE

    @pytest.mark.parametrize("shift,mantissa", [(-1, 0), (16, 0), (0, -1), (0, 16)])
    def test_pack_out_of_range(self, shift: int, mantissa: int) -> None:
        """Test fields outside 0-15 are rejected."""
        with pytest.raises(ValueError):
            pack(shift, mantissa)


class TestUnpack:
    """Test splitting a byte into fields."""

    def test_unpack(self) -> None:
        """Test shift and mantissa are recovered."""
        assert unpack(0x3C) == (3, 12)

    def test_unpack_all_bytes(self) -> None:
        """Test unpack inverts pack for every byte."""
        for byte in range(256):
            assert pack(*unpack(byte)) == byte

    @pytest.mark.parametrize("byte", [-1, 256, 0x1FF])
    def test_unpack_out_of_range(self, byte: int) -> None:
        """Test values that are not bytes are rejected."""
        with pytest.raises(ValueError):
            unpack(byte)
