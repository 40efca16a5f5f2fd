"""Tests for decode table and bucket diagnostics."""

import pytest

from bytefloat.compress import compress
from bytefloat.layout import COMPRESS_MAX
from bytefloat.table import bucket_bounds, decode_table, format_table


class TestDecodeTable:
    """Test the decoded value table."""

    def test_shape(self) -> None:
        """Test 16 rows of 16 values."""
        table = decode_table()
        assert len(table) == 16
        assert all(len(row) == 16 for row in table)

    def test_known_rows(self) -> None:
        """Test first and last entries of selected rows."""
        table = decode_table()
        assert table[0] == list(range(16))
        assert table[1] == list(range(16, 32))
        assert table[2][0] == 32 and table[2][15] == 62
        assert table[8][0] == 2048 and table[8][15] == 3968
        assert table[15][0] == 262144 and table[15][15] == 507904


class TestFormatTable:
    """Test table formatting."""

    def test_line_count(self) -> None:
        """Test one line per shift."""
        assert len(format_table()) == 16

    def test_line_format(self) -> None:
        """Test label and column widths."""
        lines = format_table()
        assert lines[0].startswith("shift:0 ")
        assert lines[2] == "shift:2 " + "".join(" %6d" % (32 + 2 * m) for m in range(16))
        assert lines[15].endswith(" 507904")

    def test_lines_same_width(self) -> None:
        """Test columns line up."""
        widths = {len(line) for line in format_table()}
        assert widths == {8 + 16 * 7}


class TestBucketBounds:
    """Test input ranges per byte."""

    def test_exact_range(self) -> None:
        """Test bytes below 32 hold a single value."""
        for byte in range(32):
            assert bucket_bounds(byte) == (byte, byte)

    def test_known_buckets(self) -> None:
        """Test buckets around rounding boundaries."""
        assert bucket_bounds(0x21) == (33, 34)
        assert bucket_bounds(0x30) == (63, 65)
        assert bucket_bounds(0x70) == (1008, 1055)

    def test_top_bucket(self) -> None:
        """Test top bucket ends at COMPRESS_MAX."""
        assert bucket_bounds(0xFF) == (499712, COMPRESS_MAX)

    def test_ends_compress_to_byte(self) -> None:
        """Test both ends of every bucket compress to that byte."""
        for byte in range(256):
            low, high = bucket_bounds(byte)
            assert compress(low).byte == byte
            assert compress(high).byte == byte

    def test_buckets_tile_domain(self) -> None:
        """Test buckets are contiguous and cover [0, COMPRESS_MAX]."""
        expected_low = 0
        for byte in range(256):
            low, high = bucket_bounds(byte)
            assert low == expected_low
            assert high >= low
            expected_low = high + 1
        assert expected_low == COMPRESS_MAX + 1

    @pytest.mark.parametrize("byte", [-1, 256])
    def test_out_of_range(self, byte: int) -> None:
        """Test integers that are not bytes are rejected."""
        with pytest.raises(ValueError):
            bucket_bounds(byte)
