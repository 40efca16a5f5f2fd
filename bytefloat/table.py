"""
Diagnostics over the 256 compressed byte values.

- Decode table: decoded value for every (shift, mantissa) pair
- Bucket bounds: inclusive input range that compresses to a byte

MicroPython compatible - no typing module imports.
"""

from bytefloat.decompress import decompress
from bytefloat.layout import COMPRESS_MAX, MANTISSA_MASK, MAX_BYTE, SHIFT_MASK, pack


def decode_table() -> "list[list[int]]":
    """
    Build the table of decoded values.

    Returns:
        16 rows (one per shift) of 16 decoded values (one per mantissa)
    """
    return [
        [decompress(pack(shift, mantissa)) for mantissa in range(MANTISSA_MASK + 1)]
        for shift in range(SHIFT_MASK + 1)
    ]


def format_table() -> "list[str]":
    """
    Format the decode table as text lines.

    Returns:
        One line per shift, e.g. "shift:2      32     34 ..."
    """
    lines = []
    for shift, row in enumerate(decode_table()):
        line = "shift:%-2d" % shift
        for value in row:
            line += " %6d" % value
        lines.append(line)
    return lines


def _bucket_low(byte: int) -> int:
    """Smallest input that compresses to byte."""
    if byte == 0:
        return 0
    total = decompress(byte - 1) + decompress(byte)
    # Midpoints round up
    return (total + 1) // 2


def bucket_bounds(byte: int) -> "tuple[int, int]":
    """
    Get the range of inputs that compress to a byte.

    Args:
        byte: Compressed byte (0-255)

    Returns:
        (low, high) inclusive input range

    Raises:
        ValueError: If byte is out of range
    """
    if byte < 0 or byte > MAX_BYTE:
        raise ValueError(f"byte {byte} out of range [0, {MAX_BYTE}]")

    low = _bucket_low(byte)
    if byte == MAX_BYTE:
        high = COMPRESS_MAX
    else:
        high = _bucket_low(byte + 1) - 1
    return low, high
