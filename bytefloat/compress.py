"""
Integer to byte compression.

Encodes an unsigned integer as a 4-bit shift and a 4-bit mantissa
(see bytefloat.layout), rounding half up to the nearest representable
value. Inputs above COMPRESS_MAX saturate to the top byte.

MicroPython compatible - no typing module imports.
"""

from bytefloat.layout import (
    COMPRESS_MAX,
    MANTISSA_BITS,
    MANTISSA_MASK,
    MAX_BYTE,
    pack,
)

# Import for type hints only
if False:  # noqa: SIM108
    from typing import Iterable

# Mantissa plus hidden bit plus one rounding bit
WINDOW_BITS = MANTISSA_BITS + 2
WINDOW_MASK = (1 << (WINDOW_BITS + 1)) - 1
CARRY_BIT = 1 << WINDOW_BITS


class CompressResult:
    """Outcome of compressing one value.

    ``exact`` is False when the input was above COMPRESS_MAX and the byte
    was saturated. Unpacks as ``byte, exact = result``.
    """

    def __init__(self, byte: int, exact: bool) -> None:
        self.byte = byte
        self.exact = exact

    def __iter__(self):
        yield self.byte
        yield self.exact

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CompressResult):
            return self.byte == other.byte and self.exact == other.exact
        if isinstance(other, tuple):
            return (self.byte, self.exact) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.byte, self.exact))

    def __repr__(self) -> str:
        return f"CompressResult(byte=0x{self.byte:02x}, exact={self.exact})"


def compress(value: int) -> CompressResult:
    """
    Compress an unsigned integer into one byte.

    Values 0-31 are stored exactly. Larger values keep their five most
    significant bits (the leading one is implicit) and are rounded half
    up on the next bit. When rounding overflows the mantissa the shift
    is incremented.

    Args:
        value: Non-negative integer to compress

    Returns:
        CompressResult with the byte and whether it is within range

    Raises:
        ValueError: If value is not an integer or is negative
    """
    if not isinstance(value, int):
        raise ValueError(f"value {value!r} is not an integer")

    if value < 0:
        raise ValueError(f"value {value} is negative")

    if value > COMPRESS_MAX:
        return CompressResult(MAX_BYTE, False)

    # Highest set bit
    i = value.bit_length() - 1

    if i <= MANTISSA_BITS:
        # 0-15 -> shift 0, 16-31 -> shift 1 with bit 4 as the hidden one
        return CompressResult(value, True)

    windowed = (value >> (i - (MANTISSA_BITS + 1))) & WINDOW_MASK

    # Round half up on the bit below the mantissa
    if windowed & 1:
        windowed += 1

    if windowed & CARRY_BIT:
        i += 1

    mantissa = (windowed >> 1) & MANTISSA_MASK
    return CompressResult(pack(i - (MANTISSA_BITS - 1), mantissa), True)


def compress_values(values: "Iterable[int]") -> "tuple[bytes, bool]":
    """
    Compress a sequence of integers, one byte each.

    Args:
        values: Iterable of non-negative integers

    Returns:
        (data, exact) where exact is False if any value saturated

    Raises:
        ValueError: If any value is not an integer or is negative
    """
    out = bytearray()
    exact = True

    for value in values:
        result = compress(value)
        out.append(result.byte)
        if not result.exact:
            exact = False

    return bytes(out), exact
