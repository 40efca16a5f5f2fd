"""
Byte to integer decompression.

Every byte is a valid encoding; the result is the representative value
of the bucket the byte names, not the original input.

MicroPython compatible - no typing module imports.
"""

from bytefloat.layout import HIDDEN_BIT, unpack


def decompress(byte: int) -> int:
    """
    Decompress one byte into an integer.

    Args:
        byte: Compressed byte (0-255)

    Returns:
        Decoded value (0-507904)

    Raises:
        ValueError: If byte is out of range
    """
    shift, mantissa = unpack(byte)

    if shift == 0:
        return mantissa

    return (HIDDEN_BIT + mantissa) << (shift - 1)


def decompress_values(data: bytes) -> "list[int]":
    """
    Decompress every byte of a bytes-like object.

    Args:
        data: Compressed bytes

    Returns:
        List of decoded values, one per byte
    """
    return [decompress(b) for b in data]
