"""
Bit layout of a compressed byte.

Wire format (fixed):

    bit   7   6   5   4   3   2   1   0
        +---------------+---------------+
        |     shift     |   mantissa    |
        +---------------+---------------+

Decoded value:
- shift == 0 -> mantissa
- shift  > 0 -> (16 + mantissa) << (shift - 1)

Placing the shift in the high nibble makes the decoded value strictly
increasing with the byte value.

MicroPython compatible - no typing module imports.
"""

# Field widths
SHIFT_BITS = 4
MANTISSA_BITS = 4

SHIFT_MASK = (1 << SHIFT_BITS) - 1
MANTISSA_MASK = (1 << MANTISSA_BITS) - 1

# Hidden leading one of a normalized mantissa (shift > 0)
HIDDEN_BIT = 1 << MANTISSA_BITS

MAX_SHIFT = SHIFT_MASK
MAX_BYTE = 0xFF

# Largest decoded value: (16 + 15) << 14
MAX_DECODED = (HIDDEN_BIT + MANTISSA_MASK) << (MAX_SHIFT - 1)

# Largest input that still rounds into the top bucket (half its width above)
COMPRESS_MAX = MAX_DECODED | ((1 << (MAX_SHIFT - 2)) - 1)

# Inputs below this are stored without rounding
EXACT_LIMIT = 2 * HIDDEN_BIT


def pack(shift: int, mantissa: int) -> int:
    """
    Combine shift and mantissa fields into a byte.

    Args:
        shift: Exponent field (0-15)
        mantissa: Mantissa field (0-15)

    Returns:
        Byte value (0-255)

    Raises:
        ValueError: If a field is out of range
    """
    if shift < 0 or shift > SHIFT_MASK:
        raise ValueError(f"shift {shift} out of range [0, {SHIFT_MASK}]")
    if mantissa < 0 or mantissa > MANTISSA_MASK:
        raise ValueError(f"mantissa {mantissa} out of range [0, {MANTISSA_MASK}]")

    return ((shift & SHIFT_MASK) << MANTISSA_BITS) | (mantissa & MANTISSA_MASK)


def unpack(byte: int) -> "tuple[int, int]":
    """
    Split a byte into its shift and mantissa fields.

    Args:
        byte: Compressed byte (0-255)

    Returns:
        (shift, mantissa) tuple

    Raises:
        ValueError: If byte is out of range
    """
    if byte < 0 or byte > MAX_BYTE:
        raise ValueError(f"byte {byte} out of range [0, {MAX_BYTE}]")

    return (byte >> MANTISSA_BITS) & SHIFT_MASK, byte & MANTISSA_MASK
