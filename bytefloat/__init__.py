"""
bytefloat: single-byte floating point compression of unsigned integers.

Maps an unsigned integer in [0, 516095] to one byte made of a 4-bit shift
and a 4-bit mantissa with a hidden leading one, and back. Values below 32
are stored exactly, larger ones with at most 1/32 relative error.

MicroPython compatible - no typing module imports.
"""

__version__ = "1.0.0"

from bytefloat.compress import CompressResult, compress, compress_values
from bytefloat.decompress import decompress, decompress_values

__all__ = [
    "CompressResult",
    "compress",
    "compress_values",
    "decompress",
    "decompress_values",
    "__version__",
]
