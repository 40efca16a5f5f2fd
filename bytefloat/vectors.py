"""
Reference test vectors and self-test.

Each vector is (input, compressed byte, decompressed value, exact flag).
The list covers exact small values, rounding up and down at several
magnitudes, mantissa carries into the next shift and saturation.

MicroPython compatible - no typing module imports.
"""

from bytefloat.compress import compress
from bytefloat.decompress import decompress

TEST_VECTORS = [
    (0, 0x00, 0, True),
    (5, 0x05, 5, True),
    (16, 0x10, 16, True),
    (30, 0x1E, 30, True),
    (32, 0x20, 32, True),
    (33, 0x21, 34, True),
    (40, 0x24, 40, True),
    (41, 0x25, 42, True),
    (80, 0x34, 80, True),
    (85, 0x35, 84, True),
    (86, 0x36, 88, True),
    (95, 0x38, 96, True),
    (100, 0x39, 100, True),
    (187, 0x47, 184, True),
    (188, 0x48, 192, True),
    (252, 0x50, 256, True),
    (687, 0x65, 672, True),
    (688, 0x66, 704, True),
    (704, 0x66, 704, True),
    (750, 0x67, 736, True),
    (1024, 0x70, 1024, True),
    (1055, 0x70, 1024, True),
    (1059, 0x71, 1088, True),
    (1472, 0x77, 1472, True),
    (1504, 0x78, 1536, True),
    (3967, 0x8F, 3968, True),
    (4031, 0x8F, 3968, True),
    (6400, 0x99, 6400, True),
    (10200, 0xA4, 10240, True),
    (10700, 0xA5, 10752, True),
    (24100, 0xB8, 24576, True),
    (47120, 0xC7, 47104, True),
    (48144, 0xC8, 49152, True),
    (64511, 0xCF, 63488, True),
    (64512, 0xD0, 65536, True),
    (65408, 0xD0, 65536, True),
    (88000, 0xD5, 86016, True),
    (88120, 0xD6, 90112, True),
    (120000, 0xDD, 118784, True),
    (120831, 0xDD, 118784, True),
    (120832, 0xDE, 122880, True),
    (333333, 0xF4, 327680, True),
    (335871, 0xF4, 327680, True),
    (335872, 0xF5, 344064, True),
    (425985, 0xFA, 425984, True),
    (482345, 0xFD, 475136, True),
    (507904, 0xFF, 507904, True),
    (507905, 0xFF, 507904, True),
    (516095, 0xFF, 507904, True),
    (516096, 0xFF, 507904, False),
    (0xFFFFFFFF, 0xFF, 507904, False),
]


def check_vectors(vectors: "list | None" = None) -> "list[str]":
    """
    Run compress and decompress against reference vectors.

    Only the first mismatch of each vector is reported, checked in the
    order byte, flag, decoded value.

    Args:
        vectors: Vectors to check (None = TEST_VECTORS)

    Returns:
        One failure message per failing vector (empty if all pass)
    """
    if vectors is None:
        vectors = TEST_VECTORS

    failures = []
    for value, expected_byte, expected_value, expected_exact in vectors:
        byte, exact = compress(value)
        if byte != expected_byte:
            failures.append(
                f"compress({value}) gives 0x{byte:02x} != 0x{expected_byte:02x}"
            )
        elif exact != expected_exact:
            failures.append(
                f"compress({value}) gives exact={exact} != {expected_exact}"
            )
        else:
            decoded = decompress(byte)
            if decoded != expected_value:
                failures.append(
                    f"decompress(0x{byte:02x}) gives {decoded} != {expected_value}"
                )
    return failures


def format_vector(value: int) -> str:
    """
    Describe the compression of a value in test vector form.

    Args:
        value: Non-negative integer

    Returns:
        "value, 0xBB, decoded, exact" line
    """
    byte, exact = compress(value)
    return f"{value}, 0x{byte:02x}, {decompress(byte)}, {exact}"
