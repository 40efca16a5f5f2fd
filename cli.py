#!/usr/bin/env python3
"""
bytefloat command line interface.

Compresses integers to single bytes and back, prints the decode table
and runs the reference self-test. Without arguments it starts an
interactive loop reading values from stdin.

Note: This CLI uses sys.argv instead of argparse for MicroPython compatibility.

Usage:
    python cli.py                      # interactive
    python cli.py <value> [value ...]  # compress
    python cli.py -d <byte> [byte ...] # decompress
    python cli.py -t                   # decode table
    python cli.py -s                   # self-test

Examples:
    python cli.py 40 1059 516096
    python cli.py -d 0x24 0xff
"""

import sys

from bytefloat import __version__, decompress
from bytefloat.layout import COMPRESS_MAX, MAX_BYTE
from bytefloat.table import format_table
from bytefloat.vectors import TEST_VECTORS, check_vectors, format_vector


def print_version() -> None:
    """Print version information."""
    print(f"bytefloat {__version__}")


def print_help(prog_name: str) -> None:
    """Print help message."""
    print(f"bytefloat - single byte integer compression (v{__version__})")
    print("=" * 49)
    print()
    print("Encodes 0 to 516095 as a 4-bit shift and a 4-bit mantissa with a")
    print("hidden leading bit. Values below 32 are exact, larger values are")
    print("rounded to within 1/32.")
    print()
    print("Usage:")
    print(f"  {prog_name}")
    print(f"  {prog_name} <value> [value ...]")
    print(f"  {prog_name} -d <byte> [byte ...]")
    print(f"  {prog_name} -t | -s")
    print()
    print("Options:")
    print("  -d             Decompress bytes (default is compress)")
    print("  -t, --table    Print the table of decoded values")
    print("  -s, --selftest Check the reference test vectors")
    print("  -h, --help     Show this help message")
    print("  -v, --version  Show version information")
    print()
    print("Without arguments, runs the self-test and reads values from stdin.")
    print("Type 'table' to print the table and 'quit' to exit.")
    print()
    print("Output:")
    print("  Compress:   <value>, 0x<byte>, <decoded>, <exact>")
    print("  Decompress: 0x<byte> -> <decoded>")
    print()
    print("Examples:")
    print(f"  {prog_name} 40 1059 516096")
    print(f"  {prog_name} -d 0x24 0xff")
    print()


def parse_int(text: str) -> int:
    """Parse a decimal or 0x-prefixed integer.

    Raises:
        ValueError: If text is not an integer
    """
    try:
        return int(text, 0)
    except ValueError:
        raise ValueError(f"'{text}' is not an integer") from None


def print_table() -> None:
    """Print the decode table."""
    for line in format_table():
        print(line)


def run_self_test() -> int:
    """Check reference vectors.

    Returns:
        Number of failures.
    """
    failures = check_vectors()
    for message in failures:
        print(f"failure: {message}")

    count = len(failures)
    suffix = "" if count == 1 else "s"
    print(f"self-test: {len(TEST_VECTORS)} steps: {count} failure{suffix}")
    return count


def do_compress(values: "list[str]") -> int:
    """Compress values given on the command line.

    Returns:
        0 on success, 1 on error.
    """
    try:
        numbers = [parse_int(v) for v in values]
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for number in numbers:
        if number < 0:
            print(f"Error: value {number} is negative", file=sys.stderr)
            return 1

    for number in numbers:
        print(format_vector(number))

    return 0


def do_decompress(values: "list[str]") -> int:
    """Decompress bytes given on the command line.

    Returns:
        0 on success, 1 on error.
    """
    try:
        numbers = [parse_int(v) for v in values]
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for number in numbers:
        if number < 0 or number > MAX_BYTE:
            print(f"Error: byte must be 0-{MAX_BYTE}, got {number}", file=sys.stderr)
            return 1

    for number in numbers:
        print(f"0x{number:02x} -> {decompress(number)}")

    return 0


def handle_token(token: str) -> bool:
    """Process one interactive token.

    Returns:
        False when the loop should stop.
    """
    if token == "quit":
        return False

    if token == "table":
        print_table()
        return True

    try:
        value = parse_int(token)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return True

    if value < 0:
        print(f"Error: value {value} is negative", file=sys.stderr)
        return True

    print(format_vector(value))
    if value > COMPRESS_MAX:
        print(f"Warning: {value} above {COMPRESS_MAX}, saturated", file=sys.stderr)
    return True


def interactive() -> int:
    """Read values from stdin until 'quit' or end of input."""
    run_self_test()

    again = True
    while again:
        print("? ", end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            print()
            break
        for token in line.split():
            again = handle_token(token)
            if not again:
                break

    print("bye!")
    return 0


def main() -> int:
    """CLI entry point."""
    args = sys.argv
    prog_name = args[0] if args else "cli.py"

    if len(args) < 2:
        return interactive()

    if args[1] in ("-h", "--help"):
        print_help(prog_name)
        return 0

    if args[1] in ("-v", "--version"):
        print_version()
        return 0

    if args[1] in ("-t", "--table"):
        print_table()
        return 0

    if args[1] in ("-s", "--selftest"):
        return 1 if run_self_test() > 0 else 0

    if args[1] == "-d":
        if len(args) < 3:
            print("Error: Decompress requires at least 1 byte after -d", file=sys.stderr)
            print(f"Usage: {prog_name} -d <byte> [byte ...]", file=sys.stderr)
            return 1
        return do_decompress(args[2:])

    if args[1].startswith("-"):
        # Negative numbers are values, not options
        try:
            parse_int(args[1])
        except ValueError:
            print(f"Error: Unknown option {args[1]}", file=sys.stderr)
            return 1

    return do_compress(args[1:])


if __name__ == "__main__":
    sys.exit(main())
