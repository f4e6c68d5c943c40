"""
reverseendian - CLI entry point.

Usage:
    python -m reverseendian [-t] [-d] [VALUE ...]

Arguments:
    VALUE           32-bit value in hex, optionally prefixed with 0x
    -t, --test      Run the built-in reversal tests
    -d, --debug     Show byte lanes of each reversal
    -h, --help      Show this help message
"""

import argparse
import logging
import sys

from .endian import reverse32, reverse32_buffer
from .hex_encoding import fits32, parse_hex, to_hex
from .report import DEFAULT_TEST_VALUES, Reversal

logging.basicConfig(
    level=logging.INFO,
    format='%(message)s',
)
logger = logging.getLogger(__name__)

EXIT_FAILED = 1
EXIT_BAD_VALUE = 2


def print_reversal(reversal: Reversal) -> None:
    for line in reversal.log():
        print(line)
    print("---")


def run_tests() -> bool:
    """Reverse the demonstration values; True when every value round-trips."""
    print("=== 32-bit Endian Reversal Tests ===\n")
    passed = True
    for value in DEFAULT_TEST_VALUES:
        reversal = Reversal(value)
        print_reversal(reversal)
        if not reversal.ok:
            logger.error(f"Reversal check failed for {to_hex(value)}")
            passed = False

    print("\n=== Interactive Example ===")
    print("To use these functions with your own numbers:")
    print(f"reverse32(0x12345678) => {to_hex(reverse32(0x12345678))}")
    print(f"reverse32_buffer(0x12345678) => {to_hex(reverse32_buffer(0x12345678))}")
    return passed


def parse_values(texts: list[str]) -> list[int]:
    """Parse every hex literal, exiting on the first invalid one."""
    values = []
    for text in texts:
        try:
            value = parse_hex(text)
        except ValueError as e:
            logger.error(f"Invalid hex value '{text}': {e}")
            logger.error("Expected a hex number such as 0x12345678 (see --help)")
            sys.exit(EXIT_BAD_VALUE)
        if not fits32(value):
            logger.warning(f"'{text}' does not fit in 32 bits, using low 32 bits {to_hex(value)}")
        values.append(value)
    return values


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='reverseendian',
        description='Convert 32-bit values between big-endian and little-endian byte order',
    )
    parser.add_argument(
        'values', nargs='*', metavar='VALUE',
        help='32-bit value in hex (e.g. 0x12345678 or DEADBEEF)',
    )
    parser.add_argument('-t', '--test', action='store_true', help='Run the built-in reversal tests')
    parser.add_argument('-d', '--debug', action='store_true', help='Show byte lanes of each reversal')
    return parser


def main(argv=None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if not args.values and not args.test:
        parser.print_usage(sys.stderr)
        sys.exit(EXIT_FAILED)

    values = parse_values(args.values)
    for value in values:
        print_reversal(Reversal(value))

    if args.test and not run_tests():
        sys.exit(EXIT_FAILED)


if __name__ == '__main__':
    main()
