"""Reverse the byte order of 32-bit unsigned integers."""

from .endian import MASK32, normalize32, reverse32, reverse32_buffer
from .hex_encoding import display_bytes, fits32, parse_hex, to_hex
from .report import DEFAULT_TEST_VALUES, Reversal

__all__ = [
    "MASK32", "normalize32", "reverse32", "reverse32_buffer",
    "display_bytes", "fits32", "parse_hex", "to_hex",
    "DEFAULT_TEST_VALUES", "Reversal",
]
