"""Hex encoding/decoding and display helpers for 32-bit values."""

import struct

from .endian import MASK32, normalize32

HEX_DIGITS = frozenset('0123456789abcdefABCDEF_')


def byte_to_hex(data: bytes) -> str:
    """Convert bytes to lowercase hex string."""
    return data.hex()


def _require32(value) -> int:
    num = normalize32(value)
    if num is None:
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return num


def value_to_bytes(value, byteorder: str = 'big') -> bytes:
    """Encode the low 32 bits of value as 4 bytes."""
    if byteorder not in ('big', 'little'):
        raise ValueError("byteorder must be either 'little' or 'big'")
    fmt = '>I' if byteorder == 'big' else '<I'
    return struct.pack(fmt, _require32(value))


def to_hex(value) -> str:
    """Format as 0x followed by 8 uppercase hex digits."""
    return f"0x{_require32(value):08X}"


def display_bytes(value) -> str:
    """Format the 4 bytes, most significant first, e.g. '12 34 56 78'."""
    return value_to_bytes(value).hex(' ').upper()


def parse_hex(text: str) -> int:
    """
    Parse a hexadecimal literal with optional 0x prefix.

    The result is not truncated; see fits32().
    """
    digits = text.strip()
    if digits[:2] in ('0x', '0X'):
        digits = digits[2:]
    if not digits:
        raise ValueError("no hex digits")
    bad = sorted(set(digits) - HEX_DIGITS)
    if bad:
        raise ValueError(f"invalid hex character(s): {''.join(bad)}")
    try:
        return int(digits, 16)
    except ValueError:
        # misplaced underscores
        raise ValueError("malformed hex literal") from None


def fits32(value: int) -> bool:
    return 0 <= value <= MASK32
