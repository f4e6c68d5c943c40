"""
32-bit byte order reversal.

Both reversers take any integer-like value, keep its low 32 bits and return
the byte-reversed value, or None when the input is not an integer.
"""

import logging
import operator
import struct
from typing import Optional

logger = logging.getLogger(__name__)

MASK32 = 0xFFFFFFFF


def normalize32(value) -> Optional[int]:
    """Return the low 32 bits of an integer-like value, or None."""
    if isinstance(value, bool):
        return None
    try:
        return operator.index(value) & MASK32
    except TypeError:
        return None


def reverse32(value) -> Optional[int]:
    """Reverse the byte order of a 32-bit value using shift-and-mask."""
    num = normalize32(value)
    if num is None:
        return None

    lane0 = num & 0xFF
    lane1 = (num >> 8) & 0xFF
    lane2 = (num >> 16) & 0xFF
    lane3 = (num >> 24) & 0xFF
    logger.debug("lanes of 0x%08X: %02X %02X %02X %02X", num, lane3, lane2, lane1, lane0)

    return (lane0 << 24) | (lane1 << 16) | (lane2 << 8) | lane3


def reverse32_buffer(value) -> Optional[int]:
    """Reverse the byte order by writing big-endian and reading little-endian."""
    num = normalize32(value)
    if num is None:
        return None
    return struct.unpack('<I', struct.pack('>I', num))[0]
