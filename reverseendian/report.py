"""
Reversal records.

A Reversal runs one value through both reversal strategies and renders the
result the way the command line prints it.
"""

import logging

from .endian import normalize32, reverse32, reverse32_buffer
from .hex_encoding import byte_to_hex, display_bytes, to_hex, value_to_bytes

logger = logging.getLogger(__name__)

# Demonstration set run by --test
DEFAULT_TEST_VALUES = (
    0x12345678,
    0xDEADBEEF,
    0x00FF00FF,
    0x11223344,
    0x000000FF,
)


class Reversal:
    """Byte order reversal of a single 32-bit value."""

    def __init__(self, value):
        original = normalize32(value)
        if original is None:
            raise TypeError(f"cannot reverse {type(value).__name__} value {value!r}")
        self.original = original
        self.reversed = reverse32(original)
        self.buffer_reversed = reverse32_buffer(original)
        self.double_reversed = reverse32(self.reversed)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s little-endian bytes: %s", to_hex(original),
                         byte_to_hex(value_to_bytes(original, "little")))

    @property
    def strategies_match(self) -> bool:
        return self.reversed == self.buffer_reversed

    @property
    def round_trips(self) -> bool:
        return self.double_reversed == self.original

    @property
    def ok(self) -> bool:
        return self.strategies_match and self.round_trips

    def log(self) -> list[str]:
        """Return the display lines for this reversal."""
        return [
            f"Original:  {to_hex(self.original)} ({display_bytes(self.original)})",
            f"Reversed:  {to_hex(self.reversed)} ({display_bytes(self.reversed)})",
            f"Buffer method: {to_hex(self.buffer_reversed)} (match: {self.strategies_match})",
            f"Double reversed: {to_hex(self.double_reversed)} (original: {self.round_trips})",
        ]

    def __repr__(self):
        return f"Reversal({to_hex(self.original)} -> {to_hex(self.reversed)})"
