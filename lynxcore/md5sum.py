"""Incremental MD5 digest with the emulator's hex formatting helper."""

from __future__ import annotations

import math
import struct
from typing import Union

_MASK = 0xFFFFFFFF

_SHIFTS = (
    (7, 12, 17, 22),
    (5, 9, 14, 20),
    (4, 11, 16, 23),
    (6, 10, 15, 21),
)

_CONSTANTS = tuple(int(abs(math.sin(i + 1)) * 2**32) & _MASK for i in range(64))

_PADDING = b"\x80" + b"\x00" * 63

_HEX = "0123456789abcdef"


def _rotl(value: int, amount: int) -> int:
    value &= _MASK
    return ((value << amount) | (value >> (32 - amount))) & _MASK


def _message_index(step: int) -> int:
    round_no = step // 16
    i = step % 16
    if round_no == 0:
        return i
    if round_no == 1:
        return (5 * i + 1) % 16
    if round_no == 2:
        return (3 * i + 5) % 16
    return (7 * i) % 16


def _mix(round_no: int, x: int, y: int, z: int) -> int:
    if round_no == 0:
        return z ^ (x & (y ^ z))
    if round_no == 1:
        return y ^ (z & (x ^ y))
    if round_no == 2:
        return x ^ y ^ z
    return (y ^ (x | (~z & _MASK))) & _MASK


class Md5Context:
    """Streaming MD5 computation."""

    def __init__(self) -> None:
        self.starts()

    def starts(self) -> None:
        """Reset the context to begin a new digest."""
        self._bit_count = 0
        self._state = [0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476]
        self._buffer = b""

    def _process(self, block: bytes) -> None:
        words = struct.unpack("<16I", block)
        a, b, c, d = self._state
        for step in range(64):
            round_no = step // 16
            value = (a + _mix(round_no, b, c, d) + words[_message_index(step)]
                     + _CONSTANTS[step]) & _MASK
            value = (_rotl(value, _SHIFTS[round_no][step % 4]) + b) & _MASK
            a, b, c, d = d, value, b, c
        self._state = [
            (s + v) & _MASK for s, v in zip(self._state, (a, b, c, d))
        ]

    def update(self, data: bytes) -> None:
        """Feed more bytes into the digest."""
        data = bytes(data)
        if not data:
            return
        self._bit_count = (self._bit_count + len(data) * 8) & 0xFFFFFFFFFFFFFFFF
        pending = self._buffer + data
        full = len(pending) - len(pending) % 64
        for start in range(0, full, 64):
            self._process(pending[start:start + 64])
        self._buffer = pending[full:]

    def update_u32_as_lsb(self, value: int) -> None:
        """Feed a 32-bit value as four little-endian bytes."""
        self.update(struct.pack("<I", value & _MASK))

    def update_string(self, text: Union[str, bytes]) -> None:
        """Feed the bytes of a string (UTF-8 encoded when given as str)."""
        if isinstance(text, str):
            text = text.encode("utf-8")
        self.update(text)

    def finish(self) -> bytes:
        """Pad the message and return the 16-byte digest."""
        length = struct.pack("<Q", self._bit_count)
        last = (self._bit_count >> 3) & 0x3F
        pad = 56 - last if last < 56 else 120 - last
        self.update(_PADDING[:pad])
        self.update(length)
        return struct.pack("<4I", *self._state)


def asciistr(digest: bytes, borked_order: bool) -> str:
    """Format a 16-byte digest as lower-case hex.

    With ``borked_order`` the two nibbles of each byte are written
    low nibble first.
    """
    parts = []
    for byte in bytes(digest)[:16]:
        high, low = _HEX[byte >> 4], _HEX[byte & 0x0F]
        parts.append(low + high if borked_order else high + low)
    return "".join(parts)