"""CRC-32 checksum using the reflected 0xEDB88320 polynomial."""

from __future__ import annotations

from typing import Optional

_POLYNOMIAL = 0xEDB88320


def _build_table() -> tuple[int, ...]:
    table = []
    for byte in range(256):
        value = byte
        for _ in range(8):
            value = (value >> 1) ^ _POLYNOMIAL if value & 1 else value >> 1
        table.append(value)
    return tuple(table)


_TABLE = _build_table()


def crc32(crc: int, data: Optional[bytes]) -> int:
    """Continue a CRC-32 from ``crc`` over ``data``.

    Returns 0 when ``data`` is None, as the checksum of no buffer at all.
    """
    if data is None:
        return 0
    value = (crc ^ 0xFFFFFFFF) & 0xFFFFFFFF
    for byte in bytes(data):
        value = _TABLE[(value ^ byte) & 0xFF] ^ (value >> 8)
    return value ^ 0xFFFFFFFF