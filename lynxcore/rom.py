"""The 512-byte boot ROM embedded in Mikey."""

from __future__ import annotations

import os
from typing import Optional, Union

ROM_SIZE = 0x200
ROM_ADDR_MASK = 0x01FF
DEFAULT_ROM_CONTENTS = 0x88

BROM_START = 0xFE00
BROM_SIZE = 0x200
VECTOR_START = 0xFFFA
VECTOR_SIZE = 0x6

PathType = Union[str, "os.PathLike[str]"]


class Rom:
    """Boot ROM image, filled with a default byte until a BIOS file loads.

    A file that cannot be opened, or that is shorter than the ROM, leaves
    the default contents in place.
    """

    def __init__(self, romfile: Optional[PathType]) -> None:
        self.write_enable = False
        self.loaded = False
        self.reset()
        self._data = bytearray([DEFAULT_ROM_CONTENTS] * ROM_SIZE)

        if romfile is None:
            return
        try:
            with open(romfile, "rb") as handle:
                image = handle.read()
        except OSError:
            return
        if len(image) < ROM_SIZE:
            return
        self._data[:] = image[:ROM_SIZE]
        self.loaded = True

    def reset(self) -> None:
        """Reset the ROM; it holds no state that a reset changes."""

    def poke(self, addr: int, data: int) -> None:
        """Write a byte, which only takes effect while writes are enabled."""
        if self.write_enable:
            self._data[addr & ROM_ADDR_MASK] = data & 0xFF

    def peek(self, addr: int) -> int:
        """Read the byte at ``addr`` (mirrored every 512 bytes)."""
        return self._data[addr & ROM_ADDR_MASK]

    def read_cycle(self) -> int:
        return 5

    def write_cycle(self) -> int:
        return 5

    def object_size(self) -> int:
        return ROM_SIZE