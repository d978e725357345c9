"""Decoding of packed sprite line data as read by the Suzy sprite engine."""

from __future__ import annotations

from enum import Enum, IntEnum

# Read/write cycle costs, in system clock ticks.
CPU_RDWR_CYC = 5
DMA_RDWR_CYC = 4
SPR_RDWR_CYC = 3

SCREEN_WIDTH = 160
SCREEN_HEIGHT = 102

LINE_END = 0x80

RAM_SIZE = 0x10000

_U16 = 0xFFFF
_U32 = 0xFFFFFFFF


class MemMode(Enum):
    """Views of memory that a Lynx component can be asked to select."""

    BANK0 = 0
    BANK1 = 1
    RAM = 2
    CPU = 3


class LineType(IntEnum):
    """How the pixels of the current sprite line are encoded."""

    ERROR = 0
    ABS_LITERAL = 1
    LITERAL = 2
    PACKED = 3


class LineDecoder:
    """Reads one sprite line at a time from system RAM.

    The caller sets ``pixel_bits`` (1-4), ``literal`` (the whole line is
    raw pixels) and ``pen_index`` (16-entry palette map) before decoding.
    ``cycles`` accumulates the RAM cycles spent reading data.
    """

    def __init__(self, ram: bytearray) -> None:
        if len(ram) < RAM_SIZE:
            raise ValueError(f"RAM must hold at least {RAM_SIZE} bytes")
        self.ram = ram
        self.pixel_bits = 1
        self.literal = False
        self.pen_index = bytearray(range(16))
        self.cycles = 0

        self.tmp_addr = 0
        self.shift_reg = 0
        self.shift_reg_count = 0
        self.repeat_count = 0
        self.pixel = 0
        self.line_type = LineType.ERROR
        self.packet_bits_left = 0xFFFF
        self.line_base_address = 0
        self.line_collision_address = 0

    def _next_byte(self) -> int:
        value = self.ram[self.tmp_addr]
        self.tmp_addr = (self.tmp_addr + 1) & _U16
        return value

    def get_bits(self, bits: int) -> int:
        """Take ``bits`` bits from the data stream, most significant first.

        Returns 0 once the packet has no more than ``bits`` bits left; the
        hardware stops one bit early.
        """
        if self.packet_bits_left <= bits:
            return 0

        if self.shift_reg_count < bits:
            reg = (self.shift_reg << 24) & _U32
            reg |= self._next_byte() << 16
            reg |= self._next_byte() << 8
            reg |= self._next_byte()
            self.shift_reg = reg
            self.shift_reg_count += 24
            self.cycles += 3 * SPR_RDWR_CYC

        value = (self.shift_reg >> (self.shift_reg_count - bits)) & ((1 << bits) - 1)
        self.shift_reg_count -= bits
        self.packet_bits_left = (self.packet_bits_left - bits) & _U32
        return value

    def init_line(self, line_address: int, voff: int, video_base: int, collision_base: int) -> int:
        """Start decoding the line at ``line_address`` for screen row ``voff``.

        Returns the offset to the next line: 1 ends the quadrant, 0 ends
        the sprite. Rows beyond the bottom of the screen map to row 0.
        """
        self.shift_reg = 0
        self.shift_reg_count = 0
        self.repeat_count = 0
        self.pixel = 0
        self.line_type = LineType.ERROR
        self.packet_bits_left = 0xFFFF

        self.tmp_addr = line_address & _U16

        offset = self.get_bits(8)
        self.packet_bits_left = ((offset - 1) * 8) & _U32

        if self.literal:
            self.line_type = LineType.ABS_LITERAL
            self.repeat_count = (self.packet_bits_left // self.pixel_bits) & _U32

        if voff > SCREEN_HEIGHT - 1 or voff < 0:
            voff = 0

        self.line_base_address = (video_base + voff * (SCREEN_WIDTH // 2)) & _U32
        self.line_collision_address = (collision_base + voff * (SCREEN_WIDTH // 2)) & _U32
        return offset

    def get_pixel(self) -> int:
        """Return the next pen value of the line, or LINE_END."""
        if not self.repeat_count:
            if self.line_type is not LineType.ABS_LITERAL:
                self.line_type = LineType.LITERAL if self.get_bits(1) else LineType.PACKED

            if self.line_type is LineType.ABS_LITERAL:
                self.pixel = LINE_END
                return self.pixel
            if self.line_type is LineType.LITERAL:
                self.repeat_count = self.get_bits(4) + 1
            elif self.line_type is LineType.PACKED:
                self.repeat_count = self.get_bits(4)
                if not self.repeat_count:
                    self.pixel = LINE_END
                else:
                    self.pixel = self.pen_index[self.get_bits(self.pixel_bits)]
                self.repeat_count += 1
            else:
                return 0

        if self.pixel != LINE_END:
            self.repeat_count = (self.repeat_count - 1) & _U32
            if self.line_type is LineType.ABS_LITERAL:
                raw = self.get_bits(self.pixel_bits)
                if not self.repeat_count and not raw:
                    self.pixel = LINE_END
                else:
                    self.pixel = self.pen_index[raw]
            elif self.line_type is LineType.LITERAL:
                self.pixel = self.pen_index[self.get_bits(self.pixel_bits)]
            elif self.line_type is not LineType.PACKED:
                return 0

        return self.pixel

    def pixels(self):
        """Yield the pen values of the current line up to its end."""
        while (pixel := self.get_pixel()) != LINE_END:
            yield pixel