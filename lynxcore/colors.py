"""Pixel colour packing and frame-surface descriptions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

RED_SHIFT_32 = 16
GREEN_SHIFT_32 = 8
BLUE_SHIFT_32 = 0
ALPHA_SHIFT_32 = 24

RED_EXPAND_16, GREEN_EXPAND_16, BLUE_EXPAND_16 = 3, 2, 3
RED_SHIFT_16, GREEN_SHIFT_16, BLUE_SHIFT_16 = 11, 5, 0

RED_EXPAND_15, GREEN_EXPAND_15, BLUE_EXPAND_15 = 3, 3, 3
RED_SHIFT_15, GREEN_SHIFT_15, BLUE_SHIFT_15 = 10, 5, 0

BLUE_EXPAND_15_1, GREEN_EXPAND_15_1, RED_EXPAND_15_1 = 3, 3, 3
BLUE_SHIFT_15_1, GREEN_SHIFT_15_1, RED_SHIFT_15_1 = 10, 5, 0


def make_color_32(r: int, g: int, b: int, a: int) -> int:
    """Pack 8-bit components into XRGB8888 (alpha in the top byte)."""
    return (r << RED_SHIFT_32) | (g << GREEN_SHIFT_32) | (b << BLUE_SHIFT_32) | (a << ALPHA_SHIFT_32)


def make_color_16(r: int, g: int, b: int, a: int) -> int:
    """Pack 8-bit components into RGB565; alpha is ignored."""
    return (((r >> RED_EXPAND_16) << RED_SHIFT_16)
            | ((g >> GREEN_EXPAND_16) << GREEN_SHIFT_16)
            | ((b >> BLUE_EXPAND_16) << BLUE_SHIFT_16))


def make_color_15(r: int, g: int, b: int, a: int) -> int:
    """Pack 8-bit components into RGB555; alpha is ignored."""
    return (((r >> RED_EXPAND_15) << RED_SHIFT_15)
            | ((g >> GREEN_EXPAND_15) << GREEN_SHIFT_15)
            | ((b >> BLUE_EXPAND_15) << BLUE_SHIFT_15))


def make_color_15_1(r: int, g: int, b: int, a: int) -> int:
    """Pack 8-bit components into BGR555; alpha is ignored."""
    return (((r >> RED_EXPAND_15_1) << RED_SHIFT_15_1)
            | ((g >> GREEN_EXPAND_15_1) << GREEN_SHIFT_15_1)
            | ((b >> BLUE_EXPAND_15_1) << BLUE_SHIFT_15_1))


@dataclass
class Rect:
    """A rectangle on a surface."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


@dataclass
class Surface:
    """A frame buffer; ``pitch`` is the row stride in pixels."""

    width: int
    height: int
    pitch: int
    bpp: int = 32
    pixels: List[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.pixels:
            self.pixels = [0] * (self.pitch * self.height)