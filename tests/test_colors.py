import pytest

from lynxcore.colors import (
    Rect,
    Surface,
    make_color_15,
    make_color_15_1,
    make_color_16,
    make_color_32,
)


@pytest.mark.parametrize("r,g,b,a", [(30, 30, 30, 0), (255, 0, 128, 7), (1, 2, 3, 4)])
def test_color_32_components_round_trip(r, g, b, a):
    value = make_color_32(r, g, b, a)
    assert (value >> 16) & 0xFF == r
    assert (value >> 8) & 0xFF == g
    assert value & 0xFF == b
    assert (value >> 24) & 0xFF == a


def test_color_16_white_fills_all_bits():
    assert make_color_16(255, 255, 255, 0) == 0xFFFF


def test_color_15_white_fills_low_fifteen_bits():
    assert make_color_15(255, 255, 255, 0) == 0x7FFF


@pytest.mark.parametrize("r,g,b", [(30, 30, 30), (200, 100, 50), (8, 248, 16)])
def test_color_16_components(r, g, b):
    value = make_color_16(r, g, b, 0)
    assert value >> 11 == r >> 3
    assert (value >> 5) & 0x3F == g >> 2
    assert value & 0x1F == b >> 3


@pytest.mark.parametrize("r,g,b", [(30, 60, 90), (255, 0, 17), (12, 200, 240)])
def test_bgr555_is_rgb555_with_red_and_blue_swapped(r, g, b):
    assert make_color_15_1(r, g, b, 0) == make_color_15(b, g, r, 0)


@pytest.mark.parametrize("maker", [make_color_16, make_color_15, make_color_15_1])
def test_alpha_ignored_for_16_bit_formats(maker):
    assert maker(10, 20, 30, 0) == maker(10, 20, 30, 255)


def test_surface_allocates_pitch_times_height():
    surface = Surface(width=160, height=102, pitch=160, bpp=16)
    assert len(surface.pixels) == 160 * 102
    assert set(surface.pixels) == {0}


def test_surface_keeps_given_pixels():
    pixels = [7] * 12
    surface = Surface(width=3, height=3, pitch=4, pixels=pixels)
    assert surface.pixels == [7] * 12


def test_rect_fields():
    rect = Rect(0, 0, 160, 102)
    assert (rect.x, rect.y, rect.w, rect.h) == (0, 0, 160, 102)