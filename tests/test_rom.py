import pytest

from lynxcore.rom import DEFAULT_ROM_CONTENTS, ROM_SIZE, Rom


def test_missing_file_keeps_default_contents(tmp_path):
    rom = Rom(str(tmp_path / "absent.img"))
    assert rom.loaded is False
    assert [rom.peek(a) for a in range(ROM_SIZE)] == [DEFAULT_ROM_CONTENTS] * ROM_SIZE


def test_none_keeps_default_contents():
    rom = Rom(None)
    assert rom.peek(0) == 0x88


def test_short_file_is_ignored(tmp_path):
    path = tmp_path / "short.img"
    path.write_bytes(bytes(range(100)))
    rom = Rom(path)
    assert rom.loaded is False
    assert rom.peek(5) == DEFAULT_ROM_CONTENTS


def test_loads_first_512_bytes(tmp_path):
    image = bytes(i & 0xFF for i in range(ROM_SIZE)) + b"\xAA" * 64
    path = tmp_path / "bios.img"
    path.write_bytes(image)
    rom = Rom(path)
    assert rom.loaded is True
    assert bytes(rom.peek(a) for a in range(ROM_SIZE)) == image[:ROM_SIZE]


def test_peek_mirrors_address(tmp_path):
    image = bytes(i & 0xFF for i in range(ROM_SIZE))
    path = tmp_path / "bios.img"
    path.write_bytes(image)
    rom = Rom(path)
    assert rom.peek(0xFE10) == rom.peek(0x10)
    assert rom.peek(ROM_SIZE + 3) == image[3]


def test_poke_ignored_unless_write_enabled():
    rom = Rom(None)
    rom.poke(0x10, 0x42)
    assert rom.peek(0x10) == DEFAULT_ROM_CONTENTS
    rom.write_enable = True
    rom.poke(0x210, 0x42)
    assert rom.peek(0x10) == 0x42


@pytest.mark.parametrize("method,expected", [("read_cycle", 5), ("write_cycle", 5), ("object_size", 0x200)])
def test_timing_and_size(method, expected):
    rom = Rom(None)
    assert getattr(rom, method)() == expected