# lynxcore

Building blocks for an Atari Lynx emulator, in plain Python with no
third-party dependencies.

## What is inside

- `lynxcore.math_unit` — `MathUnit`, the Suzy chip's hardware multiplier
  and divider. Registers `A`–`H`, `J`–`N` and `P` are written with
  `poke(register, data)` and read with `peek(register)`. Writing `A` starts
  a multiply (`AB * CD -> EFGH`, added into `JKLM` when `accumulate` is
  set); writing `E` starts a divide (`EFGH / NP -> ABCD`, remainder in
  `JKLM`). Signed math follows the hardware's quirk of treating `0x8000`
  as positive and `0x0000` as negative. Dividing by zero gives an all-ones
  quotient, a zero remainder and sets `mathbit`.
- `lynxcore.sprite_line` — `LineDecoder`, which reads packed or literal
  sprite line data out of a 64 KiB RAM `bytearray`: `init_line`,
  `get_pixel`, `get_bits` and the `pixels()` generator, with the RAM cycle
  cost collected in `cycles`. Also the screen size constants
  (`SCREEN_WIDTH`, `SCREEN_HEIGHT`), `LINE_END`, and the `LineType` and
  `MemMode` enums.
- `lynxcore.rom` — `Rom`, the 512-byte boot ROM. It is filled with `0x88`
  and replaced by the first 512 bytes of the given file when that file can
  be opened and is long enough (`loaded` tells which). Addresses mirror
  every 512 bytes; writes only take effect while `write_enable` is set.
- `lynxcore.crc` — `crc32(crc, data)`, the standard reflected CRC-32,
  continuing from a previous value.
- `lynxcore.md5sum` — `Md5Context` (`starts`, `update`,
  `update_u32_as_lsb`, `update_string`, `finish`) and
  `asciistr(digest, borked_order)`, which formats a digest as hex, with the
  nibbles of each byte swapped when `borked_order` is true.
- `lynxcore.colors` — pixel packing helpers (`make_color_32` for XRGB8888,
  `make_color_16` for RGB565, `make_color_15` for RGB555,
  `make_color_15_1` for BGR555) and the `Rect` and `Surface` records.
- `lynxcore.settings` — `get_setting_bool(name)`; `lynx.lowpass`,
  `lynx.rotateinput` and `cheats` are all off, and unknown names read as
  false.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## A short example

```python
from lynxcore.crc import crc32
from lynxcore.md5sum import Md5Context, asciistr
from lynxcore.math_unit import MathUnit
from lynxcore.rom import Rom

print(hex(crc32(0, b"123456789")))        # 0xcbf43926

ctx = Md5Context()
ctx.update(b"abc")
print(asciistr(ctx.finish(), False))      # 900150983cd24fb0d6963f7d28e17f72

math = MathUnit()
# Multiply 5 * 3: write CD low then high, then AB low then high.
math.poke("D", 3)
math.poke("C", 0)
math.poke("B", 5)
math.poke("A", 0)                         # writing A runs the multiply
print(math.peek("H"))                     # 15

# Divide 100 by 7: write NP, then EFGH; writing E runs the divide.
math.poke("P", 7)
math.poke("H", 100)
math.poke("F", 0)
math.poke("E", 0)
print(math.peek("D"), math.peek("M"))     # 14 2

rom = Rom(None)                           # no image: default contents
print(hex(rom.peek(0xFE00)))              # 0x88
```

## What this package does not do

It is a set of parts, not a runnable emulator. There is no CPU, no
cartridge or RAM chip model, no complete Suzy register file or sprite
engine that walks sprite control blocks and draws whole sprites, no
save-state format, no cheat handling, no sound, and no command to load and
play a game. `LineDecoder` decodes the pixels of a line but leaves drawing
them into video and collision memory to the caller.