import hashlib

import pytest

from lynxcore.md5sum import Md5Context, asciistr


def digest_of(data):
    ctx = Md5Context()
    ctx.starts()
    ctx.update(data)
    return ctx.finish()


def test_empty_message():
    assert asciistr(digest_of(b""), False) == "d41d8cd98f00b204e9800998ecf8427e"


@pytest.mark.parametrize(
    "data",
    [b"a", b"abc", b"message digest", b"x" * 55, b"y" * 56, b"z" * 64,
     b"w" * 119, bytes(range(256)) * 5],
)
def test_matches_hashlib(data):
    assert digest_of(data) == hashlib.md5(data).digest()


def test_incremental_equals_whole():
    data = bytes(range(200)) * 3
    ctx = Md5Context()
    ctx.starts()
    for start in range(0, len(data), 37):
        ctx.update(data[start:start + 37])
    assert ctx.finish() == hashlib.md5(data).digest()


def test_empty_update_changes_nothing():
    ctx = Md5Context()
    ctx.starts()
    ctx.update(b"lynx")
    ctx.update(b"")
    assert ctx.finish() == hashlib.md5(b"lynx").digest()


def test_update_u32_as_lsb():
    ctx = Md5Context()
    ctx.starts()
    ctx.update_u32_as_lsb(0x04030201)
    assert ctx.finish() == hashlib.md5(b"\x01\x02\x03\x04").digest()


def test_update_string():
    ctx = Md5Context()
    ctx.starts()
    ctx.update_string("The quick brown fox")
    assert ctx.finish() == hashlib.md5(b"The quick brown fox").digest()


def test_starts_resets_context():
    ctx = Md5Context()
    ctx.update(b"garbage")
    ctx.starts()
    ctx.update(b"abc")
    assert ctx.finish() == hashlib.md5(b"abc").digest()


def test_asciistr_normal_order_matches_hex():
    digest = hashlib.md5(b"rom").digest()
    assert asciistr(digest, False) == digest.hex()


def test_asciistr_borked_order_swaps_nibbles():
    digest = bytes([0x12] * 16)
    assert asciistr(digest, True) == "21" * 16


def test_asciistr_borked_is_nibble_swap_of_normal():
    digest = hashlib.md5(b"cart").digest()
    normal = asciistr(digest, False)
    borked = asciistr(digest, True)
    swapped = "".join(normal[i + 1] + normal[i] for i in range(0, 32, 2))
    assert borked == swapped