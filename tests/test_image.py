import pytest

from cubcaster.image import Image, color_value

IM1_SX = 42
IM1_SY = 42


def _color_map(x, y, w, h):
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def test_new_image_geometry():
    img = Image(IM1_SX, IM1_SY)
    assert img.bpp == 32
    assert img.size_line == IM1_SX * 4
    assert len(img.data) == IM1_SX * IM1_SY * 4
    assert img.get_pixel(0, 0) == 0


def test_color_map_fill_round_trip():
    img = Image(IM1_SX, IM1_SY)
    for y in range(IM1_SY):
        for x in range(IM1_SX):
            img.put_pixel(x, y, color_value(_color_map(x, y, IM1_SX, IM1_SY)))
    for y in (0, 17, IM1_SY - 1):
        for x in (0, 20, IM1_SX - 1):
            assert img.get_pixel(x, y) == _color_map(x, y, IM1_SX, IM1_SY)


def test_color_value_true_color_unchanged():
    assert color_value(0xFF99FF, 24) == 0xFF99FF
    assert color_value(0x00FFFF, 32) == 0x00FFFF


def test_color_value_16_bit():
    assert color_value(0xFFFFFF, 16, (11, 5, 5, 6, 0, 5)) == 0xFFFF
    assert color_value(0x000000, 16, (11, 5, 5, 6, 0, 5)) == 0


def test_color_value_needs_shifts_below_24():
    with pytest.raises(ValueError):
        color_value(0xFFFFFF, 16)


def test_put_pixel_outside_is_ignored():
    img = Image(4, 4)
    img.put_pixel(-1, 0, 0xFFFFFF)
    img.put_pixel(4, 0, 0xFFFFFF)
    img.put_pixel(0, 4, 0xFFFFFF)
    assert img.data == bytearray(4 * 4 * 4)


def test_get_pixel_outside_raises():
    with pytest.raises(IndexError):
        Image(2, 2).get_pixel(2, 0)


def test_negative_color_is_masked():
    img = Image(1, 1)
    img.put_pixel(0, 0, -1)
    assert img.get_pixel(0, 0) == 0xFFFFFFFF


def test_little_endian_layout():
    img = Image(1, 1)
    img.put_pixel(0, 0, 0x112233)
    assert bytes(img.data) == b"\x33\x22\x11\x00"


def test_big_endian_layout():
    img = Image(1, 1, endian=1)
    img.put_pixel(0, 0, 0x112233)
    assert bytes(img.data) == b"\x00\x11\x22\x33"
    assert img.get_pixel(0, 0) == 0x112233


def test_fill_sets_every_pixel():
    img = Image(3, 2)
    img.fill(0x070E3F)
    assert {img.get_pixel(x, y) for x in range(3) for y in range(2)} == {0x070E3F}


@pytest.mark.parametrize("endian", [0, 1])
def test_to_rgb_bytes(endian):
    img = Image(2, 1, endian=endian)
    img.put_pixel(0, 0, 0x112233)
    img.put_pixel(1, 0, 0xFF99FF)
    assert img.to_rgb_bytes() == b"\x11\x22\x33\xff\x99\xff"


def test_invalid_size():
    with pytest.raises(ValueError):
        Image(0, 5)