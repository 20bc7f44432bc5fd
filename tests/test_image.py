import pytest

from fractol.image import Image

IM1_SX = 42
IM1_SY = 42
IM3_SX = 242
IM3_SY = 242


def _map_color(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def _fill(image, kind):
    expected = {}
    for y in range(image.height):
        for x in range(image.width):
            color = _map_color(x, y, image.width, image.height, kind)
            image.put_pixel(x, y, color)
            expected[x, y] = color
    return expected


@pytest.mark.parametrize("big_endian", [False, True])
@pytest.mark.parametrize(("width", "height"), [(IM1_SX, IM1_SY), (IM3_SX, IM3_SY)])
def test_color_map_round_trip(width, height, big_endian):
    image = Image(width, height, 32, big_endian)
    expected = _fill(image, 1)
    assert all(image.get_pixel(x, y) == color for (x, y), color in expected.items())


def test_second_color_map_round_trip():
    image = Image(IM3_SX, IM3_SY, 32, False)
    expected = _fill(image, 2)
    assert all(image.get_pixel(x, y) == color for (x, y), color in expected.items())


def test_line_length_for_32_bits():
    assert Image(IM1_SX, IM1_SY).line_length == IM1_SX * 4
    assert Image(IM3_SX, IM3_SY).line_length == IM3_SX * 4


def test_line_length_is_padded_to_32_bits():
    image = Image(IM1_SX, IM1_SY, 24)
    assert image.line_length % 4 == 0
    assert image.line_length >= IM1_SX * 3
    assert image.line_length - IM1_SX * 3 < 4


def test_buffer_covers_every_row():
    image = Image(IM1_SX, IM1_SY)
    assert len(image.data) == image.line_length * IM1_SY
    assert not any(image.data)


def test_little_endian_byte_layout():
    image = Image(2, 1, 32, False)
    image.put_pixel(1, 0, 0x11223344)
    assert image.data[4:8] == bytes([0x44, 0x33, 0x22, 0x11])
    assert image.data[0:4] == bytes(4)


def test_big_endian_byte_layout():
    image = Image(2, 1, 32, True)
    image.put_pixel(0, 0, 0x11223344)
    assert image.data[0:4] == bytes([0x11, 0x22, 0x33, 0x44])


def test_24_bit_pixels_keep_low_bytes():
    image = Image(3, 2, 24, True)
    image.put_pixel(2, 1, 0x11223344)
    offset = image.line_length + 2 * 3
    assert image.data[offset : offset + 3] == bytes([0x22, 0x33, 0x44])
    assert image.get_pixel(2, 1) == 0x223344


def test_negative_color_is_stored_unsigned():
    image = Image(1, 1)
    image.put_pixel(0, 0, -1)
    assert image.get_pixel(0, 0) == 0xFFFFFFFF


def test_pixels_are_independent():
    image = Image(4, 4)
    image.put_pixel(1, 2, 0xFFFFFF)
    assert image.get_pixel(1, 2) == 0xFFFFFF
    assert image.get_pixel(2, 1) == 0
    assert image.get_pixel(0, 2) == 0


@pytest.mark.parametrize(("x", "y"), [(-1, 0), (0, -1), (IM1_SX, 0), (0, IM1_SY)])
def test_out_of_bounds_pixel(x, y):
    image = Image(IM1_SX, IM1_SY)
    with pytest.raises(IndexError):
        image.put_pixel(x, y, 0)
    with pytest.raises(IndexError):
        image.get_pixel(x, y)


@pytest.mark.parametrize(("width", "height"), [(0, 10), (10, 0), (-5, 5)])
def test_invalid_size(width, height):
    with pytest.raises(ValueError):
        Image(width, height)


@pytest.mark.parametrize("bits", [1, 4, 12, 64])
def test_unsupported_depth(bits):
    with pytest.raises(ValueError):
        Image(4, 4, bits)