import pytest

from fractol.colors import COLOR_NAMES, RgbShifts, good_color, lookup_color, rgb_shifts

TRUECOLOR_24 = (0xFF0000, 0xFF00, 0xFF)
RGB565 = (0xF800, 0x07E0, 0x001F)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("red", 0xFF0000),
        ("snow", 0xFFFAFA),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
        ("black", 0x0),
    ],
)
def test_lookup_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_is_case_insensitive():
    assert lookup_color("RED") == lookup_color("red")
    assert lookup_color("GhostWhite") == 0xF8F8FF


def test_lookup_joins_suffix_with_space():
    assert lookup_color("ghost", "white") == 0xF8F8FF
    assert lookup_color("light", "green") == 0x90EE90


def test_duplicate_names_resolve_to_first_entry():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_none_is_transparent_marker():
    assert lookup_color("none") == -1


def test_unknown_name_gives_zero():
    assert lookup_color("no such colour") == 0
    assert lookup_color("red", "ish") == 0


@pytest.mark.parametrize("value", [0xFF8000, 0x123456, 0x0, 0xFFFFFF])
def test_hex_spec_round_trip(value):
    assert lookup_color(f"#{value:06x}") == value
    assert lookup_color(f"#{value:06X}") == value


def test_hex_spec_reads_leading_digits_only():
    assert lookup_color("#ff00zz") == 0xFF00
    assert lookup_color("#zz") == 0


def test_hex_spec_ignores_suffix():
    assert lookup_color("#00ff00", "white") == 0x00FF00


def test_every_table_entry_is_reachable_by_name():
    first = {}
    for name, color in COLOR_NAMES:
        first.setdefault(name.lower(), color)
    for name, color in first.items():
        assert lookup_color(name) == color
        assert lookup_color(name.upper()) == color


def test_rgb_shifts_truecolor_24():
    shifts = rgb_shifts(*TRUECOLOR_24)
    assert shifts == RgbShifts(16, 8, 8, 8, 0, 8)
    assert shifts.red_shift == 16


def test_rgb_shifts_565():
    assert rgb_shifts(*RGB565) == (11, 5, 5, 6, 0, 5)


@pytest.mark.parametrize("masks", [(0, 0xFF00, 0xFF), (0xFF0000, 0, 0xFF), (0xFF0000, 0xFF00, 0)])
def test_rgb_shifts_rejects_empty_mask(masks):
    with pytest.raises(ValueError):
        rgb_shifts(*masks)


@pytest.mark.parametrize("color", [0x0, 0xFFFFFF, 0x123456, 0xFF99FF, 0x00FFFF])
def test_deep_visual_keeps_color(color):
    assert good_color(color, 24, rgb_shifts(*RGB565)) == color
    assert good_color(color, 32, rgb_shifts(*RGB565)) == color


@pytest.mark.parametrize("color", [0x0, 0xFFFFFF, 0x123456, 0xFF99FF, 0x00FFFF, 0xABCDEF])
def test_shallow_visual_with_8bit_channels_round_trips(color):
    assert good_color(color, 16, rgb_shifts(*TRUECOLOR_24)) == color


def test_565_white_fills_all_bits():
    assert good_color(0xFFFFFF, 16, rgb_shifts(*RGB565)) == 0xFFFF


def test_565_channels_stay_in_their_masks():
    shifts = rgb_shifts(*RGB565)
    red, green, blue = RGB565
    assert good_color(0xFF0000, 16, shifts) == red
    assert good_color(0x00FF00, 16, shifts) == green
    assert good_color(0x0000FF, 16, shifts) == blue
    assert good_color(0x0, 16, shifts) == 0


def test_565_is_monotonic_in_each_channel():
    shifts = rgb_shifts(*RGB565)
    values = [good_color(level << 16, 16, shifts) for level in range(256)]
    assert values == sorted(values)
    assert all(v & ~RGB565[0] == 0 for v in values)