import pytest

from extruded_text_gif.color import hsv_to_rgb, lerp_color
from extruded_text_gif.config import BLACK


@pytest.mark.parametrize("hue, expected", [
    (0, (255, 0, 0, 255)),
    (60, (255, 255, 0, 255)),
    (120, (0, 255, 0, 255)),
    (180, (0, 255, 255, 255)),
    (240, (0, 0, 255, 255)),
    (300, (255, 0, 255, 255)),
])
def test_hsv_primaries_and_secondaries(hue, expected):
    assert hsv_to_rgb(hue, 1.0, 1.0) == expected


def test_hsv_wraps_full_turn():
    assert hsv_to_rgb(360, 1.0, 1.0) == hsv_to_rgb(0, 1.0, 1.0)
    assert hsv_to_rgb(480, 1.0, 1.0) == hsv_to_rgb(120, 1.0, 1.0)


def test_hsv_side_color_at_reduced_value():
    assert hsv_to_rgb(300, 1.0, 0.6) == (153, 0, 153, 255)


def test_hsv_fractional_hue_truncates():
    # h=30: sector 0, f=0.5 -> t = 255 * 0.5
    assert hsv_to_rgb(30, 1.0, 1.0) == (255, 127, 0, 255)


def test_hsv_zero_saturation_is_grey():
    assert hsv_to_rgb(200, 0.0, 0.5) == (127, 127, 127, 255)


def test_lerp_endpoints_are_exact():
    side = (153, 0, 153, 255)
    assert lerp_color(side, BLACK, 0.0) == side
    assert lerp_color(side, BLACK, 1.0) == BLACK


def test_lerp_truncates_channels():
    assert lerp_color((153, 0, 153, 255), BLACK, 0.25) == (114, 0, 114, 255)
    assert lerp_color((0, 0, 0, 0), (255, 255, 255, 255), 0.5) == (127, 127, 127, 127)


def test_lerp_clamps_factor():
    a = (10, 20, 30, 40)
    b = (200, 100, 50, 255)
    assert lerp_color(a, b, -1.0) == a
    assert lerp_color(a, b, 3.0) == b
