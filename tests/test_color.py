import pytest

from dxfdraw.color import (
    COLOR_RGB,
    DEFAULT_COLOR,
    GREY_255,
    RED,
    WHITE,
    color_index,
    index_color,
)


def test_table_covers_every_colour_number():
    looked_up = [index_color(number) for number in range(256)]
    assert len(looked_up) == len(COLOR_RGB) == 256
    assert all(len(rgb) == 3 and all(0 <= c <= 255 for c in rgb) for rgb in looked_up)
    assert [tuple(rgb) for rgb in looked_up] == [tuple(rgb) for rgb in COLOR_RGB]


def test_index_color_values_from_table():
    assert index_color(RED) == (255, 0, 0)
    assert index_color(GREY_255) == (255, 255, 255)
    assert index_color(0) == (0, 0, 0)


def test_exact_match_prefers_lowest_number():
    assert color_index([255, 0, 0]) == RED
    assert color_index([255, 255, 255]) == WHITE


def test_default_colour_is_white():
    assert index_color(DEFAULT_COLOR) == (255, 255, 255)
    assert color_index(list(index_color(DEFAULT_COLOR))) == WHITE


def test_nearest_colour():
    assert color_index([254, 1, 1]) == RED


def test_round_trip_through_rgb():
    for number in range(256):
        rgb = index_color(number)
        found = color_index(list(rgb))
        assert index_color(found) == rgb
        assert found <= number


def test_short_rgb_rejected():
    with pytest.raises(ValueError):
        color_index([1, 2])


@pytest.mark.parametrize("bad", [-1, 256])
def test_index_out_of_range(bad):
    with pytest.raises(ValueError):
        index_color(bad)