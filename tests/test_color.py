import random

import pytest

from debugfire.color import Color


def test_default_is_black():
    assert Color() == Color.BLACK
    assert Color().to_rgb() == 0


def test_components_round_trip():
    c = Color(12, 200, 7)
    assert (c.red(), c.green(), c.blue()) == (12, 200, 7)


def test_from_hex_round_trip():
    c = Color.from_hex(0x123456)
    assert c.to_rgb() == 0x123456
    assert c.to_html() == "#123456"


@pytest.mark.parametrize("args", [(-1, 0, 0), (0, 256, 0), (0, 0, 300)])
def test_constructor_rejects_out_of_range(args):
    with pytest.raises(ValueError):
        Color(*args)


@pytest.mark.parametrize("value", [-1, 0x1000000])
def test_from_hex_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        Color.from_hex(value)


def test_presets_match_hex():
    assert Color.WHITE.to_rgb() == 0xFFFFFF
    assert Color.GRAY.to_rgb() == 0x808080
    assert Color.WHITE.to_html() == "#ffffff"


def test_str_of_named_and_unnamed():
    assert str(Color.RED) == "Color.RED"
    assert str(Color.from_hex(0xA50021)) == Color.from_hex(0xA50021).to_html()


def test_equality_and_hash():
    a = Color(1, 2, 3)
    b = Color.from_hex(a.to_rgb())
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a != Color(1, 2, 4)


def test_ordering_follows_rgb_value():
    black = Color(0, 0, 0)
    blue = Color(0, 0, 255)
    green = Color.from_hex(0x00FF00)
    red = Color(255, 0, 0)
    white = Color.from_hex(0xFFFFFF)
    assert black < blue < green < red < white
    assert not white < black
    assert sorted([white, red, black]) == [black, red, white]


def test_from_hsv_pure_hue():
    assert Color.from_hsv(0, 1, 1) == Color.RED


@pytest.mark.parametrize("v", [0.0, 0.25, 0.5, 1.0])
def test_from_hsv_zero_saturation_is_gray(v):
    c = Color.from_hsv(0.3, 0, v)
    assert c.red() == c.green() == c.blue()


def test_from_hsv_zero_value_is_black():
    assert Color.from_hsv(0.7, 0.5, 0) == Color.BLACK


@pytest.mark.parametrize("args", [(-0.1, 0, 0), (0, 1.1, 0), (0, 0, 2)])
def test_from_hsv_rejects_out_of_range(args):
    with pytest.raises(ValueError):
        Color.from_hsv(*args)


def test_random_is_reproducible_and_in_range():
    a = [Color.random(random.Random(5)) for _ in range(1)]
    b = [Color.random(random.Random(5)) for _ in range(1)]
    assert a == b
    rng = random.Random(9)
    for _ in range(50):
        c = Color.random(rng)
        assert 0 <= c.to_rgb() <= 0xFFFFFF