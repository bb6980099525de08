import pytest

from mobagen.color import Color32, Colorf, Colors


def test_default_is_opaque_black():
    assert Color32() == Color32(0, 0, 0, 255)


def test_from_packed_red_is_lowest_byte():
    assert Colors.RED == Color32(255, 0, 0, 255)
    assert Color32.from_packed(0xFF0000FF) == Color32(255, 0, 0, 255)


def test_from_packed_blue_and_alpha():
    assert Color32.from_packed(0xFFFF0000) == Color32(0, 0, 255, 255)
    assert Colors.TRANSPARENT_BLACK == Color32(0, 0, 0, 0)


@pytest.mark.parametrize("word", [0, 0xFFFFFFFF, 0xFFD7EBFA, 0x12345678, 0x80FF0010])
def test_packed_round_trip(word):
    assert Color32.from_packed(word).packed() == word


def test_colors_packed_values():
    assert Colors.ALICE_BLUE.packed() == 0xFFFFF8F0
    assert Colors.YELLOW_GREEN.packed() == 0xFF32CD9A


def test_channel_out_of_range_rejected():
    with pytest.raises(ValueError):
        Color32(256, 0, 0)
    with pytest.raises(ValueError):
        Color32(0, -1, 0)


def test_getitem_order_alpha_red_green_blue():
    c = Color32(10, 20, 30, 40)
    assert [c[0], c[1], c[2], c[3]] == [40, 10, 20, 30]
    assert c[4] == 40


@pytest.mark.parametrize("index", [-1, 5])
def test_getitem_out_of_range(index):
    with pytest.raises(IndexError):
        Color32()[index]


def test_random_within_bounds():
    for _ in range(50):
        c = Color32.random(10, 20)
        assert all(10 <= v <= 20 for v in (c.r, c.g, c.b))
        assert c.a == 255


def test_random_degenerate_range():
    assert Color32.random(7, 7) == Color32(7, 7, 7, 255)


def test_lerp_endpoints():
    c1 = Color32(10, 20, 30, 0)
    c2 = Color32(200, 100, 50, 0)
    assert Color32.lerp(c1, c2, 0.0) == Color32(10, 20, 30, 255)
    assert Color32.lerp(c1, c2, 1.0) == Color32(200, 100, 50, 255)


def test_lerp_stays_between():
    c1 = Color32(0, 255, 100)
    c2 = Color32(255, 0, 100)
    mid = Color32.lerp(c1, c2, 0.5)
    assert 0 <= mid.r <= 255 and 0 <= mid.g <= 255
    assert mid.b == 100


def test_light_and_dark_fixed_points():
    assert Colors.WHITE.light() == Colors.WHITE
    assert Colors.BLACK.dark() == Colors.BLACK


def test_light_of_black_and_dark_of_white():
    assert Colors.BLACK.light() == Color32(127, 127, 127)
    assert Colors.WHITE.dark() == Color32(127, 127, 127)


def test_colorf_round_trip_extremes():
    for c in (Colors.WHITE, Colors.BLACK, Colors.TRANSPARENT):
        assert Color32.from_colorf(Colorf.from_color32(c)) == c


def test_colorf_from_color32_scales():
    f = Colorf.from_color32(Colors.RED)
    assert (f.r, f.g, f.b, f.a) == (1.0, 0.0, 0.0, 1.0)


def test_colorf_from_packed_layout():
    f = Colorf.from_packed(0xFF00FF00)
    assert f.a == 1.0
    assert f.r == 0.0
    assert f.g == 1.0
    assert f.b == f.g


def test_hsv_zero_saturation_is_gray():
    c = Colorf.hsv_to_rgb(0.3, 0.0, 0.25)
    assert (c.r, c.g, c.b) == (0.25, 0.25, 0.25)


def test_hsv_zero_value_is_black():
    c = Colorf.hsv_to_rgb(0.3, 1.0, 0.0)
    assert (c.r, c.g, c.b, c.a) == (0.0, 0.0, 0.0, 1.0)


def test_hsv_pure_red_and_green():
    red = Colorf.hsv_to_rgb(0.0, 1.0, 1.0)
    assert (red.r, red.g, red.b) == pytest.approx((1.0, 0.0, 0.0))
    green = Colorf.hsv_to_rgb(2 / 6, 1.0, 1.0)
    assert (green.r, green.g, green.b) == pytest.approx((0.0, 1.0, 0.0))


def test_hsv_hdr_clamping():
    bright = Colorf.hsv_to_rgb(0.0, 0.5, 2.0, hdr=True)
    assert bright.r == 2.0
    clamped = Colorf.hsv_to_rgb(0.0, 0.5, 2.0, hdr=False)
    assert clamped.r == 1.0
    assert all(0.0 <= v <= 1.0 for v in (clamped.r, clamped.g, clamped.b))


def test_hsv_hue_out_of_range():
    with pytest.raises(ValueError):
        Colorf.hsv_to_rgb(1.5, 1.0, 1.0)


def test_hsv_slightly_negative_hue_accepted():
    c = Colorf.hsv_to_rgb(-0.1, 1.0, 1.0)
    assert c.r == 1.0