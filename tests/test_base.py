import pytest

from glframe.base import Color, Point, Region, ScreenInfo


@pytest.fixture
def window():
    return ScreenInfo(width=200, height=100, aspect_ratio=2.0)


def test_screen_info_defaults():
    info = ScreenInfo()
    assert (info.width, info.height, info.pixel_ratio, info.window) == (0, 0, 1.0, None)


@pytest.mark.parametrize("value", [0, 0xFFFFFFFF, 0x12345678, 0x80FF0001])
def test_color_int_round_trip(value):
    assert int(Color.from_int(value)) == value


def test_color_from_int_channels():
    c = Color.from_int(0x0A141E28)
    assert (c.r, c.g, c.b, c.a) == (0x0A, 0x14, 0x1E, 0x28)


def test_color_default_is_opaque_black():
    assert Color() == Color(0, 0, 0, 255)


@pytest.mark.parametrize("channels", [(256, 0, 0, 0), (0, -1, 0, 0), (0, 0, 0, 300)])
def test_color_rejects_out_of_range(channels):
    with pytest.raises(ValueError):
        Color(*channels)


def test_color_from_vec_three_components_is_opaque():
    assert Color.from_vec((1.0, 1.0, 1.0)) == Color(255, 255, 255, 255)


def test_color_from_vec_four_components():
    assert Color.from_vec((0.0, 0.0, 0.0, 0.0)) == Color(0, 0, 0, 0)


def test_color_from_vec_bad_length():
    with pytest.raises(ValueError):
        Color.from_vec((0.5, 0.5))


def test_color_vectors_are_consistent():
    c = Color(10, 20, 30, 40)
    vec4 = c.to_vec4()
    assert c.to_vec3() == vec4[:3]
    assert all(0.0 <= v <= 1.0 for v in vec4)
    assert vec4[0] * 255 == pytest.approx(c.r)


def test_region_ratio_scaling(window):
    r = Region(0.5, 0.5, 1.0, 1.0)
    assert r.right(window) == window.width
    assert r.left(window) == window.width / 2
    assert r.top(window) == window.height / 2
    assert r.bottom(window) == window.height
    assert r.width(window) == r.right(window) - r.left(window)


def test_region_absolute_ignores_window(window):
    r = Region(10, 20, 30, 40, screen_ratio=False)
    assert (r.left(window), r.top(window), r.right(window), r.bottom(window)) == (10, 20, 30, 40)


def test_default_region_is_not_square():
    r = Region()
    assert r.square is False
    assert r.yend == 0.0


def test_non_positive_bottom_makes_square(window):
    r = Region(0.1, 0.1, 0.3, -1)
    assert r.square is True
    assert r.yend == 0.0
    assert r.origin_height() == r.origin_width()
    assert r.origin_bottom() == pytest.approx(r.y + r.origin_width())
    assert r.bottom(window) == pytest.approx(r.top(window) + r.width(window))


def test_regular_region_origin_values():
    r = Region(0.1, 0.2, 0.5, 0.9)
    assert r.origin_bottom() == 0.9
    assert r.origin_height() == pytest.approx(0.9 - 0.2)
    assert r.origin_width() == pytest.approx(0.5 - 0.1)


def test_set_bottom_leaves_square_mode():
    r = Region(0.1, 0.1, 0.3, 0)
    assert r.square
    r.set_bottom(0.6)
    assert r.square is False
    assert r.origin_bottom() == 0.6


def test_set_bottom_non_positive_keeps_square():
    r = Region(0.1, 0.1, 0.3, 0)
    r.set_bottom(0)
    assert r.square is True


def test_set_square_clears_bottom():
    r = Region(0.1, 0.1, 0.3, 0.7)
    r.set_square(True)
    assert r.square is True
    assert r.yend == 0.0
    r.set_square(False)
    assert r.square is False


def test_point_scaling(window):
    p = Point(0.5, 0.25)
    assert p.x_on(window) == window.width / 2
    assert p.y_on(window) == window.height / 4


def test_point_absolute(window):
    p = Point(7, 9, screen_ratio=False)
    assert (p.x_on(window), p.y_on(window)) == (7, 9)
    assert p.to_ratio(window) == (7, 9)


def test_point_to_ratio_divides_in_ratio_mode(window):
    p = Point(window.width, window.height)
    assert p.to_ratio(window) == (1.0, 1.0)