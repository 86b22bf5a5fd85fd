import pytest

from fractscope.image import Image, Point2f, Point2i


def test_points_hold_coordinates():
    p = Point2i(3, 4)
    f = Point2f(1.5, -2.5)
    assert (p.x, p.y) == (3, 4)
    assert (f.x, f.y) == (1.5, -2.5)


def test_new_image_is_black():
    img = Image(4, 3)
    assert len(img.pixels) == 12
    assert set(img.pixels) == {0}


def test_put_and_read_pixel_round_trip():
    img = Image(5, 5)
    img.put_pixel(2, 3, 0x123456)
    assert img.pixel(2, 3) == 0x123456
    assert img.pixel(3, 2) == 0


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (5, 0), (0, 5)])
def test_out_of_bounds_put_is_ignored(x, y):
    img = Image(5, 5)
    img.put_pixel(x, y, 0xFFFFFF)
    assert set(img.pixels) == {0}


def test_out_of_bounds_read_raises():
    img = Image(2, 2)
    with pytest.raises(IndexError):
        img.pixel(2, 0)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Image(-1, 4)


def test_clear_resets_pixels():
    img = Image(3, 3)
    img.put_pixel(1, 1, 0xABCDEF)
    img.clear()
    assert set(img.pixels) == {0}


def test_draw_rect_fills_exact_area():
    img = Image(10, 10)
    img.draw_rect(Point2i(2, 3), Point2i(4, 2), 0x303030)
    assert img.pixels.count(0x303030) == 4 * 2
    assert img.pixel(2, 3) == 0x303030
    assert img.pixel(5, 4) == 0x303030
    assert img.pixel(6, 4) == 0
    assert img.pixel(2, 5) == 0


def test_draw_rect_is_clipped():
    img = Image(4, 4)
    img.draw_rect(Point2i(-2, -2), Point2i(10, 10), 0x202020)
    assert set(img.pixels) == {0x202020}


def test_empty_rect_draws_nothing():
    img = Image(4, 4)
    img.draw_rect(Point2i(1, 1), Point2i(0, 3), 0x202020)
    assert set(img.pixels) == {0}