import pytest

from wireframe.geometry import Point3D
from wireframe.raster import (
    GRID_COLOR,
    POINT_COLOR,
    Image,
    draw_grid,
    draw_line,
    link_points,
    plot_points,
)

WHITE = 0xFFFFFF


def lit(image):
    return {
        (x, y)
        for y in range(image.height)
        for x in range(image.width)
        if image.get_pixel(x, y)
    }


def test_put_and_get_pixel_round_trip():
    image = Image(4, 3)
    image.put_pixel(2, 1, 0x123456)
    assert image.get_pixel(2, 1) == 0x123456
    assert image.get_pixel(1, 2) == 0


def test_pixel_outside_image_raises():
    image = Image(4, 3)
    with pytest.raises(IndexError):
        image.put_pixel(4, 0, WHITE)
    with pytest.raises(IndexError):
        image.get_pixel(0, -1)


def test_non_positive_size_rejected():
    with pytest.raises(ValueError):
        Image(0, 5)


def test_clear_blanks_every_pixel():
    image = Image(3, 3)
    image.put_pixel(0, 0, WHITE)
    image.put_pixel(2, 2, WHITE)
    image.clear()
    assert lit(image) == set()


def test_to_bytes_layout():
    image = Image(2, 2)
    image.put_pixel(0, 0, 0x112233)
    image.put_pixel(1, 1, 0x445566)
    data = image.to_bytes()
    assert len(data) == 2 * 2 * 4
    assert data[:4] == b"\x33\x22\x11\x00"
    assert data[12:16] == b"\x66\x55\x44\x00"


def test_horizontal_line_excludes_far_end():
    image = Image(10, 10)
    draw_line(image, Point3D(0, 2, 0, WHITE), Point3D(5, 2, 0, WHITE))
    assert lit(image) == {(x, 2) for x in range(5)}


def test_horizontal_line_reversed_covers_same_columns():
    forward = Image(10, 10)
    backward = Image(10, 10)
    draw_line(forward, Point3D(1, 4, 0, WHITE), Point3D(6, 4, 0, WHITE))
    draw_line(backward, Point3D(6, 4, 0, WHITE), Point3D(1, 4, 0, WHITE))
    assert lit(forward) == lit(backward)


def test_vertical_line_excludes_far_end():
    image = Image(10, 10)
    draw_line(image, Point3D(3, 1, 0, WHITE), Point3D(3, 7, 0, WHITE))
    assert lit(image) == {(3, y) for y in range(1, 7)}


def test_steep_diagonal_includes_both_ends():
    image = Image(10, 10)
    draw_line(image, Point3D(0, 0, 0, WHITE), Point3D(4, 4, 0, WHITE))
    assert lit(image) == {(i, i) for i in range(5)}


def test_diagonal_is_symmetric_in_endpoints():
    forward = Image(20, 20)
    backward = Image(20, 20)
    a = Point3D(2, 15, 0, WHITE)
    b = Point3D(9, 3, 0, WHITE)
    draw_line(forward, a, b)
    draw_line(backward, b, a)
    assert lit(forward) == lit(backward)


def test_shallow_line_has_one_pixel_per_column():
    image = Image(20, 20)
    draw_line(image, Point3D(0, 0, 0, WHITE), Point3D(10, 3, 0, WHITE))
    pixels = sorted(lit(image))
    assert [x for x, _ in pixels] == list(range(11))
    ys = [y for _, y in pixels]
    assert ys == sorted(ys)
    assert ys[0] == 0 and ys[-1] == 3


def test_steep_line_has_one_pixel_per_row():
    image = Image(20, 20)
    draw_line(image, Point3D(5, 0, 0, WHITE), Point3D(2, 9, 0, WHITE))
    pixels = sorted(lit(image), key=lambda p: p[1])
    assert [y for _, y in pixels] == list(range(10))
    assert pixels[0] == (5, 0)
    assert pixels[-1] == (2, 9)


def test_line_is_clipped_to_image():
    image = Image(5, 5)
    draw_line(image, Point3D(-10, 2, 0, WHITE), Point3D(20, 2, 0, WHITE))
    draw_line(image, Point3D(-3, -3, 0, WHITE), Point3D(12, 12, 0, WHITE))
    assert {(x, 2) for x in range(5)} <= lit(image)
    assert all((x, y) in image for x, y in lit(image))


def test_line_starts_with_its_start_colour():
    image = Image(10, 10)
    draw_line(image, Point3D(0, 0, 0, 0x102030), Point3D(8, 0, 0, 0xFFFFFF))
    assert image.get_pixel(0, 0) == 0x102030


def test_line_of_one_colour_keeps_it():
    image = Image(10, 10)
    draw_line(image, Point3D(0, 0, 0, 0x6666FF), Point3D(6, 3, 0, 0x6666FF))
    assert {image.get_pixel(x, y) for x, y in lit(image)} == {0x6666FF}


def _square(size, color=WHITE):
    return [
        Point3D(0, 0, 0, color),
        Point3D(size, 0, 0, color),
        Point3D(0, size, 0, color),
        Point3D(size, size, 0, color),
    ]


def test_link_points_joins_grid_neighbours():
    image = Image(10, 10)
    link_points(image, _square(3), 2, Point3D(0, 0))
    expected = (
        {(x, 0) for x in range(3)}
        | {(x, 3) for x in range(3)}
        | {(0, y) for y in range(3)}
        | {(3, y) for y in range(3)}
    )
    assert lit(image) == expected


def test_link_points_draws_relative_to_origin():
    plain = Image(10, 10)
    shifted = Image(10, 10)
    link_points(plain, _square(3), 2, Point3D(0, 0))
    link_points(shifted, _square(3), 2, Point3D(-2, -1))
    assert lit(shifted) == {(x + 2, y + 1) for x, y in lit(plain)}


def test_link_points_rejects_ragged_rows():
    image = Image(10, 10)
    with pytest.raises(ValueError):
        link_points(image, _square(3)[:3], 2, Point3D(0, 0))


def test_link_points_with_no_points_draws_nothing():
    image = Image(5, 5)
    link_points(image, [], 3, Point3D(0, 0))
    assert lit(image) == set()


def test_plot_points_marks_inside_points_only():
    image = Image(5, 5)
    plot_points(image, [Point3D(1, 2), Point3D(4, 4), Point3D(7, 1), Point3D(-1, 0)])
    assert lit(image) == {(1, 2), (4, 4)}
    assert image.get_pixel(1, 2) == POINT_COLOR


def test_draw_grid_lines_at_spacing():
    image = Image(11, 11)
    draw_grid(image, 5)
    assert image.get_pixel(3, 0) == GRID_COLOR
    assert image.get_pixel(5, 3) == GRID_COLOR
    assert image.get_pixel(3, 10) == GRID_COLOR
    assert image.get_pixel(3, 3) == 0
    rows = {y for y in range(11) if all(image.get_pixel(x, y) for x in range(11))}
    assert rows == {0, 5, 10}


def test_draw_grid_rejects_zero_spacing():
    with pytest.raises(ValueError):
        draw_grid(Image(5, 5), 0)