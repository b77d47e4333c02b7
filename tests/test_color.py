import pytest

from wireframe.color import (
    COLOR_HIGH,
    COLOR_LOW,
    Gradient,
    channels,
    gradient,
    height_colors,
    shade,
)
from wireframe.geometry import Point3D


def test_channels():
    assert channels(0xFF00FF) == (0xFF, 0x00, 0xFF)
    assert channels(0x6666FF) == (0x66, 0x66, 0xFF)


def test_gradient_same_color_is_flat():
    assert gradient(COLOR_LOW, COLOR_LOW, 0, 10) == Gradient(0.0, 0.0, 0.0)


@pytest.mark.parametrize("span", [1, 3])
def test_gradient_reaches_end_color(span):
    step = gradient(COLOR_LOW, COLOR_HIGH, 0, span)
    assert shade(COLOR_LOW, step, span, 0) == COLOR_HIGH


def test_shade_at_origin_is_base_color():
    step = gradient(COLOR_LOW, COLOR_HIGH, 5, 9)
    assert shade(COLOR_LOW, step, 5, 5) == COLOR_LOW


def test_shade_truncates_positions():
    step = gradient(COLOR_LOW, COLOR_HIGH, 0, 3)
    assert shade(COLOR_LOW, step, 2.9, 0.4) == shade(COLOR_LOW, step, 2, 0)


def test_degenerate_gradient_does_not_break_shade():
    step = gradient(COLOR_LOW, COLOR_HIGH, 4, 4)
    assert shade(COLOR_LOW, step, 4, 4) == COLOR_LOW


def test_height_colors_flat_map():
    points = [Point3D(0, 0, 2), Point3D(1, 0, 2), Point3D(0, 1, 2)]
    assert [p.color for p in height_colors(points)] == [COLOR_LOW] * 3


@pytest.mark.parametrize("top", [1.0, 3.0])
def test_height_colors_ends(top):
    points = [Point3D(0, 0, 0.0), Point3D(1, 0, top), Point3D(2, 0, 0.0)]
    result = height_colors(points)
    assert [p.color for p in result] == [COLOR_LOW, COLOR_HIGH, COLOR_LOW]


def test_height_colors_keeps_coordinates():
    points = [Point3D(0, 0, 0.0), Point3D(1, 2, 3.0), Point3D(4, 5, 1.0)]
    result = height_colors(points)
    assert [(p.x, p.y, p.z) for p in result] == [(p.x, p.y, p.z) for p in points]


def test_height_colors_custom_range():
    points = [Point3D(0, 0, 0.0), Point3D(1, 0, 1.0)]
    result = height_colors(points, low=COLOR_HIGH, high=COLOR_LOW)
    assert [p.color for p in result] == [COLOR_HIGH, COLOR_LOW]


def test_height_colors_empty():
    assert height_colors([]) == []