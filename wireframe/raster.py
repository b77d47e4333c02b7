"""A plain pixel buffer and the routines that draw a wireframe into it."""

from __future__ import annotations

import struct
from itertools import pairwise
from typing import Iterable, Sequence

from wireframe.color import gradient, shade
from wireframe.geometry import Point3D, sub

POINT_COLOR = 0x0000FF
GRID_COLOR = 0xFFFFFF
GRID_SPACING = 50


class Image:
    """A ``width`` by ``height`` grid of 0xAARRGGBB pixels, all black at first."""

    __slots__ = ("width", "height", "_pixels")

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = [0] * (width * height)

    def __contains__(self, xy: tuple[int, int]) -> bool:
        x, y = xy
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> int:
        if (x, y) not in self:
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} image"
            )
        return y * self.width + x

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at column ``x``, row ``y``."""
        self._pixels[self._index(x, y)] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel at column ``x``, row ``y``."""
        return self._pixels[self._index(x, y)]

    def clear(self) -> None:
        """Set every pixel back to black."""
        self._pixels = [0] * (self.width * self.height)

    def to_bytes(self) -> bytes:
        """Rows top to bottom, four bytes per pixel in B, G, R, A order."""
        return struct.pack(f"<{len(self._pixels)}I", *self._pixels)


def _line_horizontal(image: Image, pt1: Point3D, pt2: Point3D) -> None:
    x = int(pt1.x) if pt1.x < pt2.x else int(pt2.x)
    end = int(abs(pt2.x - pt1.x) + x)
    step = gradient(pt1.color, pt2.color, pt1.x, pt2.x)
    if not 0 <= pt1.y < image.height:
        return
    row = int(pt1.y)
    for column in range(x, end):
        if 0 <= column < image.width:
            image.put_pixel(column, row, shade(pt1.color, step, column, pt1.x))


def _line_vertical(image: Image, pt1: Point3D, pt2: Point3D) -> None:
    y = int(pt1.y) if pt1.y < pt2.y else int(pt2.y)
    end = int(abs(pt2.y - pt1.y) + y)
    step = gradient(pt1.color, pt2.color, pt1.y, pt2.y)
    if not 0 <= pt1.x < image.width:
        return
    column = int(pt1.x)
    for row in range(y, end):
        if 0 <= row < image.height:
            image.put_pixel(column, row, shade(pt1.color, step, row, pt1.y))


def _line_shallow(image: Image, pt1: Point3D, pt2: Point3D) -> None:
    """Step along x, moving y by one whenever the error passes one half."""
    x, y = int(pt1.x), int(pt1.y)
    dx = int(pt2.x - pt1.x)
    dy = int(pt2.y - pt1.y)
    step = gradient(pt1.color, pt2.color, pt1.x, pt2.x)
    direction = -1 if dy < 0 else 1
    slope = abs(dy) / dx
    error = 0.0
    for column in range(x, dx + x + 1):
        if (column, y) in image:
            image.put_pixel(column, y, shade(pt1.color, step, column, pt1.x))
        error += slope
        if error >= 0.5:
            y += direction
            error -= 1.0


def _line_steep(image: Image, pt1: Point3D, pt2: Point3D) -> None:
    """Step along y, moving x by one whenever the error passes one half."""
    x, y = int(pt1.x), int(pt1.y)
    dx = int(pt2.x - pt1.x)
    dy = int(pt2.y - pt1.y)
    step = gradient(pt1.color, pt2.color, pt1.y, pt2.y)
    direction = -1 if dx < 0 else 1
    slope = abs(dx) / dy
    error = 0.0
    for row in range(y, dy + y + 1):
        if (x, row) in image:
            image.put_pixel(x, row, shade(pt1.color, step, row, pt1.y))
        error += slope
        if error >= 0.5:
            x += direction
            error -= 1.0


def draw_line(image: Image, start: Point3D, end: Point3D) -> None:
    """Draw a colour-graded line between two screen points, clipped to the image.

    Horizontal and vertical lines stop one pixel short of their far end;
    diagonal lines include both ends.
    """
    dx = int(abs(end.x - start.x))
    dy = int(abs(end.y - start.y))
    if dy == 0:
        _line_horizontal(image, start, end)
    elif dx == 0:
        _line_vertical(image, start, end)
    elif dy < dx:
        if start.x > end.x:
            _line_shallow(image, end, start)
        else:
            _line_shallow(image, start, end)
    elif start.y > end.y:
        _line_steep(image, end, start)
    else:
        _line_steep(image, start, end)


def link_points(
    image: Image, points: Sequence[Point3D], row_length: int, origin: Point3D
) -> None:
    """Join each point to its right and lower neighbour in a grid of rows.

    Every point is drawn at its offset from ``origin``.
    """
    if not points:
        return
    if row_length < 1 or len(points) % row_length:
        raise ValueError(
            f"{len(points)} points do not form rows of {row_length}"
        )
    rows = [
        [sub(p, origin) for p in points[start:start + row_length]]
        for start in range(0, len(points), row_length)
    ]
    for row in rows:
        for left, right in pairwise(row):
            draw_line(image, left, right)
    for upper, lower in pairwise(rows):
        for top, bottom in zip(upper, lower):
            draw_line(image, top, bottom)


def plot_points(image: Image, points: Iterable[Point3D]) -> None:
    """Mark every point that falls inside the image with a single pixel."""
    for p in points:
        x, y = int(p.x), int(p.y)
        if (x, y) in image:
            image.put_pixel(x, y, POINT_COLOR)


def draw_grid(image: Image, spacing: int = GRID_SPACING) -> None:
    """Draw white rows and columns every ``spacing`` pixels."""
    if spacing < 1:
        raise ValueError(f"grid spacing must be positive, got {spacing}")
    for y in range(0, image.height, spacing):
        for x in range(image.width):
            image.put_pixel(x, y, GRID_COLOR)
    for x in range(0, image.width, spacing):
        for y in range(image.height):
            image.put_pixel(x, y, GRID_COLOR)