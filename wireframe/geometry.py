"""Points in 3D space and the transforms applied to a wireframe mesh."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Iterable, NamedTuple


@dataclass(frozen=True, slots=True)
class Point3D:
    """A vertex of the mesh with its colour as 0xRRGGBB."""

    x: float
    y: float
    z: float = 0.0
    color: int = 0


class Trigo(NamedTuple):
    """Sine and cosine of one angle."""

    sin: float
    cos: float


def fill_trigo(angle: float) -> Trigo:
    """Return the sine and cosine of ``angle`` (radians)."""
    return Trigo(math.sin(angle), math.cos(angle))


def sub(a: Point3D, b: Point3D) -> Point3D:
    """Screen offset of ``a`` from ``b``: x and y truncated toward zero, colour of ``a``."""
    return Point3D(
        float(int(a.x - b.x)),
        float(int(a.y - b.y)),
        0.0,
        a.color,
    )


def translate(points: Iterable[Point3D], offset: Point3D) -> list[Point3D]:
    """Shift every point by ``offset``."""
    return [
        replace(p, x=p.x + offset.x, y=p.y + offset.y, z=p.z + offset.z)
        for p in points
    ]


def rotate_x(points: Iterable[Point3D], angle: float) -> list[Point3D]:
    """Rotate the points about the x axis."""
    t = fill_trigo(angle)
    return [
        replace(p, y=p.y * t.cos + p.z * t.sin, z=-p.y * t.sin + p.z * t.cos)
        for p in points
    ]


def rotate_y(points: Iterable[Point3D], angle: float) -> list[Point3D]:
    """Rotate the points about the y axis."""
    t = fill_trigo(angle)
    return [
        replace(p, x=p.x * t.cos + p.z * t.sin, z=-p.x * t.sin + p.z * t.cos)
        for p in points
    ]


def rotate_z(points: Iterable[Point3D], angle: float) -> list[Point3D]:
    """Rotate the points about the z axis."""
    t = fill_trigo(angle)
    return [
        replace(p, x=p.x * t.cos - p.y * t.sin, y=p.x * t.sin + p.y * t.cos)
        for p in points
    ]


def project_isometric(points: Iterable[Point3D]) -> list[Point3D]:
    """Turn the points so that the three axes are foreshortened equally."""
    alpha = fill_trigo(-math.asin(math.tan(math.pi / 6.0)))
    beta = fill_trigo(-math.pi / 4.0)
    return [
        replace(
            p,
            x=p.x * beta.cos - p.z * beta.sin,
            y=p.x * alpha.sin * beta.sin + p.y * alpha.cos + p.z * alpha.sin * beta.cos,
            z=p.x * alpha.cos * beta.sin - p.y * alpha.sin + p.z * alpha.cos * beta.cos,
        )
        for p in points
    ]


def project_cabinet(points: Iterable[Point3D]) -> list[Point3D]:
    """Oblique cabinet projection: depth drawn at half length along -atan(2)."""
    angle = -math.atan(2.0)
    half_cos = 0.5 * math.cos(angle)
    half_sin = 0.5 * math.sin(angle)
    return [
        replace(p, x=p.x + half_cos * p.z, y=p.y + half_sin * p.z)
        for p in points
    ]


def _fit(extent: float, span: float) -> float:
    return extent / span if span != 0 else math.inf


def center_plan(
    points: Iterable[Point3D], width: float, height: float
) -> tuple[Point3D, float]:
    """Return the top-left corner of the points and the zoom that fits them in view.

    The corner holds the smallest x and y (z is 0). The zoom is the largest
    factor that keeps the points inside ``width`` by ``height``.
    """
    pts = list(points)
    if not pts:
        raise ValueError("no points to fit")
    min_x = min(p.x for p in pts)
    max_x = max(p.x for p in pts)
    min_y = min(p.y for p in pts)
    max_y = max(p.y for p in pts)
    zoom = min(_fit(width, max_x - min_x), _fit(height, max_y - min_y))
    return Point3D(min_x, min_y, 0.0), zoom


def scale(points: Iterable[Point3D], factor: float) -> list[Point3D]:
    """Multiply every coordinate by ``factor``."""
    return [
        replace(p, x=p.x * factor, y=p.y * factor, z=p.z * factor) for p in points
    ]


def bounds(points: Iterable[Point3D]) -> tuple[Point3D, Point3D]:
    """Return the per-axis minimum and maximum of the points."""
    pts = list(points)
    if not pts:
        raise ValueError("no points to bound")
    low = Point3D(min(p.x for p in pts), min(p.y for p in pts), min(p.z for p in pts))
    high = Point3D(max(p.x for p in pts), max(p.y for p in pts), max(p.z for p in pts))
    return low, high


def flatten_z(points: Iterable[Point3D]) -> list[Point3D]:
    """Fold height into x and y, leaving every point at z = 0."""
    return [replace(p, x=p.x - p.z, y=p.y - p.z, z=0.0) for p in points]