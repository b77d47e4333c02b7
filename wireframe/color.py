"""Colour gradients along lines and by height."""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Iterable, NamedTuple

from wireframe.geometry import Point3D, bounds

COLOR_HIGH = 0xFF00FF
COLOR_LOW = 0x6666FF


class Gradient(NamedTuple):
    """Change of each colour channel per unit step."""

    red: float
    green: float
    blue: float


def channels(color: int) -> tuple[int, int, int]:
    """Split 0xRRGGBB into its red, green and blue bytes."""
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def _divide(numerator: float, denominator: float) -> float:
    if denominator != 0:
        return numerator / denominator
    if numerator == 0:
        return math.nan
    return math.copysign(math.inf, numerator)


def gradient(color1: int, color2: int, start: float, end: float) -> Gradient:
    """Per-channel step that moves ``color1`` to ``color2`` between ``start`` and ``end``."""
    if color1 == color2:
        return Gradient(0.0, 0.0, 0.0)
    span = end - start
    r1, g1, b1 = channels(color1)
    r2, g2, b2 = channels(color2)
    return Gradient(
        _divide(r2 - r1, span),
        _divide(g2 - g1, span),
        _divide(b2 - b1, span),
    )


def _offset(step: float, distance: int) -> int:
    value = step * distance
    if not math.isfinite(value):
        return 0
    return int(value) & 0xFF


def shade(color: int, step: Gradient, position: float, origin: float) -> int:
    """Colour at ``position`` of a gradient that starts as ``color`` at ``origin``.

    Positions are truncated to integers; channels wrap around at 256.
    """
    distance = int(position) - int(origin)
    red, green, blue = channels(color)
    red = (red + _offset(step.red, distance)) & 0xFF
    green = (green + _offset(step.green, distance)) & 0xFF
    blue = (blue + _offset(step.blue, distance)) & 0xFF
    return (red << 16) | (green << 8) | blue


def height_colors(
    points: Iterable[Point3D], low: int = COLOR_LOW, high: int = COLOR_HIGH
) -> list[Point3D]:
    """Colour each point by its height, from ``low`` at the bottom to ``high`` at the top."""
    pts = list(points)
    if not pts:
        return []
    lowest, highest = bounds(pts)
    if highest.z - lowest.z == 0:
        return [replace(p, color=low) for p in pts]
    step = gradient(low, high, lowest.z, highest.z)
    return [replace(p, color=shade(low, step, p.z, lowest.z)) for p in pts]