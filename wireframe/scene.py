"""The interactive state of a wireframe view: projection, motion keys and rendering."""

from __future__ import annotations

import enum
import math
from collections.abc import Callable

from wireframe.color import height_colors
from wireframe.geometry import (
    Point3D,
    bounds,
    center_plan,
    project_cabinet,
    project_isometric,
    rotate_x,
    rotate_y,
    rotate_z,
    scale,
    translate,
)
from wireframe.parsing import Heightmap
from wireframe.raster import Image, link_points

WIDTH = 1000
HEIGHT = 1000

TRANSLATION = 0.45
ZOOM_IN_SCROLL = 1.01
ZOOM_OUT_SCROLL = 0.99
ZOOM_IN = 1.001
ZOOM_OUT = 0.999
ROTATION = 0.001

ISOMETRIC_TWIST = -(math.pi / 3.0)


class Key(enum.IntEnum):
    """Key and mouse-button codes the view reacts to (X11 keysyms)."""

    UP = 65362
    RIGHT = 65363
    DOWN = 65364
    LEFT = 65361
    ESCAPE = 65307
    ZOOM_IN = 65451
    ZOOM_OUT = 65453
    SCROLL_UP = 4
    SCROLL_DOWN = 5
    ROTATE_A = 97
    ROTATE_W = 119
    ROTATE_D = 100
    ROTATE_S = 115
    ISOMETRIC = 105
    CABINET = 112


class Motion(enum.Flag):
    """Continuous motions that stay active while their key is held."""

    NONE = 0
    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    ZOOM_IN = enum.auto()
    ZOOM_OUT = enum.auto()
    ROTATE_A = enum.auto()
    ROTATE_W = enum.auto()
    ROTATE_D = enum.auto()
    ROTATE_S = enum.auto()


_KEY_MOTION = {
    Key.UP: Motion.UP,
    Key.DOWN: Motion.DOWN,
    Key.LEFT: Motion.LEFT,
    Key.RIGHT: Motion.RIGHT,
    Key.ZOOM_IN: Motion.ZOOM_IN,
    Key.ZOOM_OUT: Motion.ZOOM_OUT,
    Key.ROTATE_A: Motion.ROTATE_A,
    Key.ROTATE_W: Motion.ROTATE_W,
    Key.ROTATE_D: Motion.ROTATE_D,
    Key.ROTATE_S: Motion.ROTATE_S,
}

_ROTATIONS: dict[str, Callable[[list[Point3D], float], list[Point3D]]] = {
    "x": rotate_x,
    "y": rotate_y,
    "z": rotate_z,
}


def _as_key(keycode: int) -> Key | None:
    try:
        return Key(keycode)
    except ValueError:
        return None


class Scene:
    """A height map placed in view, with the transforms the user applies to it.

    ``points`` hold the current screen-space mesh and ``origin`` the point
    of that space drawn at the top-left corner of the image.
    """

    def __init__(
        self, heightmap: Heightmap, width: int = WIDTH, height: int = HEIGHT
    ) -> None:
        self.heightmap = heightmap
        self.width = width
        self.height = height
        self.row_length = heightmap.row_length
        self.image = Image(width, height)
        self.motion = Motion.NONE
        self.closed = False
        self.dirty = False

        low, high = bounds(heightmap.points)
        shift = Point3D(
            -((high.x - low.x) / 2.0),
            -((high.y - low.y) / 2.0),
            -((high.z - low.z) / 2.0),
        )
        coloured = height_colors(heightmap.points)
        self.base: tuple[Point3D, ...] = tuple(translate(coloured, shift))
        self.points: list[Point3D] = list(self.base)
        self.origin = shift
        self.project_isometric()

    def _scale(self, factor: float) -> None:
        self.points = scale(self.points, factor)
        o = self.origin
        self.origin = Point3D(o.x * factor, o.y * factor, o.z * factor)

    def _fit(self) -> None:
        self.origin, factor = center_plan(self.points, self.width, self.height)
        # A mesh with no extent on either axis cannot be fitted; leave it unscaled.
        if math.isfinite(factor):
            self._scale(factor)

    def _rotate(self, angle: float, axis: str) -> None:
        try:
            rotation = _ROTATIONS[axis]
        except KeyError:
            raise ValueError(f"unknown rotation axis {axis!r}") from None
        self.points = rotation(self.points, angle)

    def _shift(self, dx: float, dy: float) -> None:
        o = self.origin
        self.origin = Point3D(o.x + dx, o.y + dy, o.z)

    def project_isometric(self) -> Image:
        """Show the map in isometric view, fitted to the image."""
        self.points = rotate_z(project_isometric(self.base), ISOMETRIC_TWIST)
        self._fit()
        return self.render()

    def project_cabinet(self) -> Image:
        """Show the map in cabinet view, fitted to the image."""
        self.points = project_cabinet(self.base)
        self._fit()
        return self.render()

    def translate(self, dx: float, dy: float) -> Image:
        """Move the view origin by ``dx``, ``dy`` and redraw."""
        self._shift(dx, dy)
        return self.render()

    def zoom(self, factor: float) -> Image:
        """Scale the mesh and the view origin by ``factor`` and redraw."""
        self._scale(factor)
        return self.render()

    def rotate(self, angle: float, axis: str) -> Image:
        """Rotate the mesh by ``angle`` radians about ``axis`` ('x', 'y' or 'z') and redraw."""
        self._rotate(angle, axis)
        return self.render()

    def render(self) -> Image:
        """Redraw the mesh into the image and return it."""
        self.image.clear()
        link_points(self.image, self.points, self.row_length, self.origin)
        self.dirty = True
        return self.image

    def key_press(self, keycode: int) -> None:
        """React to a key going down."""
        key = _as_key(keycode)
        if key is Key.ESCAPE:
            self.closed = True
            return
        if key is Key.ISOMETRIC:
            self.project_isometric()
        elif key is Key.CABINET:
            self.project_cabinet()
        elif key in _KEY_MOTION:
            self.motion |= _KEY_MOTION[key]

    def key_release(self, keycode: int) -> None:
        """Stop the motion held by the released key."""
        key = _as_key(keycode)
        if key in _KEY_MOTION:
            self.motion &= ~_KEY_MOTION[key]

    def mouse(self, button: int) -> None:
        """Zoom in or out on a scroll of the mouse wheel."""
        key = _as_key(button)
        if key is Key.SCROLL_UP:
            self.zoom(ZOOM_IN_SCROLL)
        elif key is Key.SCROLL_DOWN:
            self.zoom(ZOOM_OUT_SCROLL)

    def step(self) -> bool:
        """Apply one tick of every held motion; return whether anything moved."""
        actions: list[tuple[Motion, Callable[[], None]]] = [
            (Motion.UP, lambda: self._shift(0.0, TRANSLATION)),
            (Motion.DOWN, lambda: self._shift(0.0, -TRANSLATION)),
            (Motion.LEFT, lambda: self._shift(TRANSLATION, 0.0)),
            (Motion.RIGHT, lambda: self._shift(-TRANSLATION, 0.0)),
            (Motion.ZOOM_IN, lambda: self._scale(ZOOM_IN)),
            (Motion.ZOOM_OUT, lambda: self._scale(ZOOM_OUT)),
            (Motion.ROTATE_A, lambda: self._rotate(-ROTATION, "y")),
            (Motion.ROTATE_W, lambda: self._rotate(-ROTATION, "x")),
            (Motion.ROTATE_D, lambda: self._rotate(ROTATION, "y")),
            (Motion.ROTATE_S, lambda: self._rotate(ROTATION, "x")),
        ]
        moved = False
        for motion, action in actions:
            if motion in self.motion:
                action()
                moved = True
        if moved:
            self.render()
        return moved