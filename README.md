# wireframe

An interactive viewer that draws a heightmap as a 3D wireframe.

A map is a plain text file whose name ends in `.fdf`. Each line is a row
of the grid, and each space-separated number is the height of one point:

```
0 0 0 0
0 5 5 0
0 5 5 0
0 0 0 0
```

The first line fixes the number of points per row; every other line must
have the same number. A height is read like C's `atoi`: leading blanks and
one sign are allowed, and reading stops at the first character that is not
a digit, so anything after the number (for instance `10,0xFF0000`) is
ignored.

Points are joined to their right and lower neighbours. Each point is
coloured by its height, from `0x6666FF` at the lowest to `0xFF00FF` at the
highest, and every segment is shaded from the colour of one end toward the
other.

## Installation

```
pip install .
```

## Usage

```
wireframe path/to/map.fdf
```

The map opens in a 1000 by 1000 window, in isometric view, scaled to fit.

### Controls

| Key                    | Action                            |
|------------------------|-----------------------------------|
| Arrow keys             | Move the view                     |
| Keypad `+` / `-`       | Zoom in / out                     |
| Mouse wheel            | Zoom in / out in larger steps     |
| `W` / `S`              | Rotate about the x axis           |
| `A` / `D`              | Rotate about the y axis           |
| `I`                    | Isometric projection, refitted    |
| `P`                    | Cabinet projection, refitted      |
| `Esc` or close window  | Quit                              |

Movement, zoom and rotation keep going while their key is held down.

### Errors

The command prints `Error: ...` and exits with status 1 when it is given
the wrong number of arguments, a name without the `.fdf` extension, a
directory, a file it cannot read, or a map whose rows differ in length.
An empty map file ends the command at once with status 0 and no message.

## Using it as a library

```python
from wireframe.app import build_scene, run
from wireframe.scene import Key

scene = build_scene("map.fdf", 1000, 1000)
scene.key_press(Key.CABINET)    # switch to cabinet view
scene.key_press(Key.ROTATE_D)   # hold a rotation
scene.step()                    # apply one tick of held motions
image = scene.render()          # a wireframe.raster.Image
pixels = image.to_bytes()       # rows top to bottom, B, G, R, A per pixel
run(scene)                      # open a window on it
```

- `wireframe.parsing` reads maps: `load_map` checks and parses a file into a
  `Heightmap`; `parse_map` works on any iterable of lines. Problems raise
  `MapError`, and an empty map raises its subclass `EmptyMapError`.
- `wireframe.geometry` holds `Point3D`, the rotations `rotate_x`,
  `rotate_y`, `rotate_z`, the projections `project_isometric` and
  `project_cabinet`, and `translate`, `scale`, `bounds`, `center_plan`.
- `wireframe.color` holds `gradient`, `shade` and `height_colors`.
- `wireframe.raster` draws into an in-memory `Image` with `draw_line`,
  `link_points`, `plot_points` and `draw_grid`.
- `wireframe.scene.Scene` keeps the view state and reacts to key codes
  through `key_press`, `key_release`, `mouse` and `step`.

## What it does not do

The viewer only displays. It does not save pictures to a file, and it does
not read colours from the map: every colour comes from the height.

## Running the tests

```
pip install .[test]
pytest
```