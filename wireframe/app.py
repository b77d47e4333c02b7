"""The command that opens a window on a height map."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from wireframe.parsing import EmptyMapError, MapError, load_map
from wireframe.raster import Image
from wireframe.scene import HEIGHT, WIDTH, Key, Scene

TITLE = "FdF"


def build_scene(path: str | os.PathLike[str], width: int = WIDTH, height: int = HEIGHT) -> Scene:
    """Load the map at ``path`` and place it in a view of the given size."""
    return Scene(load_map(path), width, height)


def _rgb_bytes(image: Image) -> bytes:
    data = image.to_bytes()
    out = bytearray(len(data) // 4 * 3)
    out[0::3] = data[2::4]
    out[1::3] = data[1::4]
    out[2::3] = data[0::4]
    return bytes(out)


def run(scene: Scene) -> None:
    """Show ``scene`` in a window and feed it input until it is closed."""
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    keysyms = {
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_KP_PLUS: Key.ZOOM_IN,
        pygame.K_KP_MINUS: Key.ZOOM_OUT,
        pygame.K_a: Key.ROTATE_A,
        pygame.K_w: Key.ROTATE_W,
        pygame.K_d: Key.ROTATE_D,
        pygame.K_s: Key.ROTATE_S,
        pygame.K_i: Key.ISOMETRIC,
        pygame.K_p: Key.CABINET,
    }
    size = (scene.width, scene.height)
    pygame.init()
    try:
        window = pygame.display.set_mode(size)
        pygame.display.set_caption(TITLE)
        pygame.key.set_repeat()
        scene.dirty = True
        while not scene.closed:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    scene.closed = True
                elif event.type == pygame.KEYDOWN and event.key in keysyms:
                    scene.key_press(keysyms[event.key])
                elif event.type == pygame.KEYUP and event.key in keysyms:
                    scene.key_release(keysyms[event.key])
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    scene.mouse(event.button)
            if scene.closed:
                break
            scene.step()
            if scene.dirty:
                frame = pygame.image.frombuffer(_rgb_bytes(scene.image), size, "RGB")
                window.blit(frame, (0, 0))
                pygame.display.flip()
                scene.dirty = False
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the map named on the command line; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Error: Incorrect number of arguments", file=sys.stderr)
        return 1
    try:
        scene = build_scene(args[0])
    except EmptyMapError:
        return 0
    except MapError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    try:
        run(scene)
    except Exception as exc:  # display failures end the program like any other error
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())