"""Reading height maps: a grid of whitespace-separated heights, one row per line."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Iterable, Iterator

from wireframe.geometry import Point3D

MAP_EXTENSION = ".fdf"
READ_SIZE = 100
_BLANKS = frozenset(" \f\r\n\t\v")


class MapError(Exception):
    """A map file that cannot be read or does not describe a grid."""


class EmptyMapError(MapError):
    """A map file that holds no points at all."""


@dataclass(frozen=True)
class Heightmap:
    """Grid points in row order; each row holds ``row_length`` points.

    A point sits at x = column, y = row, z = the height read from the map.
    """

    points: tuple[Point3D, ...]
    row_length: int

    def __post_init__(self) -> None:
        if self.row_length < 1:
            raise ValueError(f"row length must be positive, got {self.row_length}")
        if len(self.points) % self.row_length:
            raise ValueError(
                f"{len(self.points)} points do not form rows of {self.row_length}"
            )

    @property
    def row_count(self) -> int:
        """Number of rows in the grid."""
        return len(self.points) // self.row_length

    def __len__(self) -> int:
        return len(self.points)


def split_words(text: str, separator: str = " ") -> list[str]:
    """Split ``text`` on ``separator``, dropping the empty pieces between repeats."""
    return [word for word in text.split(separator) if word]


def parse_int(text: str) -> int:
    """Read a leading integer the way C's atoi does.

    Leading blanks are skipped, one sign is allowed, and reading stops at the
    first non-digit. Text with no digits gives 0.
    """
    index = 0
    while index < len(text) and text[index] in _BLANKS:
        index += 1
    sign = 1
    if index < len(text) and text[index] in "+-":
        if text[index] == "-":
            sign = -1
        index += 1
    value = 0
    while index < len(text) and "0" <= text[index] <= "9":
        value = value * 10 + (ord(text[index]) - ord("0"))
        index += 1
    return sign * value


def has_fdf_extension(path: str | os.PathLike[str]) -> bool:
    """Whether the path name ends with the map extension."""
    return os.fspath(path).endswith(MAP_EXTENSION)


def check_map_file(path: str | os.PathLike[str]) -> None:
    """Reject paths that cannot hold a map before any parsing is tried.

    Raises :class:`MapError` for a wrong extension or a directory, and
    :class:`EmptyMapError` for an existing file with no content. A path that
    does not exist is left for the reader to report.
    """
    if not has_fdf_extension(path):
        raise MapError("Try to open a file with the wrong format")
    target = Path(path)
    if target.is_dir():
        raise MapError("Try to open a directory not a file")
    try:
        with target.open("rb") as handle:
            empty = handle.read(1) == b""
    except OSError:
        return
    if empty:
        raise EmptyMapError(f"{target} is empty")


def read_lines(stream: IO[str]) -> Iterator[str]:
    """Yield the lines of a text stream, each with its '\\n' kept.

    Only '\\n' ends a line; a final line without one is yielded as it is.
    """
    pending = ""
    while chunk := stream.read(READ_SIZE):
        pending += chunk
        lines = pending.split("\n")
        pending = lines.pop()
        for line in lines:
            yield line + "\n"
    if pending:
        yield pending


def parse_map(lines: Iterable[str]) -> Heightmap:
    """Build a height map from lines of space-separated heights.

    The first line fixes the row length; every other line must match it.
    """
    row_length = 0
    points: list[Point3D] = []
    for y, line in enumerate(lines):
        words = split_words(line, " ")
        if y == 0:
            row_length = len(words)
            if row_length == 0:
                raise EmptyMapError("the first row of the map holds no points")
        elif len(words) != row_length:
            raise MapError(
                f"row {y} has {len(words)} points, expected {row_length}"
            )
        points.extend(
            Point3D(float(x), float(y), float(parse_int(word)))
            for x, word in enumerate(words)
        )
    if not points:
        raise EmptyMapError("the map holds no points")
    return Heightmap(tuple(points), row_length)


def load_map(path: str | os.PathLike[str]) -> Heightmap:
    """Check, read and parse the map file at ``path``."""
    check_map_file(path)
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="\n") as handle:
            return parse_map(read_lines(handle))
    except OSError as exc:
        raise MapError(f"{os.fspath(path)}: {exc.strerror or exc}") from exc