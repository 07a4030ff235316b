"""Reading scene description (.cub) files."""

from __future__ import annotations

import errno
import os
import re
from collections.abc import Iterable, Sequence
from os import PathLike

from .errors import CubError
from .model import Cardinal, Scene, Texture

REQUIRED_ELEMENTS = 6

_TEXTURE_PREFIXES: dict[str, Cardinal] = {
    "NO ": Cardinal.NO,
    "SO ": Cardinal.SO,
    "WE ": Cardinal.WE,
    "EA ": Cardinal.EA,
}
_COLOR_PREFIXES = ("F ", "C ")
_WHITESPACE = " \t\n\v\f\r"
_DIGITS = frozenset("0123456789")
_MAP_CHARS = frozenset("10NSEW\n ")
_ATOI = re.compile(r"[\t\n\v\f\r ]*(\d*)")


def has_cub_extension(path: str | PathLike[str]) -> bool:
    """Return True if the path ends in ".cub"."""
    return os.fspath(path).endswith(".cub")


def read_lines(path: str | PathLike[str]) -> list[str]:
    """Return the lines of a file, each keeping its trailing newline."""
    try:
        with open(path, encoding="latin-1", newline="\n") as handle:
            return handle.readlines()
    except OSError as exc:
        raise CubError("could not open file", exc.errno or 0) from exc


def skip_whitespace(text: str) -> str:
    """Drop leading spaces and control whitespace."""
    return text.lstrip(_WHITESPACE)


def is_texture_line(line: str) -> bool:
    """Return True for a texture path or colour definition line."""
    return line.startswith(tuple(_TEXTURE_PREFIXES)) or line.startswith(_COLOR_PREFIXES)


def is_map_line(line: str) -> bool:
    """Return True for the first line of the map: a non-element line with a 0 or 1."""
    if is_texture_line(line):
        return False
    return "0" in line or "1" in line


def has_invalid_char(line: str) -> bool:
    """Return True if a map line is blank or holds a character a map may not hold."""
    if line.startswith("\n"):
        return True
    return any(char not in _MAP_CHARS for char in line)


def _is_number(field: str) -> bool:
    if len(field) == 1 and field not in _DIGITS:
        return False
    return all(char in _DIGITS or char == "\n" for char in field)


def _atoi(field: str) -> int:
    match = _ATOI.match(field)
    digits = match.group(1) if match else ""
    return int(digits) if digits else 0


def parse_rgb(text: str) -> tuple[int, int, int]:
    """Parse "R,G,B" with each component a number from 0 to 255."""
    fields = [field for field in text.split(",") if field]
    if len(fields) != 3:
        raise CubError("missing RGB value", errno.EINVAL)
    values = []
    for field in fields:
        if len(field) > 3 or not _is_number(field):
            raise CubError(f"invalid RGB value: {field}", errno.EINVAL)
        value = _atoi(field)
        if not 0 <= value <= 255:
            raise CubError(f"invalid RGB value: {field}", errno.EINVAL)
        values.append(value)
    red, green, blue = values
    return red, green, blue


def max_width(rows: Sequence[str]) -> int:
    """Return the length of the longest row, 0 for no rows."""
    return max((len(row) for row in rows), default=0)


def square_map(rows: Sequence[str]) -> list[str]:
    """Pad every row with '0' to the width of the longest one."""
    width = max_width(rows)
    return [row.ljust(width, "0") for row in rows]


def _copy_map(lines: Iterable[str]) -> list[str]:
    rows = []
    for line in lines:
        if has_invalid_char(line):
            raise CubError(f"In map: forbidden char at {line.rstrip(chr(10))}")
        rows.append(line.replace(" ", "0").strip("\n"))
    return rows


def _check_complete(scene: Scene) -> None:
    if (
        scene.elements_found < REQUIRED_ELEMENTS
        or any(cardinal not in scene.textures for cardinal in Cardinal)
        or not scene.grid
    ):
        raise CubError("Error: missing element")


def parse_scene(lines: Iterable[str]) -> Scene:
    """Build a scene from the lines of a .cub file.

    Texture paths and colours come first in any order; the map starts at
    the first other line holding a 0 or 1 and runs to the end of the file.
    """
    lines = list(lines)
    scene = Scene()
    for index, line in enumerate(lines):
        if line.startswith("\n"):
            continue
        if scene.elements_found > REQUIRED_ELEMENTS:
            raise CubError("Error: extra texture")
        for prefix, cardinal in _TEXTURE_PREFIXES.items():
            if line.startswith(prefix):
                scene.elements_found += 1
                path = skip_whitespace(line[2:]).strip("\n")
                scene.textures[cardinal] = Texture(path)
        if line.startswith("F "):
            scene.floor = parse_rgb(skip_whitespace(line[1:]))
            scene.elements_found += 1
        if line.startswith("C "):
            scene.ceiling = parse_rgb(skip_whitespace(line[1:]))
            scene.elements_found += 1
        if is_map_line(line):
            scene.grid = _copy_map(lines[index:])
            break
    _check_complete(scene)
    return scene


def load_scene(path: str | PathLike[str] | None) -> Scene:
    """Read and parse a .cub scene file."""
    if path is None:
        raise CubError("expected file, got NULL pointer", errno.EINVAL)
    if not has_cub_extension(path):
        raise CubError("extension should be .cub", errno.EINVAL)
    return parse_scene(read_lines(path))