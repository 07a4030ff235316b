"""Reading XPM images into pixel buffers."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike

from .colornames import lookup_color
from .image import Image

_TRANSPARENT = 0xFF000000
_WORD_SEPARATORS = re.compile(r"[ \t]+")
_ATOI = re.compile(r"\s*([+-]?\d+)")
_STRTOL16 = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]*)")
_QUOTED = re.compile(r'"([^"]*)"')


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def split_words(text: str) -> list[str]:
    """Split on spaces and tabs only, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _blank(text: str, opener: str, closer: str, keep_closer: bool) -> str:
    chars = list(text)
    in_quote = False
    i = 0
    while i < len(chars):
        if chars[i] == '"':
            in_quote = not in_quote
        elif not in_quote and "".join(chars[i:i + len(opener)]) == opener:
            end = text.find(closer, i + len(opener))
            stop = len(chars) if end == -1 else end + (len(closer) if keep_closer else 1)
            chars[i:stop] = " " * (stop - i)
            i = stop
            continue
        i += 1
    return "".join(chars)


def strip_comments(text: str) -> str:
    """Replace C comments outside double quotes with spaces.

    Block comments are removed first, then line comments together with
    their newline. The length of the text is preserved.
    """
    text = _blank(text, "/*", "*/", keep_closer=True)
    return _blank(text, "//", "\n", keep_closer=False)


def quoted_lines(text: str) -> list[str]:
    """Return the contents of successive double-quoted strings."""
    return _QUOTED.findall(text)


def _atoi(word: str) -> int:
    match = _ATOI.match(word)
    return int(match.group(1)) if match else 0


def _strtol16(text: str) -> int:
    match = _STRTOL16.match(text)
    if not match or not match.group(2):
        return 0
    value = int(match.group(2), 16)
    return -value if match.group(1) == "-" else value


def _text_rgb(name: str, end: str | None) -> int:
    if name.startswith("#"):
        return _strtol16(name[1:])
    if end is not None:
        name = f"{name} {end}"[:63]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM string contents: header, colours, pixel rows."""
    it = iter(lines)
    header = split_words(_next_line(it, "header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid header: {' '.join(header[:4])}")

    direct = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(it, "colour definition")
        key = line[:cpp]
        tokens = split_words(line[cpp:])
        try:
            index = tokens.index("c")
        except ValueError:
            raise XpmError(f"no colour key in {line!r}") from None
        if index + 1 >= len(tokens):
            raise XpmError(f"no colour after key in {line!r}")
        end = tokens[index + 2] if index + 2 < len(tokens) else None
        color = _text_rgb(tokens[index + 1], end)
        if direct:
            palette[key] = color
        else:
            palette.setdefault(key, color)

    image = Image(width, height)
    for y in range(height):
        row = _next_line(it, "pixel row")
        if len(row) < width * cpp:
            raise XpmError(f"pixel row {y} is too short")
        for x in range(width):
            color = palette.get(row[x * cpp:(x + 1) * cpp], 0)
            if color == -1:
                color = _TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def read_xpm_file(path: str | PathLike[str]) -> Image:
    """Read an XPM file from disk into an image."""
    with open(path, encoding="latin-1") as handle:
        text = handle.read()
    return parse_xpm(quoted_lines(strip_comments(text)))