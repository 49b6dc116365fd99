"""Reading XPM pixmaps into in-memory images."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable

from .colors import text_to_rgb
from .pixels import Image, new_image
from .textscan import split_words, strip_comments

__all__ = [
    "XpmError",
    "TRANSPARENT",
    "parse_xpm",
    "xpm_to_image",
    "xpm_file_to_image",
    "extract_strings",
]

# Pixel value stored for the "None" (transparent) colour.
TRANSPARENT = 0xFF000000

_LEADING_INT = re.compile(r"[ \t\n\r\v\f]*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data is malformed or incomplete."""


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _next_line(lines, what: str) -> str:
    line = next(lines, None)
    if line is None:
        raise XpmError(f"XPM data ends before the {what}")
    return line


def _read_header(lines) -> tuple[int, int, int, int]:
    words = split_words(_next_line(lines, "values line"))
    if len(words) < 4:
        raise XpmError("values line needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if not (width and height and ncolors and cpp):
        raise XpmError("values line holds a zero or non-numeric value")
    if ncolors < 0 or cpp < 0:
        raise XpmError("colour count and chars per pixel must be positive")
    return width, height, ncolors, cpp


def _read_colors(lines, ncolors: int, cpp: int) -> dict[str, int]:
    # Short keys are stored in a direct table where a later definition
    # replaces an earlier one; longer keys are searched so the first wins.
    last_wins = cpp <= 2
    table: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(lines, "colour table")
        words = split_words(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour line without a 'c' entry: {line!r}") from None
        if index >= len(words):
            raise XpmError(f"colour line without a colour value: {line!r}")
        end = words[index + 1] if index + 1 < len(words) else None
        rgb = text_to_rgb(words[index], end)
        key = line[:cpp]
        if last_wins:
            table[key] = rgb
        else:
            table.setdefault(key, rgb)
    return table


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM: values, colours, then pixels.

    Pixels whose key is not in the colour table are black; "None" pixels get
    the TRANSPARENT value.
    """
    source = iter(lines)
    width, height, ncolors, cpp = _read_header(source)
    table = _read_colors(source, ncolors, cpp)
    try:
        image = new_image(width, height)
    except ValueError as exc:
        raise XpmError(str(exc)) from exc
    for y in range(height):
        line = _next_line(source, "pixel rows")
        for x in range(width):
            color = table.get(line[cpp * x:cpp * (x + 1)], 0)
            if color == -1:
                color = TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def xpm_to_image(xpm_data: Iterable[str]) -> Image:
    """Build an image from XPM data given as a sequence of strings."""
    return parse_xpm(xpm_data)


def extract_strings(text: str) -> list[str]:
    """Return the contents of the double-quoted strings in *text*, in order."""
    strings: list[str] = []
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            break
        stop = text.find('"', start + 1)
        if stop == -1:
            break
        strings.append(text[start + 1:stop])
        pos = stop + 1
    return strings


def xpm_file_to_image(path: str | os.PathLike[str]) -> Image:
    """Read an XPM file written as C source and build its image."""
    with open(path, encoding="latin-1") as handle:
        text = handle.read()
    return parse_xpm(extract_strings(strip_comments(text)))