"""Reading images in the XPM text format."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from solong.colors import text_to_rgb

TRANSPARENT = 0xFF000000
"""Pixel value given to the ``None`` colour."""

_INT = re.compile(r"[ \t\n\r\f\v]*([+-]?\d+)")
_WORD_SEPARATORS = re.compile(r"[ \t]+")


class XpmError(Exception):
    """Raised when XPM data cannot be read."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: rows of 32-bit pixel values, top row first."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y][x]


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _find_unquoted(text: str, find: str) -> int:
    in_quote = False
    for position, char in enumerate(text):
        if char == '"':
            in_quote = not in_quote
        if not in_quote and text.startswith(find, position):
            return position
    return -1


def _blank(text: str, start: int, stop: int) -> str:
    stop = min(stop, len(text))
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings with spaces.

    The text keeps its length, so positions in it do not move.
    """
    while (begin := _find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        text = _blank(text, begin, end + 2 if end != -1 else begin + 3)
    while (begin := _find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        text = _blank(text, begin, end + 1 if end != -1 else begin + 2)
    return text


def quoted_strings(text: str) -> Iterator[str]:
    """Yield, in order, the contents of each double-quoted string in ``text``."""
    position = 0
    while True:
        opening = text.find('"', position)
        if opening == -1:
            return
        closing = text.find('"', opening + 1)
        if closing == -1:
            return
        yield text[opening + 1 : closing]
        position = closing + 1


def _atoi(word: str) -> int:
    match = _INT.match(word)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _read_palette(lines: Iterator[str], count: int, cpp: int) -> dict[str, int]:
    palette: dict[str, int] = {}
    for _ in range(count):
        line = _next_line(lines, "colour definition")
        if len(line) < cpp:
            raise XpmError("colour definition too short")
        key = line[:cpp]
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"no colour given for {key!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"no colour given for {key!r}")
        suffix = words[index + 2] if index + 2 < len(words) else None
        color = text_to_rgb(words[index + 1], suffix)
        if cpp <= 2:
            # Short keys index a direct table: a later definition replaces an earlier one.
            palette[key] = color
        else:
            palette.setdefault(key, color)
    return palette


def _read_row(line: str, width: int, cpp: int, palette: dict[str, int]) -> tuple[int, ...]:
    if len(line) < width * cpp:
        raise XpmError("pixel row too short")
    row = []
    for start in range(0, width * cpp, cpp):
        color = palette.get(line[start : start + cpp], 0)
        if color == -1:
            color = TRANSPARENT
        row.append(color & 0xFFFFFFFF)
    return tuple(row)


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode an image from its XPM strings: header, colours, then pixel rows."""
    rows = iter(lines)
    words = split_words(_next_line(rows, "header"))
    if len(words) < 4:
        raise XpmError("header needs width, height, colour count and characters per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("header values must be positive numbers")
    palette = _read_palette(rows, ncolors, cpp)
    pixels = tuple(
        _read_row(_next_line(rows, "pixel row"), width, cpp, palette) for _ in range(height)
    )
    return XpmImage(width=width, height=height, pixels=pixels)


def parse_xpm_text(text: str) -> XpmImage:
    """Decode an image from the text of an XPM file."""
    return parse_xpm(quoted_strings(strip_comments(text)))


def load_xpm(path: str | Path) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise XpmError(f"cannot read {path}") from exc
    if not data:
        raise XpmError(f"{path} is empty")
    return parse_xpm_text(data.decode("latin-1"))