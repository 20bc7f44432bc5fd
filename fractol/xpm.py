"""Reading XPM pixmaps, from a list of rows or from C-style XPM source text."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from .colors import lookup_color
from .image import Image

__all__ = [
    "XpmError",
    "split_words",
    "strip_comments",
    "parse_xpm_lines",
    "parse_xpm_text",
    "parse_xpm_file",
]

_TRANSPARENT = 0xFF000000
_WORD_SEPARATORS = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_BLOCK_COMMENT_SCAN = re.compile(r'"[^"]*"?|/\*')
_LINE_COMMENT_SCAN = re.compile(r'"[^"]*"?|//')
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data is malformed or incomplete."""


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    text = text.split("\0", 1)[0]
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _find_unquoted(scanner: re.Pattern[str], text: str) -> int:
    for match in scanner.finditer(text):
        if not match.group().startswith('"'):
            return match.start()
    return -1


def _blank(text: str, start: int, length: int) -> str:
    end = min(len(text), start + length)
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace ``/* */`` and ``//`` comments outside quotes with spaces.

    The result has the same length as ``text``. An unterminated block
    comment blanks only its opening; a line comment also blanks its newline.
    """
    while (begin := _find_unquoted(_BLOCK_COMMENT_SCAN, text)) != -1:
        close = text.find("*/", begin + 2)
        text = _blank(text, begin, 3 if close == -1 else close - begin + 2)
    while (begin := _find_unquoted(_LINE_COMMENT_SCAN, text)) != -1:
        newline = text.find("\n", begin + 2)
        text = _blank(text, begin, 2 if newline == -1 else newline - begin + 1)
    return text


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _color_key(chars: str) -> int:
    key = 0
    for char in chars:
        code = ord(char)
        if 128 <= code < 256:
            code -= 256
        key = ((key << 8) + code) & 0xFFFFFFFF
    return key


def _next_line(rows: Iterator[str], what: str) -> str:
    try:
        return next(rows)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"XPM header needs four values, got {line!r}")
    width, height, ncolors, chars_per_pixel = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, chars_per_pixel) <= 0:
        raise XpmError(f"XPM header values must be positive, got {line!r}")
    return width, height, ncolors, chars_per_pixel


def _read_color(line: str, chars_per_pixel: int) -> tuple[int, int]:
    if len(line) < chars_per_pixel:
        raise XpmError(f"colour line too short: {line!r}")
    words = split_words(line[chars_per_pixel:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line has no 'c' entry: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour line has no colour after 'c': {line!r}")
    suffix = words[index + 1] if index + 1 < len(words) else None
    return _color_key(line[:chars_per_pixel]), lookup_color(words[index], suffix)


def parse_xpm_lines(lines: Iterable[str]) -> Image:
    """Build a 32-bit image from XPM rows: header, colours, then pixels.

    Pixels whose colour is ``None`` get the value 0xFF000000; pixels with an
    undefined colour key are black.
    """
    rows = iter(lines)
    width, height, ncolors, chars_per_pixel = _read_header(_next_line(rows, "header"))

    # One- and two-character keys let later definitions win; longer keys keep the first.
    later_wins = chars_per_pixel <= 2
    table: dict[int, int] = {}
    for _ in range(ncolors):
        key, color = _read_color(_next_line(rows, "colour table"), chars_per_pixel)
        if later_wins:
            table[key] = color
        else:
            table.setdefault(key, color)

    image = Image(width, height)
    for y in range(height):
        row = _next_line(rows, "pixel rows")
        if len(row) < width * chars_per_pixel:
            raise XpmError(f"pixel row {y} is shorter than {width} pixels")
        for x in range(width):
            chars = row[x * chars_per_pixel : (x + 1) * chars_per_pixel]
            color = table.get(_color_key(chars), 0)
            image.put_pixel(x, y, _TRANSPARENT if color == -1 else color)
    return image


def parse_xpm_text(text: str) -> Image:
    """Parse XPM source text, taking the quoted strings in order as rows."""
    return parse_xpm_lines(_QUOTED.findall(strip_comments(text)))


def parse_xpm_file(path: str | os.PathLike[str]) -> Image:
    """Read and parse an XPM file."""
    return parse_xpm_text(Path(path).read_bytes().decode("latin-1"))