"""Reading XPM images into rows of packed 0xRRGGBB pixels."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .colors import NONE_COLOR, color_from_spec

_BLOCK_COMMENTS = re.compile(r'"[^"]*"?|/\*(?:.*?\*/|.?)', re.DOTALL)
_LINE_COMMENTS = re.compile(r'"[^"]*"?|//(?:[^\n]*\n)?')
_QUOTED = re.compile(r'"([^"]*)"')
_WORD_GAP = re.compile(r"[ \t]+")
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_DIRECT_LOOKUP_MAX_CPP = 2
_HEADER_FIELDS = 4


class XpmError(Exception):
    """Raised when an XPM image cannot be read."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM image; transparent pixels are None."""

    width: int
    height: int
    rows: tuple[tuple[int | None, ...], ...]

    def pixel(self, x, y):
        """Return the 0xRRGGBB colour at column ``x`` and row ``y``, or None if transparent."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.rows[y][x]


def _blank_matches(pattern, text):
    def replace(match):
        found = match.group()
        return found if found.startswith('"') else " " * len(found)

    return pattern.sub(replace, text)


def strip_comments(text):
    """Replace C comments outside quoted strings with spaces, keeping the text length."""
    return _blank_matches(_LINE_COMMENTS, _blank_matches(_BLOCK_COMMENTS, text))


def split_words(text):
    """Split on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_GAP.split(text) if word]


def quoted_lines(text):
    """Return the contents of every complete double-quoted string, in order."""
    return _QUOTED.findall(text)


def _atoi(word):
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _next_line(lines, what):
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _read_palette(lines, count, cpp):
    palette = {}
    for _ in range(count):
        line = _next_line(lines, "colour definition")
        if len(line) < cpp:
            raise XpmError(f"colour definition {line!r} shorter than its key")
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"colour definition {line!r} has no 'c' entry") from None
        if index + 1 >= len(words):
            raise XpmError(f"colour definition {line!r} has no colour after 'c'")
        suffix = words[index + 2] if index + 2 < len(words) else None
        value = color_from_spec(words[index + 1], suffix)
        key = line[:cpp]
        if cpp <= _DIRECT_LOOKUP_MAX_CPP:
            palette[key] = value
        else:
            palette.setdefault(key, value)
    return palette


def _decode_row(line, width, cpp, palette):
    def decode(x):
        value = palette.get(line[cpp * x:cpp * (x + 1)], 0)
        return None if value == NONE_COLOR else value

    return tuple(decode(x) for x in range(width))


def parse_xpm(lines):
    """Decode an XPM image from its quoted strings: header, colours, then pixel rows."""
    lines = iter(lines)
    words = split_words(_next_line(lines, "header"))
    if len(words) < _HEADER_FIELDS:
        raise XpmError("header needs width, height, colour count and characters per pixel")
    width, height, count, cpp = (_atoi(word) for word in words[:_HEADER_FIELDS])
    if min(width, height, count, cpp) <= 0:
        raise XpmError("header values must be positive")
    palette = _read_palette(lines, count, cpp)
    rows = tuple(
        _decode_row(_next_line(lines, "pixel row"), width, cpp, palette)
        for _ in range(height)
    )
    return XpmImage(width=width, height=height, rows=rows)


def read_xpm(path):
    """Read and decode the XPM file at ``path``."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)))