"""Scene description values: resolution, colours, texture paths and the map grid."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

MAP_CHARS = frozenset(" 012NSEW\n\t")
BLANK_CHARS = frozenset("\t \n\r\v\f")
START_CHARS = frozenset("NSEW")

_SEPARATORS = frozenset(" \t,\n\r\v\f")
_RESOLUTION_CAP = 21474636
_DIGITS = re.compile(r"[0-9]+")
_AFTER_FIRST_COMMA = re.compile(r" *[0-9]*([^0-9]*)")


class CubError(Exception):
    """Raised when a scene description is invalid."""


@dataclass
class SceneConfig:
    """Everything a scene file describes."""

    width: int = 0
    height: int = 0
    floor: int | None = None
    ceiling: int | None = None
    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    sprite: str | None = None
    grid: list[str] = field(default_factory=list)
    start_row: int = 0
    start_col: int = 0
    direction: str | None = None


def is_map_line(line):
    """Return True if the line holds a wall or floor cell and only map characters."""
    if "1" not in line and "0" not in line:
        return False
    return all(char in MAP_CHARS for char in line)


def is_blank_line(line):
    """Return True if the line holds nothing but whitespace."""
    return all(char in BLANK_CHARS for char in line)


def _scan_resolution_value(line, pos):
    while pos < len(line) and line[pos] in _SEPARATORS:
        pos += 1
    if pos < len(line) and line[pos] in "+-":
        raise CubError("signed value in resolution")
    total = 0
    while pos < len(line) and line[pos].isdigit():
        if total > _RESOLUTION_CAP:
            break
        total = total * 10 + int(line[pos])
        pos += 1
    while pos < len(line) and line[pos].isdigit():
        pos += 1
    return total, pos


def parse_resolution(line):
    """Parse an ``R <width> <height>`` line into a (width, height) pair."""
    if len(line) < 2 or line[1] != " " or "," in line:
        raise CubError("malformed resolution line")
    pos = 1
    values = []
    for _ in range(3):
        value, pos = _scan_resolution_value(line, pos)
        values.append(value)
    width, height, extra = values
    if extra > 0 or width == 0 or height == 0:
        raise CubError("invalid resolution")
    return width, height


def _commas_well_placed(line):
    first = line.find(",")
    if first < 0:
        return False
    gap = _AFTER_FIRST_COMMA.match(line, first + 1).group(1)
    return gap.count(",") == 1


def parse_color(line):
    """Parse an ``F r,g,b`` or ``C r,g,b`` line into a packed 0xRRGGBB value."""
    if len(line) < 2 or line[1] != " ":
        raise CubError("malformed colour line")
    if line.count(",") != 2 or not _commas_well_placed(line):
        raise CubError("colour needs three comma separated components")
    components = []
    pos = 1
    while pos < len(line) and line[pos] in _SEPARATORS:
        pos += 1
        match = _DIGITS.match(line, pos)
        if match:
            components.append(int(match.group()))
            pos = match.end()
    if len(components) != 3:
        raise CubError("colour needs three components")
    if any(component > 255 for component in components):
        raise CubError("colour component out of range")
    red, green, blue = components
    return (red << 16) | (green << 8) | blue


def parse_texture_path(line, start):
    """Return the texture path of a texture line, its identifier ending at ``start``."""
    dot = line.find(".")
    if dot < 0 or "/" not in line or len(line) - dot <= 2:
        raise CubError("invalid texture path")
    if dot < start or line[start:dot].strip(" "):
        raise CubError("unexpected characters before texture path")
    return line[dot:]


def check_walls(grid):
    """Return True if the padded grid is closed by walls on all four sides."""
    if not grid:
        return False
    if not all(row and row[0] == "1" and row[-1] == "1" for row in grid):
        return False
    return all(char == "1" for char in grid[0]) and all(
        char == "1" for char in grid[-1]
    )