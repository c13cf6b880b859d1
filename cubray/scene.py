"""Reading a ``.cub`` scene description into a :class:`SceneConfig`."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from .config import (
    START_CHARS,
    CubError,
    SceneConfig,
    check_walls,
    is_blank_line,
    is_map_line,
    parse_color,
    parse_resolution,
    parse_texture_path,
)

_TEXTURE_PREFIXES = (
    ("SO", "south"),
    ("NO", "north"),
    ("EA", "east"),
    ("WE", "west"),
)
_TEXTURE_FIELDS = ("north", "south", "west", "east", "sprite")
_KNOWN_HEADS = frozenset("NSWERFC")
_COLOR_LINES = 2


@dataclass
class _MapScan:
    rows: list[str] = field(default_factory=list)
    start: tuple[int, int, str] | None = None
    several_players: bool = False
    blank_gap: bool = False
    stray_chars: bool = False


def read_lines(path):
    """Return the lines of a scene file, split on newlines only."""
    if os.path.isdir(path):
        raise CubError(f"{path} is a directory")
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise CubError(f"cannot open scene file {path}: {exc}") from exc
    return text.split("\n")


def _texture_field(line):
    for prefix, name in _TEXTURE_PREFIXES:
        if line.startswith(prefix):
            return name, len(prefix)
    if line.startswith("S"):
        return "sprite", 1
    return None


def _missing_textures(config):
    return [name for name in _TEXTURE_FIELDS if getattr(config, name) is None]


def _read_identifier(line, config):
    """Apply one header line to the config; return True for a colour line."""
    any_texture = len(_missing_textures(config)) < len(_TEXTURE_FIELDS)
    if any_texture and not (config.width and config.height):
        raise CubError("resolution must come before textures")
    head = line[:1]
    is_color = False
    if head == "R":
        if config.width and config.height:
            raise CubError("resolution given twice")
        config.width, config.height = parse_resolution(line)
    elif head == "F":
        config.floor = parse_color(line)
        is_color = True
    elif head == "C":
        config.ceiling = parse_color(line)
        is_color = True
    slot = _texture_field(line)
    if slot is not None:
        name, start = slot
        if getattr(config, name) is not None:
            raise CubError(f"{name} texture given twice")
        setattr(config, name, parse_texture_path(line, start))
    elif head and head not in _KNOWN_HEADS and 65 < ord(head) < 122:
        raise CubError(f"unknown identifier {head!r}")
    return is_color


def _scan_map(lines, width, expected_rows):
    scan = _MapScan()
    inside = False
    for line in lines:
        if inside and is_blank_line(line) and len(scan.rows) < expected_rows:
            scan.blank_gap = True
        was_inside = inside
        inside = is_map_line(line)
        if not inside:
            if was_inside and ("0" in line or "1" in line):
                scan.stray_chars = True
            continue
        row_index = len(scan.rows)
        cells = []
        for col, char in enumerate(line):
            if char in START_CHARS:
                if scan.start is not None:
                    scan.several_players = True
                scan.start = (row_index, col, char)
                cells.append("0")
            elif char == " ":
                cells.append("1")
            else:
                cells.append(char)
        scan.rows.append("".join(cells).ljust(width, "1"))
    return scan


def parse_scene(lines):
    """Build a validated SceneConfig from the lines of a scene description."""
    lines = list(lines)
    config = SceneConfig()
    color_lines = 0
    map_width = 0
    map_rows = 0
    for line in lines:
        if _read_identifier(line, config):
            color_lines += 1
        if is_map_line(line):
            if (
                config.floor is None
                or config.ceiling is None
                or _missing_textures(config)
            ):
                raise CubError("map must come after all identifiers")
            map_width = max(map_width, len(line))
            map_rows += 1
    if not map_rows or not map_width:
        raise CubError("map is missing")

    scan = _scan_map(lines, map_width, map_rows)
    if not check_walls(scan.rows):
        raise CubError("map is not closed by walls")
    if scan.start is None:
        raise CubError("no player start position")
    if color_lines != _COLOR_LINES:
        raise CubError("floor and ceiling colours must each be given once")
    if scan.several_players:
        raise CubError("more than one player start position")
    if scan.blank_gap:
        raise CubError("empty line inside the map")
    if scan.stray_chars:
        raise CubError("invalid character in the map")

    config.grid = scan.rows
    config.start_row, config.start_col, config.direction = scan.start
    return config


def parse_scene_file(path):
    """Read and validate the scene file at ``path``."""
    return parse_scene(read_lines(path))


def check_cub_name(path):
    """Return ``path`` if its last extension starts with ``cub``; raise otherwise."""
    text = os.fspath(path)
    dot = text.rfind(".")
    if dot <= 0 or not text.startswith("cub", dot + 1):
        raise CubError(f"invalid scene file name {text!r}")
    return path